"""
JSON configuration file for the svg_values command line.

Sections map one-to-one onto dataclasses; every section also knows how to
turn its plain JSON values into typed svg_values objects (Unit, Millimeter,
Paint), so invalid identifiers fail with the usual SVGValueError subclasses
at the point of use.

Lookup order for ``.svgvalues.json``:
1. explicit path (``--config``)
2. current working directory
3. user's home directory

Example .svgvalues.json:
{
    "logging": {"level": "DEBUG", "json_file": "svg_values.log.json"},
    "conversion": {"default_unit": "in", "default_target": "px"},
    "output": {"output_dir": "previews", "width": 100.0, "height": 100.0,
               "stroke": "#ff304e"}
}
"""

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from svg_values.values.measurement import Millimeter
from svg_values.values.paint import Color, Paint
from svg_values.values.units import Unit

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".svgvalues.json"

CONVERSION_TARGETS = ("mm", "px")

PathLike = Union[str, Path]


@dataclass
class LoggingConfig:
    level: str = "INFO"
    json_file: str = ""  # "" = no JSON log
    use_colors: bool = True


@dataclass
class ConversionConfig:
    """Defaults of ``convert`` when --unit / --to are omitted."""
    default_unit: str = "px"
    default_target: str = "mm"

    def source_unit(self) -> Unit:
        """Unit of default_unit (UnknownUnitError if not an identifier)."""
        return Unit.lookup(self.default_unit)

    def target(self) -> str:
        if self.default_target not in CONVERSION_TARGETS:
            raise ValueError(
                f"default_target must be one of {CONVERSION_TARGETS}, "
                f"got {self.default_target!r}"
            )
        return self.default_target


@dataclass
class OutputConfig:
    """Preview sheet: size and line style in millimeters."""
    output_dir: str = ""
    prefix: str = ""
    width: float = 210.0
    height: float = 297.0
    stroke: str = "black"
    fill: str = "none"
    stroke_width: float = 0.5

    def sheet_size(self) -> Tuple[Millimeter, Millimeter]:
        return Millimeter(self.width), Millimeter(self.height)

    def stroke_paint(self) -> Color:
        return Color(self.stroke)

    def fill_paint(self) -> Paint:
        return Paint(self.fill)

    def line_width(self) -> Millimeter:
        return Millimeter(self.stroke_width)

    def resolve(self, output: PathLike) -> Path:
        """Place a preview file name under output_dir, with prefix.

        Absolute paths keep their directory; the prefix is always applied.
        """
        path = Path(output)
        if self.prefix:
            path = path.with_name(self.prefix + path.name)
        if self.output_dir and not path.is_absolute():
            path = Path(self.output_dir) / path
        return path


@dataclass
class ProjectConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def sections(self) -> Iterator[Tuple[str, Any]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: PathLike) -> None:
        path = Path(path)
        path.write_text(self.to_json(), encoding='utf-8')
        logger.info("Configuration saved to %s", path)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectConfig':
        """Build a configuration from parsed JSON.

        Keys starting with "_" are comments. Unknown sections and keys are
        skipped with a DEBUG message, so newer files still load.
        """
        config = cls()
        for name, section in config.sections():
            values = data.get(name)
            if values is None:
                continue
            if not isinstance(values, dict):
                logger.debug("Section %r is not an object, ignored", name)
                continue
            known = {f.name for f in fields(section)}
            for key, value in values.items():
                if key.startswith('_'):
                    continue
                if key not in known:
                    logger.debug("Unknown key %s.%s ignored", name, key)
                    continue
                setattr(section, key, value)
        return config

    @classmethod
    def from_json(cls, json_str: str) -> 'ProjectConfig':
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def load(cls, path: PathLike) -> 'ProjectConfig':
        """Read a configuration file.

        Raises:
            OSError: file cannot be read
            json.JSONDecodeError: file is not valid JSON
        """
        path = Path(path)
        config = cls.from_json(path.read_text(encoding='utf-8'))
        logger.info("Configuration loaded from %s", path)
        return config


def _candidates(explicit_config: Optional[PathLike]) -> Iterator[Path]:
    if explicit_config:
        yield Path(explicit_config)
    yield Path.cwd() / CONFIG_FILENAME
    yield Path.home() / CONFIG_FILENAME


def find_config_file(explicit_config: Optional[PathLike] = None) -> Optional[Path]:
    """First existing file of: explicit path, cwd, home; None if none exists.

    A missing explicit path is logged and the search goes on.
    """
    for candidate in _candidates(explicit_config):
        if candidate.is_file():
            return candidate
        if explicit_config and candidate == Path(explicit_config):
            logger.warning("Explicit config not found: %s", candidate)
    return None


def load_config(explicit_config: Optional[PathLike] = None) -> ProjectConfig:
    """Load the first configuration file found, or the defaults.

    Unreadable or malformed files are logged and replaced by defaults.
    """
    config_path = find_config_file(explicit_config)
    if config_path is None:
        return ProjectConfig()
    try:
        return ProjectConfig.load(config_path)
    except (json.JSONDecodeError, OSError) as e:
        logger.error("Failed to load config %s: %s", config_path, e)
        return ProjectConfig()


def merge_configs(base: ProjectConfig, override: ProjectConfig) -> ProjectConfig:
    """Copy of base with every non-default value of override applied."""
    defaults = ProjectConfig().to_dict()
    merged = base.to_dict()
    for name, values in override.to_dict().items():
        for key, value in values.items():
            if value != defaults[name][key]:
                merged[name][key] = value
    return ProjectConfig.from_dict(merged)


_SECTION_NOTES = {
    "logging": "Level name (DEBUG, INFO, ...), optional JSON log file",
    "conversion": "Unit identifiers: px, mm, cm, in, pt, pc; target mm or px",
    "output": "Preview sheet size and line style, lengths in millimeters",
}


def create_sample_config(path: PathLike = CONFIG_FILENAME) -> None:
    """Write the default configuration with explanatory "_comment" keys."""
    sample: Dict[str, Any] = {"_comment": "svg_values configuration", "_version": "1.0"}
    for name, values in ProjectConfig().to_dict().items():
        sample[name] = {"_comment": _SECTION_NOTES[name], **values}

    path = Path(path)
    path.write_text(json.dumps(sample, indent=2, ensure_ascii=False), encoding='utf-8')
    logger.info("Sample configuration created: %s", path)
