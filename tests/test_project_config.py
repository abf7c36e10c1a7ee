"""
Unit tests for svg_values.project_config module.

Tests:
- Configuration dataclasses
- JSON serialization/deserialization
- Config file search and loading
- Config merging
"""

import json
from pathlib import Path

import pytest

from svg_values.errors import EmptyColorNameError, UnknownUnitError
from svg_values.values.paint import PAINT_NONE, Color
from svg_values.values.units import Unit
from svg_values.project_config import (
    CONFIG_FILENAME,
    ConversionConfig,
    LoggingConfig,
    OutputConfig,
    ProjectConfig,
    create_sample_config,
    find_config_file,
    load_config,
    merge_configs,
)


@pytest.fixture
def isolated_dirs(tmp_path, monkeypatch):
    """Empty working and home directories."""
    cwd = tmp_path / "work"
    home = tmp_path / "home"
    cwd.mkdir()
    home.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv("HOME", str(home))
    return cwd, home


class TestSectionDefaults:
    """Tests for section dataclass defaults."""

    def test_logging_defaults(self):
        """Test default logging section."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.json_file == ""
        assert config.use_colors is True

    def test_conversion_defaults(self):
        """Test default conversion section."""
        config = ConversionConfig()
        assert config.default_unit == "px"
        assert config.default_target == "mm"

    def test_output_defaults(self):
        """Test default preview sheet is A4 portrait."""
        config = OutputConfig()
        assert (config.width, config.height) == (210.0, 297.0)
        assert config.stroke == "black"
        assert config.fill == "none"
        assert config.stroke_width == 0.5


class TestTypedValues:
    """Tests for conversion of section values to svg_values objects."""

    def test_source_unit(self):
        """Test unit identifiers resolve case-insensitively."""
        assert ConversionConfig(default_unit="IN").source_unit() is Unit.INCH

    def test_unknown_source_unit(self):
        """Test an invalid identifier fails at the point of use."""
        with pytest.raises(UnknownUnitError):
            ConversionConfig(default_unit="furlong").source_unit()

    def test_target(self):
        """Test only mm and px are valid targets."""
        assert ConversionConfig(default_target="px").target() == "px"
        with pytest.raises(ValueError):
            ConversionConfig(default_target="pt").target()

    def test_sheet_values(self):
        """Test sheet size and line style."""
        output = OutputConfig(width=100.0, height=50.0, stroke="#ff304e", stroke_width=0.35)
        width, height = output.sheet_size()
        assert (str(width), str(height)) == ("100.000mm", "50.000mm")
        assert output.stroke_paint() == Color("#ff304e")
        assert output.fill_paint() == PAINT_NONE
        assert str(output.line_width()) == "0.350mm"

    def test_empty_stroke(self):
        """Test an empty stroke color is rejected."""
        with pytest.raises(EmptyColorNameError):
            OutputConfig(stroke="").stroke_paint()

    def test_resolve(self, tmp_path):
        """Test output_dir and prefix placement."""
        output = OutputConfig(output_dir="previews", prefix="p_")
        assert output.resolve("line.svg") == Path("previews") / "p_line.svg"
        absolute = tmp_path / "line.svg"
        assert output.resolve(absolute) == tmp_path / "p_line.svg"
        assert OutputConfig().resolve("line.svg") == Path("line.svg")


class TestProjectConfig:
    """Tests for ProjectConfig dataclass."""

    def test_to_dict(self):
        """Test converting config to dictionary."""
        d = ProjectConfig().to_dict()
        assert set(d) == {"logging", "conversion", "output"}
        assert d["conversion"]["default_target"] == "mm"

    def test_to_json(self):
        """Test converting config to JSON string."""
        data = json.loads(ProjectConfig().to_json())
        assert data["output"]["width"] == 210.0

    def test_from_dict(self):
        """Test creating config from dictionary."""
        config = ProjectConfig.from_dict({
            "conversion": {"default_unit": "in", "default_target": "px"},
            "output": {"stroke": "#ff304e"},
        })
        assert config.conversion.default_unit == "in"
        assert config.conversion.default_target == "px"
        assert config.output.stroke == "#ff304e"
        assert config.output.width == 210.0

    def test_unknown_keys_ignored(self):
        """Test comments, unknown keys and unknown sections are ignored."""
        config = ProjectConfig.from_dict({
            "_comment": "x",
            "drawing": {"format": "A3"},
            "logging": {"_comment": "y", "colour": False, "level": "DEBUG"},
        })
        assert config.logging.level == "DEBUG"
        assert not hasattr(config.logging, "colour")

    def test_from_json(self):
        """Test creating config from JSON string."""
        config = ProjectConfig.from_json('{"logging": {"json_file": "log.json"}}')
        assert config.logging.json_file == "log.json"

    def test_save_and_load(self, tmp_path):
        """Test saving and loading config file."""
        config = ProjectConfig()
        config.output.output_dir = "previews"
        config.logging.use_colors = False
        path = tmp_path / "config.json"

        config.save(path)
        loaded = ProjectConfig.load(path)

        assert loaded.output.output_dir == "previews"
        assert loaded.logging.use_colors is False


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_explicit_config_found(self, tmp_path, isolated_dirs):
        """Test finding explicit config path."""
        path = tmp_path / "explicit.json"
        path.write_text("{}", encoding="utf-8")
        assert find_config_file(explicit_config=path) == path

    def test_nothing_found(self, isolated_dirs):
        """Test that a missing explicit config and no files give None."""
        assert find_config_file(explicit_config="/nonexistent/path.json") is None

    def test_cwd_before_home(self, isolated_dirs):
        """Test working directory wins over home directory."""
        cwd, home = isolated_dirs
        (cwd / CONFIG_FILENAME).write_text("{}", encoding="utf-8")
        (home / CONFIG_FILENAME).write_text("{}", encoding="utf-8")
        assert find_config_file() == Path.cwd() / CONFIG_FILENAME

    def test_home_fallback(self, isolated_dirs):
        """Test home directory config is found last."""
        _, home = isolated_dirs
        (home / CONFIG_FILENAME).write_text("{}", encoding="utf-8")
        assert find_config_file() == home / CONFIG_FILENAME


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_file(self, isolated_dirs):
        """Test defaults when no file exists."""
        assert load_config() == ProjectConfig()

    def test_loads_cwd_file(self, isolated_dirs):
        """Test values from the working directory file."""
        cwd, _ = isolated_dirs
        (cwd / CONFIG_FILENAME).write_text(
            '{"conversion": {"default_unit": "pt"}}', encoding="utf-8")
        assert load_config().conversion.default_unit == "pt"

    def test_invalid_json_falls_back(self, isolated_dirs, caplog):
        """Test malformed files are logged and replaced by defaults."""
        cwd, _ = isolated_dirs
        (cwd / CONFIG_FILENAME).write_text("{not json", encoding="utf-8")
        assert load_config() == ProjectConfig()
        assert "Failed to load config" in caplog.text


class TestMergeConfigs:
    """Tests for merge_configs function."""

    def test_override_non_defaults(self):
        """Test only non-default override values are applied."""
        base = ProjectConfig()
        base.output.stroke = "red"
        base.conversion.default_unit = "in"
        override = ProjectConfig()
        override.conversion.default_unit = "pc"

        merged = merge_configs(base, override)

        assert merged.conversion.default_unit == "pc"
        assert merged.output.stroke == "red"

    def test_inputs_unchanged(self):
        """Test base is not modified."""
        base = ProjectConfig()
        override = ProjectConfig()
        override.logging.level = "DEBUG"

        merge_configs(base, override)

        assert base.logging.level == "INFO"


class TestCreateSampleConfig:
    """Tests for create_sample_config function."""

    def test_sample_loads(self, tmp_path):
        """Test the sample file is valid and loads to defaults."""
        path = tmp_path / CONFIG_FILENAME
        create_sample_config(path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert "_comment" in data
        assert ProjectConfig.load(path) == ProjectConfig()
