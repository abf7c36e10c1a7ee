"""
Logging for svg_values: console and JSON-lines output.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed by the application (main.py) through setup_logging() or
setup_logging_from_config(). Everything hangs off the "svg_values" logger,
so records of svg_values.values.calculator, svg_values.drawing... share the
same handlers.

Provides:
- JSONFormatter: one JSON object per line, extras as top-level keys
- ConsoleFormatter: "[12:00:00] INFO     values.calculator: ... [k=v]"
- setup_logging, setup_logging_from_config, configure_default_logging
- log_timing (context manager), timed (decorator)
- LogContext: scoped fields added to every record

Usage:
    from svg_values.logging_config import setup_logging, log_timing

    setup_logging(level="DEBUG", json_file="svg_values.log.json")
    with log_timing(logger, "Writing preview", path="square.svg"):
        drawing.save()
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional, TypeVar, Union

if TYPE_CHECKING:
    from svg_values.project_config import LoggingConfig

F = TypeVar('F', bound=Callable[..., Any])

PACKAGE_LOGGER = "svg_values"

# Attributes every LogRecord has; the rest came in through extra= or LogContext
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {'message', 'asctime', 'taskName'}


def record_extras(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields a record carries beyond the standard LogRecord attributes."""
    return {
        key: value for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRIBUTES
    }


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

class JSONFormatter(logging.Formatter):
    """Machine-readable records, one JSON object per line.

    Keys: timestamp, level, logger, message; "location" for DEBUG and for
    WARNING and above; "exception" when exc_info is set; extras last.
    Extras JSON cannot encode are written as str().
    """

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    @staticmethod
    def _wants_location(record: logging.LogRecord) -> bool:
        return record.levelno <= logging.DEBUG or record.levelno >= logging.WARNING

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self._wants_location(record):
            entry["location"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        if self.include_extra:
            entry.update(record_extras(record))
        return json.dumps(entry, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Single-line records for a terminal.

    The "svg_values." prefix is dropped from logger names; extras follow
    the message in brackets, floats with three significant digits and long
    sequences as an item count.
    """

    LEVEL_COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True, show_extra: bool = True):
        super().__init__()
        self.use_colors = use_colors
        self.show_extra = show_extra

    def _level(self, levelname: str) -> str:
        text = f"{levelname:8}"
        color = self.LEVEL_COLORS.get(levelname) if self.use_colors else None
        return f"{color}{text}{self.RESET}" if color else text

    @staticmethod
    def _short_name(name: str) -> str:
        prefix = PACKAGE_LOGGER + "."
        return name[len(prefix):] if name.startswith(prefix) else name

    @staticmethod
    def _compact(value: Any) -> str:
        if isinstance(value, float):
            return f"{value:.3g}"
        if isinstance(value, (list, tuple)) and len(value) > 3:
            return f"[...{len(value)} items]"
        return str(value)

    def format(self, record: logging.LogRecord) -> str:
        clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        line = (f"[{clock}] {self._level(record.levelname)} "
                f"{self._short_name(record.name)}: {record.getMessage()}")

        if self.show_extra:
            extras = record_extras(record)
            if extras:
                line += " [" + ", ".join(
                    f"{key}={self._compact(value)}" for key, value in extras.items()
                ) + "]"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: Union[int, str] = logging.INFO,
    json_file: Optional[Union[str, Path]] = None,
    console: bool = True,
    use_colors: bool = True,
    root_logger: bool = False,
) -> logging.Logger:
    """Install handlers on the svg_values logger (or the root logger).

    Handlers from an earlier call are removed and closed first, so the
    function can be called again to reconfigure.

    Args:
        level: logging constant or level name ("debug", "INFO", ...)
        json_file: also write JSON lines to this file
        console: human-readable output on stderr
        use_colors: ANSI colors on the console
        root_logger: configure "" instead of "svg_values"

    Returns:
        The configured logger.

    Raises:
        ValueError: unknown level name
    """
    level = _resolve_level(level)
    logger = logging.getLogger("" if root_logger else PACKAGE_LOGGER)
    logger.setLevel(level)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    if console:
        logger.addHandler(_handler(
            logging.StreamHandler(sys.stderr), level, ConsoleFormatter(use_colors=use_colors)))
    if json_file:
        logger.addHandler(_handler(
            logging.FileHandler(Path(json_file), encoding='utf-8'), level, JSONFormatter()))

    # Keep package records out of an application's root handlers
    logger.propagate = root_logger
    return logger


def setup_logging_from_config(
    config: 'LoggingConfig',
    verbose: bool = False,
    json_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """setup_logging() from the "logging" config section.

    verbose forces DEBUG; an explicit json_file wins over the configured one.
    """
    return setup_logging(
        level=logging.DEBUG if verbose else config.level,
        json_file=json_file or config.json_file or None,
        use_colors=config.use_colors,
    )


def configure_default_logging(verbose: bool = False) -> logging.Logger:
    """Console only: DEBUG if verbose, INFO otherwise."""
    return setup_logging(level=logging.DEBUG if verbose else logging.INFO)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------

@contextmanager
def log_timing(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
    **fields: Any
) -> Iterator[Dict[str, Any]]:
    """Log start and end of a block with its duration.

    Yields a dict the block may fill; it is logged with the completion
    record and gets "elapsed_seconds". A failure is logged at ERROR and
    re-raised.

    Example:
        with log_timing(logger, "Writing preview", path=str(output)):
            drawing.save()
    """
    info: Dict[str, Any] = {}
    logger.log(level, "Starting: %s", operation,
               extra={"event": "start", "operation": operation, **fields})
    started = time.perf_counter()
    try:
        yield info
    except Exception as exc:
        elapsed = time.perf_counter() - started
        logger.error("Failed: %s (%.3fs) - %s", operation, elapsed, exc,
                     extra={"event": "error", "operation": operation,
                            "elapsed_seconds": elapsed, "error": str(exc), **fields})
        raise
    info["elapsed_seconds"] = time.perf_counter() - started
    logger.log(level, "Completed: %s (%.3fs)", operation, info["elapsed_seconds"],
               extra={"event": "complete", "operation": operation, **fields, **info})


def timed(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    operation: Optional[str] = None,
) -> Callable[[F], F]:
    """Decorator form of log_timing (module logger and function name by default)."""
    def decorator(func: F) -> F:
        name = operation or func.__name__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with log_timing(logger or logging.getLogger(func.__module__), name, level):
                return func(*args, **kwargs)

        return wrapper  # type: ignore
    return decorator


# ---------------------------------------------------------------------------
# Context fields
# ---------------------------------------------------------------------------

class _ContextFilter(logging.Filter):
    def __init__(self, fields: Dict[str, Any]):
        super().__init__()
        self.fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        record.__dict__.update(self.fields)
        return True


class LogContext:
    """Add fields to every record handled while the context is active.

    The filter goes on the handlers of the svg_values logger, not on the
    logger itself, so records of child loggers get the fields too.

    Example:
        with LogContext(command="convert"):
            to_millimeter(value)   # DEBUG record carries command=convert
    """

    _current: Optional['LogContext'] = None

    def __init__(self, **fields: Any):
        self.fields = fields
        self._filter = _ContextFilter(fields)
        self._handlers: List[logging.Handler] = []
        self._previous: Optional['LogContext'] = None

    def __enter__(self) -> 'LogContext':
        self._previous, LogContext._current = LogContext._current, self
        self._handlers = list(logging.getLogger(PACKAGE_LOGGER).handlers)
        for handler in self._handlers:
            handler.addFilter(self._filter)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        for handler in self._handlers:
            handler.removeFilter(self._filter)
        self._handlers = []
        LogContext._current = self._previous

    @classmethod
    def current(cls) -> Optional['LogContext']:
        return cls._current
