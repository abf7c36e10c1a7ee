"""
svg_values — типизированные значения атрибутов SVG и их текстовая запись.

Арифметика и пересчёт единиц: svg_values.values.calculator.
"""

from svg_values.logging_config import (
    setup_logging,
    setup_logging_from_config,
    get_logger,
    configure_default_logging,
    log_timing,
    timed,
    LogContext,
)
from svg_values.errors import (
    SVGValueError,
    NullArgumentError,
    EmptyArgumentError,
    EmptyColorNameError,
    EmptyPaintValueError,
    UnitMismatchError,
    UnknownUnitError,
    UnconvertibleUnitError,
)

__version__ = "0.1.0"

__all__ = [
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
    "configure_default_logging",
    "log_timing",
    "timed",
    "LogContext",
    "SVGValueError",
    "NullArgumentError",
    "EmptyArgumentError",
    "EmptyColorNameError",
    "EmptyPaintValueError",
    "UnitMismatchError",
    "UnknownUnitError",
    "UnconvertibleUnitError",
]
