"""
Arithmetic and unit conversion over Measurement values.

All functions are pure: operands are never modified and every result is a
new instance of the operand's concrete variant, so Degree results wrap
modulo 360 again.

Conversion constants (CSS/SVG absolute lengths):
    1 in = 25.4 mm      = 96 px
    1 pc = 12.7 / 3 mm  = 16 px
    1 pt = 0.352778 mm  = 0.75 px
    1 cm = 10 mm        = 960 / 25.4 px
"""

import logging
from typing import List, Sequence, TypeVar

from svg_values.errors import (
    NullArgumentError,
    UnconvertibleUnitError,
    UnitMismatchError,
    require_not_null,
)
from svg_values.values.measurement import (
    Degree,
    Measurement,
    Millimeter,
    Number,
    Percent,
    Pixel,
    UserUnit,
)
from svg_values.values.units import Unit, is_integral

logger = logging.getLogger(__name__)

M = TypeVar('M', bound=Measurement)

MM_PER_INCH = 25.4
PX_PER_INCH = 96.0
MM_PER_PICA = 12.7 / 3.0
PX_PER_PICA = 16.0
MM_PER_POINT = 0.352778
PX_PER_POINT = 0.75
MM_PER_CENTIMETER = 10.0
PX_PER_CENTIMETER = 960.0 / 25.4
PX_PER_MM = PX_PER_INCH / MM_PER_INCH
MM_PER_PX = MM_PER_INCH / PX_PER_INCH

# Millimeter and pixel factors per unit. An int factor keeps integer
# magnitudes integer; a float factor always yields a float.
_TO_MILLIMETER = {
    Unit.INCH: MM_PER_INCH,
    Unit.PICA: MM_PER_PICA,
    Unit.POINT: MM_PER_POINT,
    Unit.CENTIMETER: 10,
    Unit.MILLIMETER: 1,
    Unit.PIXEL: MM_PER_PX,
}

_TO_PIXEL = {
    Unit.INCH: 96,
    Unit.PICA: 16,
    Unit.POINT: PX_PER_POINT,
    Unit.CENTIMETER: PX_PER_CENTIMETER,
    Unit.MILLIMETER: PX_PER_MM,
    Unit.PIXEL: 1,
}


def rewrap(template: M, amount: Number) -> M:
    """Build a value of the same variant (and unit) as template."""
    require_not_null(template, "value")
    if type(template) is Measurement:
        return Measurement(amount, template.unit)
    return type(template)(amount)


def _combine(values: Sequence[Measurement], name: str) -> List[Measurement]:
    """Check operands for None and for a common unit."""
    first = require_not_null(values[0], name)
    operands = [first]
    for v in values[1:]:
        if v is None:
            raise NullArgumentError(f"{name} element")
        if v.unit is not first.unit:
            raise UnitMismatchError(first.unit.name, v.unit.name)
        operands.append(v)
    return operands


def add(v1: M, *others: Measurement) -> M:
    """Sum measurements of one unit.

    The sum stays an integer when every operand is integer-valued.

    Raises:
        NullArgumentError: an operand is None
        UnitMismatchError: operands have different units
    """
    operands = _combine((v1,) + others, "v1")
    if all(v.is_integer for v in operands):
        total: Number = sum(v.magnitude for v in operands)
    else:
        total = sum(float(v.magnitude) for v in operands)
    return rewrap(v1, total)


def compare(v1: Measurement, v2: Measurement) -> int:
    """Three-way magnitude comparison of two measurements of one unit."""
    require_not_null(v1, "v1")
    require_not_null(v2, "v2")
    return v1.compare_to(v2)


def _sorted(v1: M, others: Sequence[M]) -> List[M]:
    operands = _combine((v1,) + tuple(others), "v1")
    # Stable: equal magnitudes keep argument order
    return sorted(operands, key=lambda v: float(v.magnitude))


def min(v1: M, *others: M) -> M:
    """Smallest operand; the first one among equals."""
    return _sorted(v1, others)[0]


def max(v1: M, *others: M) -> M:
    """Largest operand; the last one among equals."""
    return _sorted(v1, others)[-1]


def _apply(value: M, amount: Number) -> M:
    if value.is_integer and is_integral(amount):
        return rewrap(value, int(amount))
    return rewrap(value, float(amount))


def scale(value: M, factor: Number) -> M:
    """Multiply the magnitude by factor."""
    require_not_null(value, "value")
    require_not_null(factor, "factor")
    return _apply(value, value.magnitude * factor)


def offset(value: M, delta: Number) -> M:
    """Add delta to the magnitude."""
    require_not_null(value, "value")
    require_not_null(delta, "delta")
    return _apply(value, value.magnitude + delta)


def reduce(value: M, decrement: Number) -> M:
    """Subtract decrement from the magnitude."""
    require_not_null(value, "value")
    require_not_null(decrement, "decrement")
    return _apply(value, value.magnitude - decrement)


def _convert(value: Measurement, factors: dict, target: str) -> Number:
    if isinstance(value, (Degree, Percent)):
        raise UnconvertibleUnitError(type(value).__name__, target)
    if isinstance(value, UserUnit):
        # User units are CSS pixels
        unit = Unit.PIXEL
    else:
        unit = value.unit
    factor = factors.get(unit)
    if factor is None:
        raise UnconvertibleUnitError(unit.name, target)

    if value.is_integer and isinstance(factor, int):
        return value.magnitude * factor
    return float(value.magnitude) * factor


def to_millimeter(value: Measurement) -> Millimeter:
    """Convert a length to millimeters.

    Raises:
        NullArgumentError: value is None
        UnconvertibleUnitError: degrees, percentages, em/ex or plain numbers
    """
    require_not_null(value, "value")
    if isinstance(value, Millimeter):
        return Millimeter(value.magnitude)
    result = Millimeter(_convert(value, _TO_MILLIMETER, "millimeter"))
    logger.debug("Converted %s to %s", value, result)
    return result


def to_pixel(value: Measurement) -> Pixel:
    """Convert a length to pixels.

    Raises:
        NullArgumentError: value is None
        UnconvertibleUnitError: degrees, percentages, em/ex or plain numbers
    """
    require_not_null(value, "value")
    if isinstance(value, Pixel):
        return Pixel(value.magnitude)
    result = Pixel(_convert(value, _TO_PIXEL, "pixel"))
    logger.debug("Converted %s to %s", value, result)
    return result
