"""
Numeric SVG values bound to a unit.

Provides:
- Measurement: magnitude + Unit, formatted once at construction
- Degree: unit-less angle, normalized modulo 360
- Millimeter, Percent, Pixel: measurements with a fixed unit
- UserUnit: unit-less number in the user coordinate system

Equality and hashing use the formatted string only: two values that round
to the same text are equal even when their magnitudes differ.
"""

from typing import Union

from svg_values.errors import UnitMismatchError, require_not_null
from svg_values.values.units import Unit, is_integral

Number = Union[int, float]


class Measurement:
    """Immutable magnitude with a unit.

    Integer magnitudes keep integer formatting ("5px"); any other number is
    stored as float and printed with three decimals ("5.000px").

    Attributes are read-only properties; arithmetic lives in
    svg_values.values.calculator and always builds new instances.
    """

    __slots__ = ('_magnitude', '_unit', '_is_integer', '_formatted')

    def __init__(self, value: Number, unit: Unit):
        require_not_null(value, "value")
        require_not_null(unit, "unit")
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be a Unit, got {type(unit).__name__}")

        value = self._normalize(int(value) if is_integral(value) else float(value))
        self._magnitude = value
        self._unit = unit
        self._is_integer = isinstance(value, int)
        self._formatted = unit.format(value)

    @staticmethod
    def _normalize(value: Number) -> Number:
        return value

    @property
    def magnitude(self) -> Number:
        """Raw magnitude (int or float) after normalization."""
        return self._magnitude

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def is_integer(self) -> bool:
        return self._is_integer

    @property
    def is_negative(self) -> bool:
        return self._magnitude < 0

    @property
    def is_zero(self) -> bool:
        return self._magnitude == 0

    @property
    def value(self) -> str:
        """Canonical SVG text, e.g. "12.500mm"."""
        return self._formatted

    def _check_unit(self, other: 'Measurement') -> None:
        if not isinstance(other, Measurement):
            raise TypeError(f"Cannot compare Measurement with {type(other).__name__}")
        if other.unit is not self._unit:
            raise UnitMismatchError(self._unit.name, other.unit.name)

    def compare_to(self, other: 'Measurement') -> int:
        """Compare magnitudes: -1, 0 or 1.

        Raises:
            UnitMismatchError: units differ
        """
        self._check_unit(other)
        a, b = float(self._magnitude), float(other.magnitude)
        return (a > b) - (a < b)

    def __lt__(self, other: 'Measurement') -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: 'Measurement') -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: 'Measurement') -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: 'Measurement') -> bool:
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._formatted == other._formatted

    def __hash__(self) -> int:
        return hash(self._formatted)

    def __str__(self) -> str:
        return self._formatted

    def __repr__(self) -> str:
        if type(self) is Measurement:
            return f"Measurement({self._magnitude!r}, Unit.{self._unit.name})"
        return f"{type(self).__name__}({self._magnitude!r})"


class Degree(Measurement):
    """Angle in degrees; 370 and 10, or -10 and 350, are the same value."""

    __slots__ = ()

    def __init__(self, value: Number):
        super().__init__(value, Unit.NONE)

    @staticmethod
    def _normalize(value: Number) -> Number:
        result = value % 360
        # A tiny negative float wraps to exactly 360.0
        return 0.0 if result == 360 else result


class Millimeter(Measurement):
    __slots__ = ()

    def __init__(self, value: Number):
        super().__init__(value, Unit.MILLIMETER)


class Percent(Measurement):
    __slots__ = ()

    def __init__(self, value: Number):
        super().__init__(value, Unit.PERCENT)


class Pixel(Measurement):
    __slots__ = ()

    def __init__(self, value: Number):
        super().__init__(value, Unit.PIXEL)


class UserUnit(Measurement):
    """Number in the current user coordinate system (no suffix)."""

    __slots__ = ()

    def __init__(self, value: Number):
        super().__init__(value, Unit.NONE)
