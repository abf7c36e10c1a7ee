"""
Paint and color values for ``fill``, ``stroke`` and friends.

Provides:
- Paint: a color value, a keyword such as ``currentColor`` or a verbatim
  paint reference
- Color: ``#rrggbb``, ``rgb(r,g,b)``, ``rgb(r%,g%,b%)`` or a color name
- PAINT_NONE, PAINT_INHERIT, PAINT_CURRENT_COLOR, COLOR_INHERIT sentinels

Color components never clamp: they wrap (absolute value modulo 256, or
modulo 101 above 100 for percentages).
"""

from typing import Union

from svg_values.errors import (
    EmptyColorNameError,
    EmptyPaintValueError,
    require_not_empty,
)
from svg_values.values.value_base import ValueBase

_COMPONENT_DIVISOR = 0x100


def _wrap_component(value: int) -> int:
    return abs(int(value)) % _COMPONENT_DIVISOR


def _wrap_percentage(value: int) -> int:
    value = abs(int(value))
    return value % 101 if value > 100 else value


class Paint(ValueBase):
    """Restricted string value for a paint attribute."""

    __slots__ = ('_value',)

    def __init__(self, value: Union[str, 'Color']):
        if isinstance(value, Color):
            value = value.value
        self._value = require_not_empty(value, "value", EmptyPaintValueError)

    @property
    def value(self) -> str:
        return self._value

    def _key(self) -> tuple:
        return (self._value,)

    def __str__(self) -> str:
        return self._value


class Color(Paint):
    """Color value; build from components with from_rgb/rgb."""

    __slots__ = ()

    def __init__(self, name: Union[str, 'Color']):
        # Stored verbatim ("black", "#fff", ...)
        if isinstance(name, Color):
            name = name.value
        self._value = require_not_empty(name, "name", EmptyColorNameError)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> 'Color':
        """``#rrggbb``; components wrap as abs(v) % 256."""
        return cls("#%02x%02x%02x" % (
            _wrap_component(red), _wrap_component(green), _wrap_component(blue)))

    @classmethod
    def rgb(cls, red: int, green: int, blue: int, percentage: bool = False) -> 'Color':
        """Functional notation ``rgb(r,g,b)`` or ``rgb(r%,g%,b%)``.

        Args:
            red, green, blue: components (0..255, or 0..100 with percentage)
            percentage: use percentages; values above 100 wrap modulo 101
        """
        if percentage:
            return cls("rgb(%d%%,%d%%,%d%%)" % (
                _wrap_percentage(red), _wrap_percentage(green), _wrap_percentage(blue)))
        return cls("rgb(%d,%d,%d)" % (
            _wrap_component(red), _wrap_component(green), _wrap_component(blue)))


PAINT_NONE = Paint("none")
PAINT_INHERIT = Paint("inherit")
PAINT_CURRENT_COLOR = Paint("currentColor")
COLOR_INHERIT = Color("inherit")
