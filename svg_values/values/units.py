"""
Units of measure for SVG lengths and numbers.

Each unit owns two print templates: one for integer magnitudes and one for
fractional magnitudes (always exactly three decimals, "." as separator).
"""

import math
import numbers
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum

from svg_values.errors import UnknownUnitError, require_not_null

_THREE_PLACES = Decimal("0.001")
# Wide enough for every finite double at three decimals
_CONTEXT = Context(prec=400)


def is_integral(value) -> bool:
    """True for Python and numpy integers (bool included)."""
    return isinstance(value, numbers.Integral)


def format_fixed(value: float) -> str:
    """Format a float with exactly three decimals.

    Rounds half up on the shortest decimal representation of the float, so
    1.0005 becomes "1.001". The host locale is never consulted.

    Args:
        value: magnitude to format

    Returns:
        Fixed-point string, or NaN/Infinity/-Infinity for non-finite input.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    decimal = Decimal(repr(value))
    return str(decimal.quantize(_THREE_PLACES, rounding=ROUND_HALF_UP, context=_CONTEXT))


class Unit(Enum):
    """SVG units; the value is the identifier used as suffix."""
    NONE = ""
    CENTIMETER = "cm"
    EM = "em"
    EX = "ex"
    INCH = "in"
    MILLIMETER = "mm"
    PERCENT = "%"
    PICA = "pc"
    PIXEL = "px"
    POINT = "pt"

    @property
    def identifier(self) -> str:
        """Suffix appended to formatted magnitudes ("" for NONE)."""
        return self.value

    @property
    def integer_template(self) -> str:
        return "%d" + self.value.replace("%", "%%")

    @property
    def fractional_template(self) -> str:
        return "%s" + self.value.replace("%", "%%")

    def format(self, value) -> str:
        """Format a magnitude with this unit.

        Integers use the integer template ("5px"); everything else goes
        through the three-decimal template ("5.000px").
        """
        if is_integral(value):
            return self.integer_template % int(value)
        return self.fractional_template % format_fixed(value)

    @classmethod
    def lookup(cls, identifier: str) -> 'Unit':
        """Find the unit for an identifier, ignoring case.

        Args:
            identifier: unit suffix such as "px", "MM" or "" for NONE

        Raises:
            NullArgumentError: identifier is None
            UnknownUnitError: no unit has this identifier
        """
        require_not_null(identifier, "identifier")
        wanted = identifier.lower()
        for unit in cls:
            if unit.value.lower() == wanted:
                return unit
        raise UnknownUnitError(identifier)

    def __str__(self) -> str:
        return self.value
