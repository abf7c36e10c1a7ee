"""Shared helpers for values built from a name token plus numeric parameters."""

from typing import Iterable

from svg_values.errors import NullArgumentError
from svg_values.values.units import format_fixed, is_integral


def all_integral(values: Iterable) -> bool:
    """True if every value is an integer (int, numpy integer, bool)."""
    return all(is_integral(v) for v in values)


def format_number(value, fractional: bool) -> str:
    """Plain integer text, or three decimals when fractional is set."""
    if value is None:
        raise NullArgumentError("value")
    return format_fixed(value) if fractional else str(int(value))


def join_numbers(separator: str, *values) -> str:
    """Join numbers for an attribute value.

    All-integer arguments print as plain integers; as soon as one argument
    is a float every argument prints with three decimals.

    Raises:
        NullArgumentError: any value is None
    """
    for v in values:
        if v is None:
            raise NullArgumentError("values")
    fractional = not all_integral(values)
    return separator.join(format_number(v, fractional) for v in values)


class ValueBase:
    """Immutable value identified by its concrete type and SVG text.

    Subclasses provide ``_key()``; equality requires the same concrete
    class and the same key.
    """

    __slots__ = ()

    def _key(self) -> tuple:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"
