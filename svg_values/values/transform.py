"""
SVG transform functions for the ``transform`` attribute.

Each transform renders as ``name(params)`` with parameters separated by a
single space, e.g. ``rotate(45 10 10)`` or ``matrix(1 0 0 1 0 0)``.
"""

from typing import Iterable

from svg_values.errors import (
    NullArgumentError,
    require_not_empty,
    require_not_null,
)
from svg_values.values.value_base import ValueBase, join_numbers

TRANSFORM_MATRIX = "matrix"
TRANSFORM_ROTATE = "rotate"
TRANSFORM_SCALE = "scale"
TRANSFORM_SKEW_X = "skewX"
TRANSFORM_SKEW_Y = "skewY"
TRANSFORM_TRANSLATE = "translate"


class Transform(ValueBase):
    """Transform function name plus its parameter text."""

    __slots__ = ('_name', '_parameters')

    def __init__(self, name: str, parameters: str):
        self._name = require_not_empty(name, "name")
        self._parameters = require_not_empty(parameters, "parameters")

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> str:
        return self._parameters

    def _key(self) -> tuple:
        return (self._name, self._parameters)

    def __str__(self) -> str:
        return f"{self._name}({self._parameters})"


class Matrix(Transform):
    __slots__ = ()

    def __init__(self, a, b, c, d, e, f):
        super().__init__(TRANSFORM_MATRIX, join_numbers(' ', a, b, c, d, e, f))


class Rotate(Transform):
    """Rotation by angle degrees, optionally about the point (x, y)."""

    __slots__ = ()

    def __init__(self, angle, x=None, y=None):
        if x is None and y is None:
            parameters = join_numbers(' ', angle)
        elif x is None or y is None:
            raise NullArgumentError("y" if y is None else "x")
        else:
            parameters = join_numbers(' ', angle, x, y)
        super().__init__(TRANSFORM_ROTATE, parameters)


class Scale(Transform):
    """Scale by x, and by y if given (SVG uses x for both otherwise)."""

    __slots__ = ()

    def __init__(self, x, y=None):
        values = (x,) if y is None else (x, y)
        super().__init__(TRANSFORM_SCALE, join_numbers(' ', *values))


class SkewX(Transform):
    __slots__ = ()

    def __init__(self, angle):
        super().__init__(TRANSFORM_SKEW_X, join_numbers(' ', angle))


class SkewY(Transform):
    __slots__ = ()

    def __init__(self, angle):
        super().__init__(TRANSFORM_SKEW_Y, join_numbers(' ', angle))


class Translate(Transform):
    """Shift by x, and by y if given (0 otherwise)."""

    __slots__ = ()

    def __init__(self, x, y=None):
        values = (x,) if y is None else (x, y)
        super().__init__(TRANSFORM_TRANSLATE, join_numbers(' ', *values))


def transform_list(transforms: Iterable[Transform]) -> str:
    """Join transforms for the ``transform`` attribute (applied right to left)."""
    require_not_null(transforms, "transforms")
    parts = []
    for transform in transforms:
        if transform is None:
            raise NullArgumentError("transforms element")
        parts.append(str(transform))
    return " ".join(parts)
