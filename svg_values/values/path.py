"""
Команды SVG-пути (атрибут ``d``) и их сериализация.

Содержит:
- PathCommand и восемь вариантов: MoveTo, LineTo, HLineTo, VLineTo,
  CubicCurveTo (+ smooth), QuadraticCurveTo (+ smooth), ArcTo, ClosePath
- serialize             — сборка строки ``d`` с пропуском повторяющихся букв
- commands_from_points  — ломаная из массива точек (numpy)

Буква команды в верхнем регистре — абсолютные координаты, в нижнем —
относительные. Параметры внутри команды разделяются запятой.
"""

from typing import Iterable, List, Optional

import numpy as np

from svg_values.errors import NullArgumentError, require_not_null
from svg_values.values.value_base import (
    ValueBase,
    all_integral,
    format_number,
    join_numbers,
)

CLOSE_PATH_LETTERS = frozenset("Zz")


def _letter(absolute: bool, letter: str) -> str:
    return letter.upper() if absolute else letter.lower()


class PathCommand(ValueBase):
    """One command of SVG path data: a letter plus its parameter text."""

    __slots__ = ('_letter', '_parameters')

    def __init__(self, letter: str, parameters: str):
        self._letter = require_not_null(letter, "letter")
        self._parameters = require_not_null(parameters, "parameters")

    @classmethod
    def _create(cls, letter: str, parameters: str) -> 'PathCommand':
        command = cls.__new__(cls)
        PathCommand.__init__(command, letter, parameters)
        return command

    @property
    def letter(self) -> str:
        return self._letter

    @property
    def parameters(self) -> str:
        return self._parameters

    @property
    def is_absolute(self) -> bool:
        return self._letter.isupper()

    @property
    def is_close(self) -> bool:
        return self._letter in CLOSE_PATH_LETTERS

    def _key(self) -> tuple:
        return (self._letter, self._parameters)

    def __str__(self) -> str:
        return self._letter + self._parameters


class MoveTo(PathCommand):
    """``M x,y``: start a new subpath."""

    __slots__ = ()

    def __init__(self, absolute: bool, x, y):
        super().__init__(_letter(absolute, 'M'), join_numbers(',', x, y))


class LineTo(PathCommand):
    """``L x,y``: straight line to a point."""

    __slots__ = ()

    def __init__(self, absolute: bool, x, y):
        super().__init__(_letter(absolute, 'L'), join_numbers(',', x, y))


class HLineTo(PathCommand):
    """``H x``: horizontal line."""

    __slots__ = ()

    def __init__(self, absolute: bool, x):
        super().__init__(_letter(absolute, 'H'), join_numbers(',', x))


class VLineTo(PathCommand):
    """``V y``: vertical line."""

    __slots__ = ()

    def __init__(self, absolute: bool, y):
        super().__init__(_letter(absolute, 'V'), join_numbers(',', y))


class CubicCurveTo(PathCommand):
    """``C x1,y1,x2,y2,x,y``: cubic Bézier curve.

    The smooth form ``S x2,y2,x,y`` reflects the previous control point and
    is built with :meth:`smooth`.
    """

    __slots__ = ()

    def __init__(self, absolute: bool, x1, y1, x2, y2, x, y):
        super().__init__(_letter(absolute, 'C'), join_numbers(',', x1, y1, x2, y2, x, y))

    @classmethod
    def smooth(cls, absolute: bool, x2, y2, x, y) -> 'CubicCurveTo':
        return cls._create(_letter(absolute, 'S'), join_numbers(',', x2, y2, x, y))


class QuadraticCurveTo(PathCommand):
    """``Q x1,y1,x,y``: quadratic Bézier curve; ``T x,y`` via :meth:`smooth`."""

    __slots__ = ()

    def __init__(self, absolute: bool, x1, y1, x, y):
        super().__init__(_letter(absolute, 'Q'), join_numbers(',', x1, y1, x, y))

    @classmethod
    def smooth(cls, absolute: bool, x, y) -> 'QuadraticCurveTo':
        return cls._create(_letter(absolute, 'T'), join_numbers(',', x, y))


class ArcTo(PathCommand):
    """``A rx,ry,rotation,large-arc,sweep,x,y``: elliptical arc.

    Flags always print as 1/0; the numeric parameters follow the usual
    integer/fractional rule.
    """

    __slots__ = ()

    def __init__(self, absolute: bool, rx, ry, rotation, large_arc: bool, sweep: bool, x, y):
        numbers = (rx, ry, rotation, x, y)
        for v in numbers:
            if v is None:
                raise NullArgumentError("values")
        fractional = not all_integral(numbers)
        parts = [format_number(v, fractional) for v in (rx, ry, rotation)]
        parts += ['1' if large_arc else '0', '1' if sweep else '0']
        parts += [format_number(v, fractional) for v in (x, y)]
        super().__init__(_letter(absolute, 'A'), ','.join(parts))


class ClosePath(PathCommand):
    """``Z``: close the current subpath."""

    __slots__ = ()

    def __init__(self, absolute: bool = True):
        super().__init__(_letter(absolute, 'Z'), "")


def serialize(commands: Iterable[PathCommand]) -> str:
    """Build the text of a path ``d`` attribute.

    Consecutive commands with the same letter share one letter
    ("L10,10 20,10"). Close-path always prints its letter and forces the
    following command to print its own.

    Raises:
        NullArgumentError: commands or one of its elements is None
    """
    require_not_null(commands, "commands")
    tokens: List[str] = []
    last: Optional[str] = None
    for command in commands:
        if command is None:
            raise NullArgumentError("commands element")
        if command.is_close or command.letter != last:
            tokens.append(command.letter + command.parameters)
        else:
            tokens.append(command.parameters)
        last = None if command.is_close else command.letter
    return " ".join(tokens)


def commands_from_points(
    points,
    closed: bool = False,
    absolute: bool = True,
) -> List[PathCommand]:
    """Build a polyline as MoveTo followed by LineTo commands.

    Args:
        points: array-like of shape (N, 2); integer arrays keep integer output
        closed: append ClosePath
        absolute: absolute commands, or relative steps between points

    Returns:
        List of commands (empty for zero points).

    Raises:
        ValueError: points is not of shape (N, 2)
    """
    pts = np.asarray(require_not_null(points, "points"))
    if pts.size == 0:
        return []
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"Points must have shape (N, 2), got {pts.shape}")

    if not absolute:
        pts = np.vstack([pts[:1], np.diff(pts, axis=0)])

    coords = pts.tolist()
    commands: List[PathCommand] = [MoveTo(absolute, *coords[0])]
    commands.extend(LineTo(absolute, x, y) for x, y in coords[1:])
    if closed:
        commands.append(ClosePath(absolute))
    return commands
