"""
Короткие конструкторы значений SVG.

Относительные команды пути — ``move_to`` и т.п., абсолютные — с суффиксом
``_abs``. Целые аргументы дают целочисленную запись ("M0,0"), дробные —
три знака после точки ("M0.000,0.000").
"""

from typing import Optional

from svg_values.errors import require_not_null
from svg_values.values.measurement import (
    Degree,
    Measurement,
    Millimeter,
    Number,
    Percent,
    Pixel,
    UserUnit,
)
from svg_values.values.paint import COLOR_INHERIT, Color
from svg_values.values.path import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    HLineTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadraticCurveTo,
    VLineTo,
)
from svg_values.values.transform import (
    Matrix,
    Rotate,
    Scale,
    SkewX,
    SkewY,
    Translate,
)
from svg_values.values.units import Unit

# ---------------------------------------------------------------------------
# Числа с единицами
# ---------------------------------------------------------------------------

def centimeter(value: Number) -> Measurement:
    return Measurement(value, Unit.CENTIMETER)


def em(value: Number) -> Measurement:
    return Measurement(value, Unit.EM)


def ex(value: Number) -> Measurement:
    return Measurement(value, Unit.EX)


def inch(value: Number) -> Measurement:
    return Measurement(value, Unit.INCH)


def pica(value: Number) -> Measurement:
    return Measurement(value, Unit.PICA)


def point(value: Number) -> Measurement:
    return Measurement(value, Unit.POINT)


def millimeter(value: Number) -> Millimeter:
    return Millimeter(value)


def percent(value: Number) -> Percent:
    return Percent(value)


def pixel(value: Number) -> Pixel:
    return Pixel(value)


def degree(value: Number) -> Degree:
    return Degree(value)


def number(value: Number) -> UserUnit:
    """Unit-less number in user space."""
    return UserUnit(value)


# ---------------------------------------------------------------------------
# Цвета
# ---------------------------------------------------------------------------

def color(
    red=None,
    green: Optional[int] = None,
    blue: Optional[int] = None,
    percentage: Optional[bool] = None,
) -> Color:
    """Build a color.

    color()                          -> inherit
    color("black")                   -> black
    color(255, 48, 78)               -> #ff304e
    color(22, 33, 44, percentage=True)  -> rgb(22%,33%,44%)
    color(22, 33, 44, percentage=False) -> rgb(22,33,44)
    """
    if red is None and green is None and blue is None:
        return COLOR_INHERIT
    if isinstance(red, str):
        return Color(red)
    require_not_null(red, "red")
    require_not_null(green, "green")
    require_not_null(blue, "blue")
    if percentage is None:
        return Color.from_rgb(red, green, blue)
    return Color.rgb(red, green, blue, percentage=percentage)


# ---------------------------------------------------------------------------
# Команды пути
# ---------------------------------------------------------------------------

def move_to(x, y) -> PathCommand:
    return MoveTo(False, x, y)


def move_to_abs(x, y) -> PathCommand:
    return MoveTo(True, x, y)


def line_to(x, y) -> PathCommand:
    return LineTo(False, x, y)


def line_to_abs(x, y) -> PathCommand:
    return LineTo(True, x, y)


def h_line_to(x) -> PathCommand:
    return HLineTo(False, x)


def h_line_to_abs(x) -> PathCommand:
    return HLineTo(True, x)


def v_line_to(y) -> PathCommand:
    return VLineTo(False, y)


def v_line_to_abs(y) -> PathCommand:
    return VLineTo(True, y)


def cubic_curve_to(*args) -> PathCommand:
    """``c`` with six coordinates, smooth ``s`` with four."""
    return _cubic(False, args)


def cubic_curve_to_abs(*args) -> PathCommand:
    """``C`` with six coordinates, smooth ``S`` with four."""
    return _cubic(True, args)


def _cubic(absolute: bool, args: tuple) -> PathCommand:
    if len(args) == 6:
        return CubicCurveTo(absolute, *args)
    if len(args) == 4:
        return CubicCurveTo.smooth(absolute, *args)
    raise TypeError(f"cubic curve takes 4 or 6 coordinates, got {len(args)}")


def quadratic_curve_to(*args) -> PathCommand:
    """``q`` with four coordinates, smooth ``t`` with two."""
    return _quadratic(False, args)


def quadratic_curve_to_abs(*args) -> PathCommand:
    """``Q`` with four coordinates, smooth ``T`` with two."""
    return _quadratic(True, args)


def _quadratic(absolute: bool, args: tuple) -> PathCommand:
    if len(args) == 4:
        return QuadraticCurveTo(absolute, *args)
    if len(args) == 2:
        return QuadraticCurveTo.smooth(absolute, *args)
    raise TypeError(f"quadratic curve takes 2 or 4 coordinates, got {len(args)}")


def arc_to(rx, ry, rotation, large_arc: bool, sweep: bool, x, y) -> PathCommand:
    return ArcTo(False, rx, ry, rotation, large_arc, sweep, x, y)


def arc_to_abs(rx, ry, rotation, large_arc: bool, sweep: bool, x, y) -> PathCommand:
    return ArcTo(True, rx, ry, rotation, large_arc, sweep, x, y)


def close_path() -> PathCommand:
    return ClosePath()


# ---------------------------------------------------------------------------
# Преобразования
# ---------------------------------------------------------------------------

def matrix(a, b, c, d, e, f) -> Matrix:
    return Matrix(a, b, c, d, e, f)


def rotate(angle, x=None, y=None) -> Rotate:
    return Rotate(angle, x, y)


def scale(x, y=None) -> Scale:
    return Scale(x, y)


def skew_x(angle) -> SkewX:
    return SkewX(angle)


def skew_y(angle) -> SkewY:
    return SkewY(angle)


def translate(x, y=None) -> Translate:
    return Translate(x, y)
