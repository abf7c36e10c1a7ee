"""Типы значений атрибутов SVG: числа с единицами, пути, преобразования, цвета."""

from svg_values.values.keywords import (
    AlignmentBaseline,
    MarkerOrientation,
    PreserveAspectRatio,
    TextAnchor,
)
from svg_values.values.measurement import (
    Degree,
    Measurement,
    Millimeter,
    Percent,
    Pixel,
    UserUnit,
)
from svg_values.values.paint import (
    COLOR_INHERIT,
    PAINT_CURRENT_COLOR,
    PAINT_INHERIT,
    PAINT_NONE,
    Color,
    Paint,
)
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
    commands_from_points,
    serialize,
)
from svg_values.values.transform import (
    Matrix,
    Rotate,
    Scale,
    SkewX,
    SkewY,
    Transform,
    Translate,
    transform_list,
)
from svg_values.values.units import Unit

__all__ = [
    "AlignmentBaseline",
    "MarkerOrientation",
    "PreserveAspectRatio",
    "TextAnchor",
    "Degree",
    "Measurement",
    "Millimeter",
    "Percent",
    "Pixel",
    "UserUnit",
    "COLOR_INHERIT",
    "PAINT_CURRENT_COLOR",
    "PAINT_INHERIT",
    "PAINT_NONE",
    "Color",
    "Paint",
    "ArcTo",
    "ClosePath",
    "CubicCurveTo",
    "HLineTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadraticCurveTo",
    "VLineTo",
    "commands_from_points",
    "serialize",
    "Matrix",
    "Rotate",
    "Scale",
    "SkewX",
    "SkewY",
    "Transform",
    "Translate",
    "transform_list",
    "Unit",
]
