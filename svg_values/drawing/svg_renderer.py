"""
Вывод типизированных значений в элементы svgwrite.

Содержит:
- value_attributes  — словарь атрибутов SVG из типизированных значений
- transform_points  — размещение точек модели на листе (масштаб + смещение)
- render_path       — элемент <path> с атрибутом d из команд пути
- save_preview      — SVG-файл с одним путём для быстрого просмотра

Размеры листа задаются Measurement любой единицы длины и пересчитываются
в миллиметры; пользовательская система координат листа — миллиметры.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import numpy as np
import svgwrite

from svg_values.errors import require_not_null
from svg_values.logging_config import log_timing
from svg_values.values.calculator import to_millimeter
from svg_values.values.measurement import Measurement, Millimeter
from svg_values.values.paint import PAINT_NONE, Color, Paint
from svg_values.values.path import PathCommand, serialize
from svg_values.values.transform import Transform, transform_list
from svg_values.values.value_base import join_numbers

logger = logging.getLogger(__name__)

TransformArg = Union[Transform, Iterable[Transform], None]


def value_attributes(**values) -> Dict[str, str]:
    """Map attribute names to SVG text.

    Underscores become hyphens (``stroke_width`` → ``stroke-width``),
    None values are skipped, everything else goes through str().
    """
    return {
        name.replace('_', '-'): str(value)
        for name, value in values.items()
        if value is not None
    }


def _transform_text(transform: TransformArg) -> Optional[str]:
    if transform is None:
        return None
    if isinstance(transform, Transform):
        return str(transform)
    return transform_list(transform)


def transform_points(
    points,
    scale: float = 1.0,
    translate_x: float = 0.0,
    translate_y: float = 0.0,
) -> np.ndarray:
    """Разместить точки модели на листе: p * scale + (tx, ty).

    Args:
        points: массив формы (N, 2) в единицах модели.
        scale: масштаб (мм на листе / единица модели).
        translate_x, translate_y: смещение на листе (мм).

    Returns:
        Массив float64 формы (N, 2).
    """
    pts = np.asarray(require_not_null(points, "points"), dtype=np.float64)
    if pts.size == 0:
        return pts.reshape(0, 2)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"Points must have shape (N, 2), got {pts.shape}")
    return pts * scale + np.array([translate_x, translate_y])


def render_path(
    dwg: svgwrite.Drawing,
    commands: Iterable[PathCommand],
    transform: TransformArg = None,
    fill: Optional[Paint] = PAINT_NONE,
    stroke: Optional[Paint] = None,
    stroke_width: Optional[Measurement] = None,
) -> svgwrite.path.Path:
    """Create a <path> element for the given commands.

    Args:
        dwg: SVG document (element factory).
        commands: path commands, serialized into ``d``.
        transform: one transform or a sequence (applied right to left).
        fill, stroke: paint values; None leaves the attribute out.
        stroke_width: stroke width with its unit.

    Returns:
        Path element, not yet added to any container.
    """
    d = serialize(commands)
    attributes = value_attributes(
        transform=_transform_text(transform),
        fill=fill,
        stroke=stroke,
        stroke_width=stroke_width,
    )
    return dwg.path(d=d, **attributes)


def save_preview(
    commands: Iterable[PathCommand],
    output: Union[str, Path],
    width: Measurement = Millimeter(210.0),
    height: Measurement = Millimeter(297.0),
    stroke: Paint = Color("black"),
    fill: Paint = PAINT_NONE,
    stroke_width: Measurement = Millimeter(0.5),
    transform: TransformArg = None,
) -> Path:
    """Write an SVG sheet holding a single path.

    Args:
        commands: path commands in sheet millimeters.
        output: file to write.
        width, height: sheet size, any length unit.
        stroke, fill, stroke_width, transform: path presentation.

    Returns:
        Path of the written file.

    Raises:
        UnconvertibleUnitError: width or height is not a length.
    """
    output = Path(output)
    sheet_w = to_millimeter(width)
    sheet_h = to_millimeter(height)
    commands = list(require_not_null(commands, "commands"))

    with log_timing(logger, "Writing preview", path=str(output)):
        dwg = svgwrite.Drawing(
            str(output),
            size=(str(sheet_w), str(sheet_h)),
            viewBox=join_numbers(' ', 0, 0, sheet_w.magnitude, sheet_h.magnitude),
            debug=False,
        )
        dwg.add(render_path(
            dwg, commands,
            transform=transform,
            fill=fill,
            stroke=stroke,
            stroke_width=stroke_width,
        ))
        dwg.save()

    logger.info("Preview saved: %s", output, extra={"commands": len(commands)})
    return output
