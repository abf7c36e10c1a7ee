"""
Вывод значений svg_values в документы svgwrite.

Модули:
  - svg_renderer: атрибуты, элемент <path>, файл предпросмотра
"""

from svg_values.drawing.svg_renderer import (
    render_path,
    save_preview,
    transform_points,
    value_attributes,
)

__all__ = [
    'render_path',
    'save_preview',
    'transform_points',
    'value_attributes',
]
