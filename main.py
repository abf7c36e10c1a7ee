"""
Точка входа: значения атрибутов SVG из командной строки.

Использование:
    python main.py units
    python main.py convert VALUE [--unit ID] [--to {mm,px}]
    python main.py color R G B [--rgb | --percent]
    python main.py path --points "x,y x,y ..." [--closed] [--relative]
                        [--scale K] [--shift DX DY] [--output FILE]

Пример:
    python main.py convert 1 --unit in --to px          # 96px
    python main.py color 255 48 78                      # #ff304e
    python main.py path --points "0,0 10,0 10,10" --closed --output square.svg
    python main.py --config project.svgvalues.json --verbose convert 12.7
"""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from svg_values.drawing.svg_renderer import save_preview, transform_points
from svg_values.errors import SVGValueError
from svg_values.factories import color
from svg_values.logging_config import LogContext, setup_logging_from_config
from svg_values.project_config import ProjectConfig, load_config
from svg_values.values.calculator import to_millimeter, to_pixel
from svg_values.values.measurement import Measurement
from svg_values.values.path import commands_from_points, serialize
from svg_values.values.units import Unit

logger = logging.getLogger("svg_values.cli")


# ---------------------------------------------------------------------------
# Разбор аргументов
# ---------------------------------------------------------------------------

def _parse_number(text: str):
    """int для целой записи ("5", "-3"), иначе float ("5.0", "1e3")."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def _parse_points(text: str) -> np.ndarray:
    """Разобрать "x,y x,y ..." в массив (N, 2).

    Целые координаты дают целочисленный массив, любая дробная — float.

    Raises:
        ValueError: токен не вида "x,y" или координата не число.
    """
    coords = []
    for token in text.split():
        parts = token.split(',')
        if len(parts) != 2:
            raise ValueError(f"Point must be 'x,y', got {token!r}")
        coords.append([_parse_number(p) for p in parts])
    if not coords:
        return np.empty((0, 2))
    return np.array(coords)


# ---------------------------------------------------------------------------
# Команды
# ---------------------------------------------------------------------------

def cmd_units(args: argparse.Namespace, config: ProjectConfig) -> int:
    for unit in Unit:
        print(f"{unit.name:<12}{unit.identifier or '-'}")
    return 0


def cmd_convert(args: argparse.Namespace, config: ProjectConfig) -> int:
    if args.unit is not None:
        unit = Unit.lookup(args.unit)
    else:
        unit = config.conversion.source_unit()
    target = args.to or config.conversion.target()
    value = Measurement(_parse_number(args.value), unit)

    result = to_millimeter(value) if target == "mm" else to_pixel(value)
    logger.info("Converted %s -> %s", value, result)
    print(result)
    return 0


def cmd_color(args: argparse.Namespace, config: ProjectConfig) -> int:
    if args.percent:
        value = color(args.red, args.green, args.blue, percentage=True)
    elif args.rgb:
        value = color(args.red, args.green, args.blue, percentage=False)
    else:
        value = color(args.red, args.green, args.blue)
    print(value)
    return 0


def cmd_path(args: argparse.Namespace, config: ProjectConfig) -> int:
    points = _parse_points(args.points)
    if args.scale is not None or args.shift is not None:
        shift_x, shift_y = args.shift or (0.0, 0.0)
        scale = 1.0 if args.scale is None else args.scale
        points = transform_points(points, scale, shift_x, shift_y)
    commands = commands_from_points(points, closed=args.closed, absolute=not args.relative)
    print(serialize(commands))

    if args.output:
        sheet = config.output
        out = sheet.resolve(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        width, height = sheet.sheet_size()
        save_preview(
            commands,
            out,
            width=width,
            height=height,
            stroke=sheet.stroke_paint(),
            fill=sheet.fill_paint(),
            stroke_width=sheet.line_width(),
        )
    return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Типизированные значения атрибутов SVG: единицы, цвета, пути.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Путь к конфигурационному файлу .svgvalues.json.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Подробный вывод (уровень DEBUG).",
    )
    parser.add_argument(
        "--log-json",
        default=None,
        dest="log_json",
        help="Дополнительно писать журнал в JSON-файл.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_units = sub.add_parser("units", help="Список единиц и их обозначений.")
    p_units.set_defaults(handler=cmd_units)

    p_convert = sub.add_parser("convert", help="Пересчёт длины в мм или px.")
    p_convert.add_argument("value", help="Величина, напр. 12 или 12.5.")
    p_convert.add_argument(
        "--unit", "-u",
        default=None,
        help="Единица величины (px, mm, cm, in, pt, pc). По умолчанию из конфига.",
    )
    p_convert.add_argument(
        "--to",
        choices=("mm", "px"),
        default=None,
        help="Целевая единица. По умолчанию из конфига.",
    )
    p_convert.set_defaults(handler=cmd_convert)

    p_color = sub.add_parser("color", help="Цвет из компонент R G B.")
    p_color.add_argument("red", type=int)
    p_color.add_argument("green", type=int)
    p_color.add_argument("blue", type=int)
    mode = p_color.add_mutually_exclusive_group()
    mode.add_argument("--rgb", action="store_true", help="Запись rgb(r,g,b).")
    mode.add_argument("--percent", action="store_true", help="Запись rgb(r%%,g%%,b%%).")
    p_color.set_defaults(handler=cmd_color)

    p_path = sub.add_parser("path", help="Ломаная по точкам: строка d и SVG.")
    p_path.add_argument(
        "--points", "-p",
        required=True,
        help='Точки "x,y x,y ...".',
    )
    p_path.add_argument("--closed", action="store_true", help="Замкнуть контур (Z).")
    p_path.add_argument("--relative", action="store_true", help="Относительные команды.")
    p_path.add_argument(
        "--scale", "-s",
        type=float,
        default=None,
        help="Масштаб точек (мм на листе / единица модели).",
    )
    p_path.add_argument(
        "--shift",
        type=float,
        nargs=2,
        metavar=("DX", "DY"),
        default=None,
        help="Смещение точек на листе (мм).",
    )
    p_path.add_argument(
        "--output", "-o",
        default=None,
        help="Записать предпросмотр в SVG-файл.",
    )
    p_path.set_defaults(handler=cmd_path)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(explicit_config=args.config)
    setup_logging_from_config(config.logging, verbose=args.verbose, json_file=args.log_json)

    try:
        with LogContext(command=args.command):
            return args.handler(args, config)
    except SVGValueError as exc:
        logger.error("Invalid argument: %s", exc)
        return 2
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
