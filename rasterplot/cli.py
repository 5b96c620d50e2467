from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
import sys
from typing import Sequence

from rasterplot.api import bar_image, function_plot, resolve_config
from rasterplot.colors import parse_color_spec
from rasterplot.errors import BoundaryViolationError
from rasterplot.export import ExportOptions
from rasterplot.sampler import PlotFunction


LOGGER = logging.getLogger(__name__)

FUNCTIONS: dict[str, PlotFunction] = {
    "cos": math.cos,
    "sin": math.sin,
    "square": lambda x: x**2,
    "reciprocal": lambda x: 14 / x,
    "sqrt": math.sqrt,
    "asin_sqrt": lambda x: math.asin(math.sqrt(x)),
    "log": math.log,
}


def _bar_pair(text: str) -> tuple[float, float]:
    x_text, sep, y_text = text.rpartition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected X:Y, got {text!r}")
    try:
        return (float(x_text), float(y_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected numeric X:Y, got {text!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rasterplot")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [render] table.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    bar = sub.add_parser("bar", help="Render a bar chart.")
    bar.add_argument("output", type=Path)
    bar.add_argument(
        "--bar",
        dest="bars",
        type=_bar_pair,
        action="append",
        required=True,
        help="One bar as X:Y; repeat per bar. Negative x needs the = form: --bar=-1:-3.",
    )
    bar.add_argument("--bar-width", type=int, default=2)
    bar.add_argument("--width", type=int, default=200)
    bar.add_argument("--height", type=int, default=120)
    bar.add_argument("--bar-color", default="red")
    bar.add_argument("--axis-color", default="black")
    bar.add_argument("--background", default="0x00000000")

    fn = sub.add_parser("fn", help="Render a function graph.")
    fn.add_argument("output", type=Path)
    fn.add_argument("--function", choices=sorted(FUNCTIONS), default="cos")
    fn.add_argument("--start", type=float, default=-6.0)
    fn.add_argument("--end", type=float, default=6.0)
    fn.add_argument(
        "--width",
        type=int,
        default=None,
        help="Canvas width. Default: plot_width from the config (1280).",
    )
    fn.add_argument(
        "--height",
        type=int,
        default=None,
        help="Canvas height. Default: plot_height from the config (720).",
    )
    fn.add_argument("--no-axes", action="store_true")
    fn.add_argument("--background", default="0x00000000")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    try:
        config = resolve_config(args.config)
        options = ExportOptions(interlace=config.interlace)
        background = parse_color_spec(args.background)
        if args.command == "bar":
            image = bar_image(args.width, args.height, background=background, config=config)
            image.bar_chart(
                args.bars,
                args.bar_width,
                bars_color=parse_color_spec(args.bar_color),
                axis_color=parse_color_spec(args.axis_color),
            )
            image.export(args.output, options)
        else:
            plot = function_plot(args.width, args.height, background=background, config=config)
            if not args.no_axes:
                plot.draw_axes()
            count = plot.draw_fn(args.start, args.end, FUNCTIONS[args.function])
            LOGGER.info("plotted %d points of %s", count, args.function)
            plot.save(args.output, options)
    except (ValueError, KeyError, BoundaryViolationError, OSError) as exc:
        print(f"rasterplot: {exc}", file=sys.stderr)
        return 1
    return 0
