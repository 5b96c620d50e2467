from __future__ import annotations

import math
from pathlib import Path
import sys

from rasterplot import Rgb, function_plot


def render(out_path: str | Path, config: str | Path | None = None) -> Path:
    plot = function_plot(640, 360, background=Rgb(255, 255, 255), config=config)
    plot.draw_axes()
    plot.draw_fn(-7.0, 7.0, math.cos, color=Rgb(220, 38, 38))
    # Only defined on [0, 1]; the rest of the interval is skipped.
    plot.draw_fn(-7.0, 7.0, lambda x: math.asin(math.sqrt(x)), color=Rgb(37, 99, 235))
    plot.draw_fn(-7.0, 7.0, lambda x: 14 / x, color=Rgb(22, 163, 74))
    return plot.save(out_path)


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else "function_plot_demo.png"
    config_path = Path(__file__).with_name("render.toml")
    print(render(target, config=config_path))
