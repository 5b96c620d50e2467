from __future__ import annotations

from pathlib import Path
from typing import Any

from rasterplot.adapters import normalize_bars
from rasterplot.bar_chart import BarChartGeometry, BarChartLayout
from rasterplot.colors import BLACK, TRANSPARENT, ColorLike, Named, to_packed
from rasterplot.config import DEFAULT_CONFIG, RenderConfig
from rasterplot.export import ExportOptions, write_image
from rasterplot.raster.canvas import PixelBuffer


DEFAULT_BAR_COLOR = Named("red @ 1.0")


class Image:
    """Canvas for a single bar chart."""

    def __init__(
        self,
        width: int,
        height: int,
        bg_color: ColorLike = TRANSPARENT,
        *,
        config: RenderConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.buffer = PixelBuffer(
            width=width,
            height=height,
            background=to_packed(bg_color),
            bounds_policy=self.config.bounds_policy,  # type: ignore[arg-type]
        )
        self._layout = BarChartLayout(width, height, padding=self.config.padding)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    def rectangle(self, x: int, y: int, width: int, height: int, color: ColorLike) -> None:
        self.buffer.fill_rect(x, y, width, height, to_packed(color))

    def bar_chart(
        self,
        bars: Any,
        bar_width: int,
        bars_color: ColorLike = DEFAULT_BAR_COLOR,
        axis_color: ColorLike = BLACK,
    ) -> BarChartGeometry:
        """Draw axes, then one bar per ``(x, y)`` pair in the order given."""
        pairs = normalize_bars(bars)
        return self._layout.draw(
            self.buffer,
            pairs,
            bar_width,
            bar_color=to_packed(bars_color),
            axis_color=to_packed(axis_color),
        )

    def export(self, filename: str | Path, options: ExportOptions | None = None) -> Path:
        return write_image(self.buffer, filename, options or ExportOptions(interlace=self.config.interlace))
