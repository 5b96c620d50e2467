from __future__ import annotations

import math
from pathlib import Path

from rasterplot.colors import BLACK, TRANSPARENT, ColorLike, to_packed
from rasterplot.config import DEFAULT_CONFIG, RenderConfig
from rasterplot.errors import BoundaryViolationError
from rasterplot.export import ExportOptions, write_image
from rasterplot.raster.canvas import PixelBuffer
from rasterplot.sampler import AdaptiveFunctionSampler, PlotFunction


class Plot:
    """Function-graph canvas with the origin at the center and y pointing up."""

    def __init__(
        self,
        width: int | None = None,
        height: int | None = None,
        bg_color: ColorLike = TRANSPARENT,
        *,
        config: RenderConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.buffer = PixelBuffer(
            width=self.config.plot_width if width is None else width,
            height=self.config.plot_height if height is None else height,
            background=to_packed(bg_color),
            bounds_policy=self.config.bounds_policy,  # type: ignore[arg-type]
        )
        self.center_x = self.buffer.width // 2
        self.center_y = self.buffer.height // 2
        # pixels per domain unit
        self.mul = self.buffer.height // self.config.units_per_height
        self.sampler = AdaptiveFunctionSampler.from_config(self.config)

    def to_pixel(self, x: float, y: float) -> tuple[int, int]:
        return (math.floor(x + self.center_x), math.floor(self.center_y - y))

    def draw_point(self, x: float, y: float, color: ColorLike = BLACK) -> None:
        if not (math.isfinite(x) and math.isfinite(y)):
            # Overflowed coordinates map to no pixel.
            if self.buffer.bounds_policy == "reject":
                raise BoundaryViolationError(x, y, 1, 1, (self.buffer.width, self.buffer.height))
            return
        px, py = self.to_pixel(x, y)
        self.buffer.set_pixel(px, py, to_packed(color))

    def draw_axes(self, color: ColorLike = BLACK) -> None:
        packed = to_packed(color)
        for i in range(-self.center_x, self.center_x):
            self.draw_point(i, 0, packed)
        for i in range(-(self.center_y - 1), self.center_y):
            self.draw_point(0, i, packed)

    def draw_fn(self, a: float, b: float, func: PlotFunction, color: ColorLike = BLACK) -> int:
        """Plot ``func`` over ``[a, b)``; returns the number of points drawn."""
        packed = to_packed(color)
        count = 0
        for point in self.sampler.sample(func, a, b):
            self.draw_point(point.x * self.mul, point.y * self.mul, packed)
            count += 1
        return count

    def save(self, fname: str | Path, options: ExportOptions | None = None) -> Path:
        return write_image(self.buffer, fname, options or ExportOptions(interlace=self.config.interlace))
