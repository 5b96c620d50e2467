from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Sequence

from rasterplot.config import DEFAULT_PADDING
from rasterplot.errors import InsufficientCanvasWidthError, PlotDataError
from rasterplot.raster.canvas import PixelBuffer
from rasterplot.scales import Extent, ScaleFactors, compute_extent, compute_scale_factors, round_half_up


LOGGER = logging.getLogger(__name__)

Rect = tuple[int, int, int, int]


@dataclass(frozen=True)
class BarChartGeometry:
    extent: Extent
    scale: ScaleFactors
    x_axis: Rect
    y_axis: Rect
    bars: tuple[Rect, ...]

    def rects(self) -> tuple[Rect, ...]:
        """Every rectangle in draw order: axes first, then bars."""
        return (self.x_axis, self.y_axis, *self.bars)


class BarChartLayout:
    """Maps bar data onto a padded pixel canvas with the origin always visible."""

    def __init__(self, width: int, height: int, padding: int = DEFAULT_PADDING) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        if padding < 0:
            raise ValueError("padding must be >= 0")
        self.width = width
        self.height = height
        self.padding = padding

    def compute(self, bars: Sequence[tuple[float, float]], bar_width: int) -> BarChartGeometry:
        if isinstance(bar_width, bool) or not isinstance(bar_width, int) or bar_width <= 0:
            raise PlotDataError(f"bar width must be a positive integer, got {bar_width!r}")
        if not bars:
            raise PlotDataError("empty bar series")
        if len(bars) * bar_width > self.width:
            raise InsufficientCanvasWidthError(len(bars), bar_width, self.width)

        pad = self.padding
        if 2 * pad >= min(self.width, self.height):
            raise PlotDataError(f"padding {pad}px leaves no plot area on a {self.width}x{self.height} canvas")
        extent = compute_extent(bars)
        if not (math.isfinite(extent.xmax - extent.xmin + bar_width) and math.isfinite(extent.ymax - extent.ymin)):
            raise PlotDataError(f"bar extent {extent} overflows float range")
        scale = compute_scale_factors(extent, self.width, self.height, bar_width=bar_width, padding=pad)
        x_shift = abs(extent.xmin)
        y_shift = abs(extent.ymin)

        x_axis = (pad, self.height - pad - round_half_up(y_shift * scale.dpuy), self.width - 2 * pad, 1)
        y_axis = (pad + round_half_up(x_shift * scale.dpux), pad, 1, self.height - 2 * pad)

        rects: list[Rect] = []
        for x, y in bars:
            left = pad + math.floor((x + x_shift) * scale.dpux)
            top = self.height - pad - math.ceil((max(y, 0.0) + y_shift) * scale.dpuy) + (1 if y < 0 else 0)
            rects.append((left, top, bar_width, math.ceil(abs(y) * scale.dpuy)))

        LOGGER.debug(
            "bar layout: %d bars, extent=%s, dpux=%.4f, dpuy=%.4f",
            len(rects),
            extent,
            scale.dpux,
            scale.dpuy,
        )
        return BarChartGeometry(extent=extent, scale=scale, x_axis=x_axis, y_axis=y_axis, bars=tuple(rects))

    def draw(
        self,
        dst: PixelBuffer,
        bars: Sequence[tuple[float, float]],
        bar_width: int,
        bar_color: int,
        axis_color: int,
    ) -> BarChartGeometry:
        if (dst.width, dst.height) != (self.width, self.height):
            raise ValueError("layout size does not match the target buffer")
        geometry = self.compute(bars, bar_width)
        if dst.bounds_policy == "reject":
            for rect in geometry.rects():
                dst.check_rect(*rect)

        dst.fill_rect(*geometry.x_axis, axis_color)
        dst.fill_rect(*geometry.y_axis, axis_color)
        for rect in geometry.bars:
            dst.fill_rect(*rect, bar_color)
        return geometry
