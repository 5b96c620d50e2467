from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from rasterplot.colors import TRANSPARENT
from rasterplot.errors import BoundaryViolationError


BoundsPolicy = Literal["clip", "reject"]
BOUNDS_POLICIES: tuple[str, ...] = ("clip", "reject")


@dataclass
class PixelBuffer:
    """Grid of packed 0xRRGGBBAA colors indexed as ``pixels[y, x]``.

    Writes outside the grid are clipped, or raise ``BoundaryViolationError``
    without touching any pixel when ``bounds_policy == "reject"``.
    """

    width: int
    height: int
    background: int = TRANSPARENT
    bounds_policy: BoundsPolicy = "clip"
    pixels: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be > 0")
        if self.bounds_policy not in BOUNDS_POLICIES:
            raise ValueError(f"unknown bounds policy: {self.bounds_policy}")
        self.pixels = np.full((self.height, self.width), self.background, dtype=np.uint32)

    def clear(self, color: int | None = None) -> None:
        self.pixels.fill(self.background if color is None else color)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise BoundaryViolationError(x, y, 1, 1, (self.width, self.height))
        return int(self.pixels[y, x])

    def set_pixel(self, x: int, y: int, color: int) -> None:
        if not self.contains(x, y):
            if self.bounds_policy == "reject":
                raise BoundaryViolationError(x, y, 1, 1, (self.width, self.height))
            return
        self.pixels[y, x] = color

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        fill_rect(self, x, y, width, height, color)

    def check_rect(self, x: int, y: int, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            return
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise BoundaryViolationError(x, y, width, height, (self.width, self.height))

    def count(self, color: int) -> int:
        return int(np.count_nonzero(self.pixels == color))

    def to_rgba_array(self) -> np.ndarray:
        """Unpack to a ``(height, width, 4)`` uint8 array in RGBA order."""
        big_endian = self.pixels.astype(">u4", copy=False)
        return big_endian.view(np.uint8).reshape(self.height, self.width, 4).copy()


def fill_rect(dst: PixelBuffer, x: int, y: int, width: int, height: int, color: int) -> None:
    """Fill columns ``[x, x+width-1]`` and rows ``[y, y+height-1]`` with ``color``."""
    if width <= 0 or height <= 0:
        return
    if dst.bounds_policy == "reject":
        dst.check_rect(x, y, width, height)
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.width, x + width)
    y1 = min(dst.height, y + height)
    if x1 <= x0 or y1 <= y0:
        return
    dst.pixels[y0:y1, x0:x1] = color
