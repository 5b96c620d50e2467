from .canvas import BOUNDS_POLICIES, BoundsPolicy, PixelBuffer, fill_rect

__all__ = [
    "BOUNDS_POLICIES",
    "BoundsPolicy",
    "PixelBuffer",
    "fill_rect",
]
