from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Sequence


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extent:
    xmin: float
    xmax: float
    ymin: float
    ymax: float


@dataclass(frozen=True)
class ScaleFactors:
    dpux: float
    dpuy: float


def compute_extent(points: Sequence[tuple[float, float]]) -> Extent:
    """Bounding box of ``points`` widened so that it always contains the origin."""
    if not points:
        raise ValueError("extent of an empty point set is undefined")
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return Extent(
        xmin=min(min(xs), 0.0),
        xmax=max(max(xs), 0.0),
        ymin=min(min(ys), 0.0),
        ymax=max(max(ys), 0.0),
    )


def compute_scale_factors(extent: Extent, width: int, height: int, *, bar_width: int, padding: int) -> ScaleFactors:
    inner_w = width - 2 * padding
    inner_h = height - 2 * padding
    dpux = float(inner_w) / (extent.xmax - extent.xmin + bar_width)
    span_y = extent.ymax - extent.ymin
    if span_y == 0:
        # Every value is zero: collapse to a zero-height chart.
        LOGGER.debug("zero y extent; using dpuy=0")
        dpuy = 0.0
    else:
        dpuy = float(inner_h) / span_y
    return ScaleFactors(dpux=dpux, dpuy=dpuy)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
