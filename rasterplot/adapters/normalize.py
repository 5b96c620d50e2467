from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from rasterplot.errors import PlotDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_bars(bars: Any) -> list[tuple[float, float]]:
    """Coerce bar input to ``(x, y)`` float pairs in presentation order.

    Accepted shapes: a mapping ``{x: y}``, a sequence of pairs, an ``(n, 2)``
    array or tensor, a pandas Series (index is x) or a two-column DataFrame
    (first column is x).
    """
    if bars is None:
        raise PlotDataError("bar input is required")
    if isinstance(bars, Mapping):
        pairs = [(_to_float(k, label="x"), _to_float(v, label="y")) for k, v in bars.items()]
    elif pd is not None and isinstance(bars, pd.Series):
        pairs = list(zip(_column(bars.index.to_numpy(), label="x"), _column(bars.to_numpy(), label="y")))
    elif pd is not None and isinstance(bars, pd.DataFrame):
        if bars.shape[1] != 2:
            raise PlotDataError(f"bar frame must have exactly 2 columns, got {list(bars.columns)}")
        pairs = list(
            zip(
                _column(bars.iloc[:, 0].to_numpy(), label="x"),
                _column(bars.iloc[:, 1].to_numpy(), label="y"),
            )
        )
    else:
        pairs = _coerce_pairs(bars)
    return _validate_pairs(pairs)


def _coerce_pairs(value: Any) -> list[tuple[float, float]]:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        value = tensor.to(torch.float64).numpy()

    if isinstance(value, np.ndarray):
        if value.ndim != 2 or value.shape[1] != 2:
            raise PlotDataError(f"bar array must have shape (n, 2), got {value.shape}")
        return list(zip(_column(value[:, 0], label="x"), _column(value[:, 1], label="y")))

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        pairs: list[tuple[float, float]] = []
        for i, item in enumerate(value):
            if isinstance(item, (str, bytes, bytearray)) or not isinstance(item, Sequence) or len(item) != 2:
                raise PlotDataError(f"bar at index {i} is not an (x, y) pair: {item!r}")
            pairs.append((_to_float(item[0], label="x"), _to_float(item[1], label="y")))
        return pairs

    raise PlotDataError(f"unsupported bar input type: {type(value)!r}")


def _column(arr: np.ndarray, *, label: str) -> list[float]:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64).tolist()
    return [_to_float(raw, label=label) for raw in arr.tolist()]


def _to_float(raw: Any, *, label: str) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{label} contains non-numeric value: {raw!r}") from exc


def _validate_pairs(pairs: list[tuple[float, float]]) -> list[tuple[float, float]]:
    if not pairs:
        raise PlotDataError("empty bar series")
    seen: set[float] = set()
    for x_val, y_val in pairs:
        if not (np.isfinite(x_val) and np.isfinite(y_val)):
            raise PlotDataError(f"bar ({x_val}, {y_val}) is not finite")
        if x_val in seen:
            raise PlotDataError(f"duplicate bar x value: {x_val}")
        seen.add(x_val)
    return pairs
