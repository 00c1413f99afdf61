from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable

import numpy as np

from termplot.errors import PlotDataError


PAD = 2


@dataclass(frozen=True)
class AxisBounds:
    min_x: float
    max_x: float
    range_x: float
    min_y: float
    max_y: float
    range_y: float


def compute_bounds(xs: np.ndarray, ys: Iterable[np.ndarray]) -> AxisBounds:
    """Derive plot bounds from the finite values of ``xs`` and every y series.

    Zero-width ranges are widened to 1.0 above their single value, and
    positive-only y data is anchored to a 0.0 baseline.
    """
    min_x, max_x = _finite_extent(np.asarray(xs, dtype=np.float64), label="x")
    series = [np.asarray(s, dtype=np.float64).ravel() for s in ys]
    flat = np.concatenate(series) if series else np.empty(0, dtype=np.float64)
    min_y, max_y = _finite_extent(flat, label="y")

    min_x, max_x, range_x = _widen_if_empty(min_x, max_x)
    min_y, max_y, range_y = _widen_if_empty(min_y, max_y)

    if min_y > 0.0:
        min_y = 0.0
        min_y, max_y, range_y = _widen_if_empty(min_y, max_y)

    return AxisBounds(
        min_x=min_x,
        max_x=max_x,
        range_x=range_x,
        min_y=min_y,
        max_y=max_y,
        range_y=range_y,
    )


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if not math.isfinite(value):
        raise PlotDataError(f"cannot map non-finite value to a cell: {value!r}")
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def rint_half_away(values: np.ndarray, fill: int = -1) -> np.ndarray:
    """Vectorized ``round_half_away``; non-finite entries become ``fill``."""
    values = np.asarray(values, dtype=np.float64)
    finite = np.isfinite(values)
    out = np.full(values.shape, fill, dtype=np.int64)
    safe = values[finite]
    out[finite] = (np.sign(safe) * np.floor(np.abs(safe) + 0.5)).astype(np.int64)
    return out


def _finite_extent(values: np.ndarray, *, label: str) -> tuple[float, float]:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        raise PlotDataError(f"no plottable data: no finite {label}-values found")
    return float(np.min(finite)), float(np.max(finite))


def _widen_if_empty(vmin: float, vmax: float) -> tuple[float, float, float]:
    span = vmax - vmin
    if span == 0.0:
        span = 1.0
        vmax = vmin + span
    return vmin, vmax, span
