from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from termplot.errors import PlotDataError
from termplot.series import Dataset


def normalize_dataset(xs: Any, ys: Any) -> Dataset:
    """Coerce user input into a ``Dataset``.

    ``ys`` may be one series (a flat sequence) or a sequence of series. Missing
    or unparsable entries become NaN and are skipped later on.
    """
    x_arr = _coerce_1d_numeric(xs, label="x")
    series = _coerce_series(ys)
    if not series:
        raise PlotDataError("at least one y series is required")
    return Dataset(xs=x_arr, ys=tuple(series))


def _coerce_series(ys: Any) -> list[np.ndarray]:
    if isinstance(ys, np.ndarray):
        if ys.ndim == 1:
            return [_coerce_ndarray(ys)]
        if ys.ndim == 2:
            return [_coerce_ndarray(row) for row in ys]
        raise PlotDataError("y must be 1-D or 2-D")

    if not isinstance(ys, Sequence) or isinstance(ys, (str, bytes, bytearray)):
        raise PlotDataError(f"unsupported y input type: {type(ys)!r}")
    if len(ys) == 0:
        return []
    if all(_is_series_like(item) for item in ys):
        return [_coerce_1d_numeric(item, label=f"y[{i}]") for i, item in enumerate(ys)]
    if any(_is_series_like(item) for item in ys):
        raise PlotDataError("y mixes scalars and series")
    return [_coerce_1d_numeric(ys, label="y")]


def _is_series_like(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    return np.fromiter((_as_float(raw) for raw in arr.tolist()), dtype=np.float64, count=arr.shape[0])


def _as_float(raw: Any) -> float:
    # None, Decimal and numeric strings all go through float(); anything else is missing
    try:
        return float(raw)
    except (TypeError, ValueError):
        return float("nan")
