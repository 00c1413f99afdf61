from __future__ import annotations

import logging

import numpy as np

from termplot.series import Dataset


LOGGER = logging.getLogger(__name__)


def to_cdf(dataset: Dataset) -> Dataset:
    """Pool the finite y values of every series into one empirical CDF.

    x becomes the sorted values and the single y series the cumulative
    fraction ``(i + 1) / n``.
    """
    values = dataset.flat_ys()
    values = np.sort(values[np.isfinite(values)])
    n = values.size
    fractions = np.arange(1, n + 1, dtype=np.float64) / n if n else np.empty(0, dtype=np.float64)
    LOGGER.debug("cdf over %d finite value(s)", n)
    return Dataset(xs=values, ys=(fractions,))


def log10_x(dataset: Dataset) -> Dataset:
    return Dataset(xs=_log10(dataset.xs), ys=dataset.ys)


def log10_y(dataset: Dataset) -> Dataset:
    return Dataset(xs=dataset.xs, ys=tuple(_log10(series) for series in dataset.ys))


def prepare(dataset: Dataset, *, cdf: bool = False, log_x: bool = False, log_y: bool = False) -> Dataset:
    """Apply the optional transforms in order: cdf, then log10 of x, then of y."""
    if cdf:
        dataset = to_cdf(dataset)
    if log_x:
        dataset = log10_x(dataset)
    if log_y:
        dataset = log10_y(dataset)
    return dataset


def _log10(values: np.ndarray) -> np.ndarray:
    # Non-positive input becomes -inf/NaN and is left out of the bounds.
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.log10(values)
