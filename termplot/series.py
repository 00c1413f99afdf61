from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np


PlotMode = Literal["count", "dot"]
PLOT_MODES: tuple[PlotMode, ...] = ("count", "dot")


@dataclass(frozen=True)
class Dataset:
    """Shared x values plus one or more y series aligned to them."""

    xs: np.ndarray
    ys: tuple[np.ndarray, ...]

    @property
    def series_count(self) -> int:
        return len(self.ys)

    def flat_ys(self) -> np.ndarray:
        if not self.ys:
            return np.empty(0, dtype=np.float64)
        return np.concatenate(self.ys)

    def points(self) -> tuple[np.ndarray, np.ndarray]:
        """Return every (x, y) pair as two flat arrays, series after series."""
        px: list[np.ndarray] = []
        py: list[np.ndarray] = []
        for series in self.ys:
            n = min(self.xs.size, series.size)
            px.append(self.xs[:n])
            py.append(series[:n])
        if not px:
            empty = np.empty(0, dtype=np.float64)
            return empty, empty
        return np.concatenate(px), np.concatenate(py)
