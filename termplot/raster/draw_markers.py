from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from termplot.errors import PlotConfigError
from termplot.raster.canvas import Canvas


DOT_GLYPH = "*"
DEFAULT_DENSITY_TABLE: tuple[tuple[int, str], ...] = (
    (1, "."),
    (2, ":"),
    (4, "+"),
    (8, "*"),
    (16, "#"),
    (32, "@"),
)


@dataclass(frozen=True)
class DensityScale:
    """Ordered ``(minimum count, glyph)`` thresholds for count mode.

    A cell takes the glyph of the highest threshold its count reaches.
    """

    thresholds: tuple[tuple[int, str], ...] = DEFAULT_DENSITY_TABLE

    def __post_init__(self) -> None:
        if not self.thresholds:
            raise PlotConfigError("density table must not be empty")
        previous = 0
        for minimum, glyph in self.thresholds:
            if minimum <= previous:
                raise PlotConfigError("density thresholds must be >= 1 and strictly increasing")
            if len(glyph) != 1:
                raise PlotConfigError(f"density glyph must be a single character, got {glyph!r}")
            previous = minimum

    def glyph_for(self, count: int) -> str | None:
        glyph = None
        for minimum, candidate in self.thresholds:
            if count < minimum:
                break
            glyph = candidate
        return glyph

    def bucket_indices(self, counts: np.ndarray) -> np.ndarray:
        """Bucket index per count; -1 where the count is below the first threshold."""
        minimums = np.asarray([m for m, _ in self.thresholds], dtype=np.int64)
        return np.searchsorted(minimums, counts, side="right") - 1


@dataclass(frozen=True)
class RenderStats:
    plotted: int
    dropped: int
    cells: int


def draw_dots(canvas: Canvas, rows: np.ndarray, columns: np.ndarray, glyph: str = DOT_GLYPH) -> RenderStats:
    rows, columns = _as_cells(rows, columns)
    mask = _in_bounds(canvas, rows, columns)
    grid = canvas.grid
    grid[rows[mask], columns[mask]] = glyph
    cells = np.unique(rows[mask] * canvas.width + columns[mask]).size
    return RenderStats(plotted=int(mask.sum()), dropped=int((~mask).sum()), cells=int(cells))


def draw_counts(
    canvas: Canvas,
    rows: np.ndarray,
    columns: np.ndarray,
    scale: DensityScale | None = None,
) -> RenderStats:
    scale = scale or DensityScale()
    rows, columns = _as_cells(rows, columns)
    mask = _in_bounds(canvas, rows, columns)
    counts = np.zeros((canvas.height, canvas.width), dtype=np.int64)
    np.add.at(counts, (rows[mask], columns[mask]), 1)

    glyphs = np.asarray([g for _, g in scale.thresholds], dtype="<U1")
    buckets = scale.bucket_indices(counts)
    hit = buckets >= 0
    canvas.grid[hit] = glyphs[buckets[hit]]
    return RenderStats(plotted=int(mask.sum()), dropped=int((~mask).sum()), cells=int(np.count_nonzero(counts)))


def _as_cells(rows: np.ndarray, columns: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    rows = np.asarray(rows, dtype=np.int64).ravel()
    columns = np.asarray(columns, dtype=np.int64).ravel()
    if rows.shape != columns.shape:
        raise ValueError(f"rows and columns length mismatch: {rows.size} != {columns.size}")
    return rows, columns


def _in_bounds(canvas: Canvas, rows: np.ndarray, columns: np.ndarray) -> np.ndarray:
    return (rows >= 0) & (rows < canvas.height) & (columns >= 0) & (columns < canvas.width)
