from __future__ import annotations

import logging

from termplot.errors import PlotConfigError
from termplot.frame import Frame
from termplot.raster import Canvas, DensityScale, RenderStats, draw_counts, draw_dots
from termplot.series import PLOT_MODES, Dataset, PlotMode


LOGGER = logging.getLogger(__name__)


def plot_points(canvas: Canvas, frame: Frame, dataset: Dataset, mode: PlotMode, density: DensityScale | None = None) -> RenderStats:
    """Fill ``canvas`` with one marker per data point, after the axes are drawn."""
    xs, ys = dataset.points()
    rows, columns = frame.map_to_cells(xs, ys)
    if mode == "dot":
        stats = draw_dots(canvas, rows, columns)
    elif mode == "count":
        stats = draw_counts(canvas, rows, columns, density)
    else:
        raise PlotConfigError(f"unsupported plot mode: {mode}")
    if stats.dropped:
        LOGGER.debug("dropped %d point(s) with no cell on the canvas", stats.dropped)
    LOGGER.debug("%s mode plotted %d point(s) into %d cell(s)", mode, stats.plotted, stats.cells)
    return stats


def render_plot(
    dataset: Dataset,
    width: int,
    height: int,
    mode: PlotMode = "count",
    density: DensityScale | None = None,
) -> Canvas:
    if mode not in PLOT_MODES:
        raise PlotConfigError(f"unsupported plot mode: {mode}")
    frame = Frame.over(dataset, width, height)
    canvas = Canvas(width, height)
    frame.draw_into(canvas)
    plot_points(canvas, frame, dataset, mode, density)
    return canvas
