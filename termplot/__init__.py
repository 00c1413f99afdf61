from termplot.adapters import normalize_dataset, parse_table
from termplot.errors import FrameConsistencyError, PlotConfigError, PlotDataError, TermplotError
from termplot.frame import AxisLayout, Frame
from termplot.raster import Canvas, DensityScale
from termplot.render import plot_points, render_plot
from termplot.scales import PAD, compute_bounds
from termplot.series import Dataset, PlotMode

__all__ = [
    "AxisLayout",
    "Canvas",
    "Dataset",
    "DensityScale",
    "Frame",
    "FrameConsistencyError",
    "PAD",
    "PlotConfigError",
    "PlotDataError",
    "PlotMode",
    "TermplotError",
    "compute_bounds",
    "normalize_dataset",
    "parse_table",
    "plot_points",
    "render_plot",
]
