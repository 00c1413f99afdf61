from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from termplot.errors import FrameConsistencyError, PlotConfigError
from termplot.raster.canvas import Canvas
from termplot.scales import PAD, compute_bounds, rint_half_away, round_half_away
from termplot.series import Dataset


LOGGER = logging.getLogger(__name__)

MAJOR_TICK_EVERY = 5
AXIS_CROSSING = "+"


@dataclass(frozen=True)
class AxisGlyphs:
    major: str
    minor: str


ZERO_VERTICAL = AxisGlyphs(major="+", minor="|")
ZERO_HORIZONTAL = AxisGlyphs(major="+", minor="-")
SYNTHETIC = AxisGlyphs(major=".", minor=" ")


@dataclass(frozen=True)
class AxisLayout:
    """Where the two axes land on the canvas.

    ``vertical_*`` describes the y axis (a column), ``horizontal_*`` the x
    axis (a row). An axis that is not a true zero-line is anchored to the
    data boundary nearest zero.
    """

    vertical_at_x: float
    vertical_column: int
    vertical_is_zero: bool
    horizontal_at_y: float
    horizontal_row: int
    horizontal_is_zero: bool


@dataclass(frozen=True)
class Frame:
    width: int
    height: int
    min_x: float
    max_x: float
    range_x: float
    min_y: float
    max_y: float
    range_y: float

    @classmethod
    def over(cls, dataset: Dataset, width: int, height: int) -> Frame:
        if width < PAD + 1 or height < PAD + 1:
            raise PlotConfigError(f"dimensions {width}x{height} are too small; each must be >= {PAD + 1}")
        bounds = compute_bounds(dataset.xs, dataset.ys)
        frame = cls(
            width=width,
            height=height,
            min_x=bounds.min_x,
            max_x=bounds.max_x,
            range_x=bounds.range_x,
            min_y=bounds.min_y,
            max_y=bounds.max_y,
            range_y=bounds.range_y,
        )
        LOGGER.debug(
            "frame %dx%d x=[%g, %g] y=[%g, %g]",
            width,
            height,
            frame.min_x,
            frame.max_x,
            frame.min_y,
            frame.max_y,
        )
        return frame

    def x_bounds(self) -> tuple[float, float]:
        return (self.min_x, self.max_x)

    def y_bounds(self) -> tuple[float, float]:
        return (self.min_y, self.max_y)

    def x_to_column(self, x: float) -> int:
        plot_width = float(self.width - PAD)
        fraction = (x - self.min_x) / self.range_x
        return round_half_away(plot_width * fraction)

    def y_to_row(self, y: float) -> int:
        plot_height = float(self.height - PAD)
        fraction = (y - self.min_y) / self.range_y
        from_bottom = round_half_away(plot_height * fraction)
        # flip: buffer row 0 is the top line
        return self.height - from_bottom - 1

    def point_to_cell(self, x: float, y: float) -> tuple[int, int]:
        return (self.y_to_row(y), self.x_to_column(x))

    def map_to_cells(self, xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Vectorized ``point_to_cell``; non-finite coordinates map to -1.

        When ``max - min`` overflows to inf, points whose offset also
        overflows come out as NaN and get the same -1 sentinel.
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        with np.errstate(over="ignore", invalid="ignore"):
            x_fraction = (xs - self.min_x) / self.range_x
            y_fraction = (ys - self.min_y) / self.range_y
        columns = rint_half_away(float(self.width - PAD) * x_fraction)
        from_bottom = rint_half_away(float(self.height - PAD) * y_fraction)
        rows = self.height - from_bottom - 1
        rows[~np.isfinite(ys)] = -1
        columns[~np.isfinite(xs)] = -1
        return rows, columns

    def axis_layout(self) -> AxisLayout:
        x0_is_visible = self.min_x <= 0.0 <= self.max_x
        y0_is_visible = self.min_y <= 0.0 <= self.max_y

        vertical_at_x = 0.0
        horizontal_at_y = 0.0
        if not x0_is_visible:
            vertical_at_x = self.min_x if self.min_x > 0.0 else self.max_x
        if not y0_is_visible:
            horizontal_at_y = self.min_y if self.min_y > 0.0 else self.max_y

        return AxisLayout(
            vertical_at_x=vertical_at_x,
            vertical_column=self.point_to_cell(vertical_at_x, 0.0)[1],
            vertical_is_zero=x0_is_visible,
            horizontal_at_y=horizontal_at_y,
            horizontal_row=self.point_to_cell(0.0, horizontal_at_y)[0],
            horizontal_is_zero=y0_is_visible,
        )

    def draw_into(self, canvas: Canvas) -> AxisLayout:
        """Draw both axes into ``canvas`` and return where they were placed."""
        layout = self.axis_layout()
        LOGGER.debug("axis layout %s", layout)

        glyphs = ZERO_VERTICAL if layout.vertical_is_zero else SYNTHETIC
        column = layout.vertical_column
        for row in range(self.height):
            cell = canvas.cell(row, column)
            if cell is None:
                raise FrameConsistencyError(row, column, "vertical", layout.vertical_at_x)
            cell.value = glyphs.major if row % MAJOR_TICK_EVERY == 0 else glyphs.minor

        glyphs = ZERO_HORIZONTAL if layout.horizontal_is_zero else SYNTHETIC
        row = layout.horizontal_row
        for column in range(self.width):
            cell = canvas.cell(row, column)
            if cell is None:
                raise FrameConsistencyError(row, column, "horizontal", layout.horizontal_at_y)
            cell.value = glyphs.major if column % MAJOR_TICK_EVERY == 0 else glyphs.minor

        crossing = canvas.cell(layout.horizontal_row, layout.vertical_column)
        assert crossing is not None, "both axis lines were bounds-checked above"
        crossing.value = AXIS_CROSSING
        return layout
