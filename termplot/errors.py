from __future__ import annotations


class TermplotError(Exception):
    """Base class for every error raised by termplot."""


class PlotConfigError(TermplotError, ValueError):
    """Raised for invalid user configuration (dimensions, modes, density tables)."""


class PlotDataError(TermplotError, ValueError):
    """Raised when the input data cannot be plotted."""


class FrameConsistencyError(TermplotError, RuntimeError):
    """A cell computed by the frame fell outside the canvas.

    This signals a mapping bug rather than bad input, so callers should treat
    it as fatal.
    """

    def __init__(self, row: int, column: int, axis: str, value: float) -> None:
        super().__init__(f"invalid cell ({row}, {column}) for {axis} axis component ({value}, _)")
        self.row = row
        self.column = column
        self.axis = axis
        self.value = value
