from __future__ import annotations

import numpy as np


BLANK = " "


def new_canvas(width: int, height: int, fill: str = BLANK) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    if len(fill) != 1:
        raise ValueError("canvas fill must be a single character")
    return np.full((height, width), fill, dtype="<U1")


class CanvasCell:
    """Assignable handle to one character of a canvas."""

    __slots__ = ("grid", "row", "column")

    def __init__(self, grid: np.ndarray, row: int, column: int) -> None:
        self.grid = grid
        self.row = row
        self.column = column

    @property
    def value(self) -> str:
        return str(self.grid[self.row, self.column])

    @value.setter
    def value(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"canvas cells hold a single character, got {char!r}")
        self.grid[self.row, self.column] = char


class Canvas:
    """Fixed-size character grid; row 0 is the top line of output."""

    def __init__(self, width: int, height: int, fill: str = BLANK) -> None:
        self.grid = new_canvas(width, height, fill)

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def cell(self, row: int, column: int) -> CanvasCell | None:
        if not self.in_bounds(row, column):
            return None
        return CanvasCell(self.grid, int(row), int(column))

    def lines(self) -> list[str]:
        return ["".join(row) for row in self.grid.tolist()]

    def to_text(self, *, strip: bool = False) -> str:
        lines = self.lines()
        if strip:
            lines = [line.rstrip() for line in lines]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_text()
