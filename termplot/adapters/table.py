from __future__ import annotations

from collections.abc import Iterable
import logging
import re

import numpy as np

from termplot.errors import PlotDataError
from termplot.series import Dataset


LOGGER = logging.getLogger(__name__)
FIELD_SEPARATOR = re.compile(r"[\s,]+")


def parse_table(lines: Iterable[str], *, x_is_row: bool = True) -> Dataset:
    """Read whitespace/comma separated numeric columns into a ``Dataset``.

    With ``x_is_row`` the row index is x and every column is a y series.
    Otherwise the first column is x and the remaining columns are y series;
    single-column input then plots the row index as y.
    """
    rows = [_parse_fields(line) for line in lines if _is_data_line(line)]
    if not rows:
        raise PlotDataError("no input rows to plot")

    ncols = max(len(row) for row in rows)
    if ncols == 0:
        raise PlotDataError("no plottable data: input rows contain no fields")
    table = np.full((len(rows), ncols), np.nan, dtype=np.float64)
    for i, row in enumerate(rows):
        table[i, : len(row)] = row
    LOGGER.debug("parsed %d row(s) x %d column(s)", table.shape[0], ncols)

    index = np.arange(table.shape[0], dtype=np.float64)
    if x_is_row:
        return Dataset(xs=index, ys=tuple(table[:, c].copy() for c in range(ncols)))
    if ncols == 1:
        return Dataset(xs=table[:, 0].copy(), ys=(index,))
    return Dataset(xs=table[:, 0].copy(), ys=tuple(table[:, c].copy() for c in range(1, ncols)))


def _is_data_line(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


def _parse_fields(line: str) -> list[float]:
    out: list[float] = []
    for token in FIELD_SEPARATOR.split(line.strip()):
        if not token:
            continue
        try:
            out.append(float(token))
        except ValueError:
            out.append(float("nan"))
    return out
