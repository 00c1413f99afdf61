from __future__ import annotations

import argparse
from dataclasses import dataclass
import re

from termplot.errors import PlotConfigError
from termplot.scales import PAD
from termplot.series import PlotMode


DEFAULT_DIMENSIONS = "90x25"
DIMENSIONS_ENV_VAR = "TERMPLOT_DIMENSIONS"
DIMENSIONS_HINT = "Invalid dimensions format! Use <width>x<height>, e.g., 72x30"


def parse_dimensions(raw: str) -> tuple[int, int]:
    """Parse ``"<width>x<height>"``; whitespace anywhere is ignored."""
    text = re.sub(r"\s+", "", raw)
    parts = text.split("x")
    if len(parts) != 2:
        raise PlotConfigError(DIMENSIONS_HINT)
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise PlotConfigError(DIMENSIONS_HINT) from exc
    if width <= PAD or height <= PAD:
        raise PlotConfigError(f"dimensions {width}x{height} are too small; each must be >= {PAD + 1}")
    return width, height


@dataclass(frozen=True)
class PlotOptions:
    width: int = 90
    height: int = 25
    mode: PlotMode = "count"
    x_is_row: bool = True
    log_x: bool = False
    log_y: bool = False
    cdf: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> PlotOptions:
        width, height = parse_dimensions(args.dimensions)
        return cls(
            width=width,
            height=height,
            mode="dot" if args.dot else "count",
            x_is_row=not args.no_x_is_row,
            log_x=args.log_x,
            log_y=args.log_y,
            cdf=args.cdf,
        )
