from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
import sys
from typing import Sequence, TextIO

from termplot.adapters import parse_table
from termplot.config import DEFAULT_DIMENSIONS, DIMENSIONS_ENV_VAR, PlotOptions
from termplot.errors import FrameConsistencyError, PlotConfigError, PlotDataError
from termplot.render import render_plot
from termplot.transforms import prepare


LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INTERNAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termplot",
        description="Plot whitespace-separated numeric columns as a character grid.",
    )
    parser.add_argument(
        "-d",
        dest="dimensions",
        metavar="WxH",
        default=os.getenv(DIMENSIONS_ENV_VAR, DEFAULT_DIMENSIONS),
        help=f"Dimensions in columns x rows (default: ${DIMENSIONS_ENV_VAR} or {DEFAULT_DIMENSIONS}).",
    )
    parser.add_argument("--dot", action="store_true", help="Use Dot mode instead of Count mode.")
    parser.add_argument(
        "--no-x-is-row",
        action="store_true",
        help="Read x from the first column instead of using the row number.",
    )
    parser.add_argument("--log-x", action="store_true", help="Apply log10 transform to the X axis.")
    parser.add_argument("--log-y", action="store_true", help="Apply log10 transform to the Y axis.")
    parser.add_argument("--cdf", action="store_true", help="Plot the cumulative distribution function.")
    parser.add_argument("--input", type=Path, default=None, help="Read data from a file instead of stdin.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def run(options: PlotOptions, source: TextIO, out: TextIO) -> None:
    dataset = parse_table(source, x_is_row=options.x_is_row)
    dataset = prepare(dataset, cdf=options.cdf, log_x=options.log_x, log_y=options.log_y)
    canvas = render_plot(dataset, options.width, options.height, options.mode)
    for line in canvas.lines():
        out.write(line.rstrip() + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = PlotOptions.from_args(args)
        LOGGER.debug("%s", options)
        if args.input is None or str(args.input) == "-":
            run(options, sys.stdin, sys.stdout)
        else:
            with args.input.open("r", encoding="utf-8") as f:
                run(options, f, sys.stdout)
    except (PlotConfigError, PlotDataError) as exc:
        print(exc, file=sys.stderr)
        return EXIT_USAGE
    except OSError as exc:
        print(f"cannot read input: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except FrameConsistencyError as exc:
        LOGGER.exception("internal error: %s", exc)
        return EXIT_INTERNAL
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
