from __future__ import annotations

import io
import os
from pathlib import Path
import tempfile
import unittest
from unittest import mock

from termplot import PlotConfigError
from termplot.cli import EXIT_INTERNAL, EXIT_OK, EXIT_USAGE, build_parser, main
from termplot.config import DIMENSIONS_HINT, PlotOptions, parse_dimensions
from termplot.errors import FrameConsistencyError


class ParseDimensionsTests(unittest.TestCase):
    def test_width_by_height(self) -> None:
        self.assertEqual(parse_dimensions("72x30"), (72, 30))

    def test_whitespace_is_ignored(self) -> None:
        self.assertEqual(parse_dimensions(" 72 x\t30 "), (72, 30))

    def test_malformed_strings_are_rejected(self) -> None:
        for raw in ("72", "72X30", "axb", "72x30x2", "", "x30"):
            with self.assertRaisesRegex(PlotConfigError, "Invalid dimensions format"):
                parse_dimensions(raw)

    def test_too_small_for_padding_is_rejected(self) -> None:
        with self.assertRaisesRegex(PlotConfigError, "too small"):
            parse_dimensions("2x10")
        with self.assertRaisesRegex(PlotConfigError, "too small"):
            parse_dimensions("10x-4")


class PlotOptionsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            args = build_parser().parse_args([])
        options = PlotOptions.from_args(args)
        self.assertEqual(options, PlotOptions())
        self.assertEqual((options.width, options.height), (90, 25))

    def test_flags_map_to_options(self) -> None:
        args = build_parser().parse_args(["-d", "20x10", "--dot", "--no-x-is-row", "--log-x", "--log-y", "--cdf"])
        options = PlotOptions.from_args(args)
        self.assertEqual(
            options,
            PlotOptions(width=20, height=10, mode="dot", x_is_row=False, log_x=True, log_y=True, cdf=True),
        )

    def test_environment_supplies_default_dimensions(self) -> None:
        with mock.patch.dict(os.environ, {"TERMPLOT_DIMENSIONS": "40x12"}):
            args = build_parser().parse_args([])
        self.assertEqual(PlotOptions.from_args(args).width, 40)

    def test_explicit_dimensions_beat_environment(self) -> None:
        with mock.patch.dict(os.environ, {"TERMPLOT_DIMENSIONS": "40x12"}):
            args = build_parser().parse_args(["-d", "30x8"])
        self.assertEqual((PlotOptions.from_args(args).width, PlotOptions.from_args(args).height), (30, 8))


class MainTests(unittest.TestCase):
    def _run(self, argv: list[str], stdin: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with mock.patch("sys.stdin", io.StringIO(stdin)), mock.patch("sys.stdout", out), mock.patch("sys.stderr", err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_plots_stdin_column(self) -> None:
        code, out, _ = self._run(["-d", "10x10", "--dot"], "0\n1\n4\n")
        self.assertEqual(code, EXIT_OK)
        lines = out.splitlines()
        self.assertEqual(len(lines), 10)
        self.assertEqual(lines[0], "+")
        self.assertEqual(lines[1], "|       *")
        self.assertEqual(lines[7], "|   *")
        self.assertEqual(lines[9], "*----+----")

    def test_count_mode_is_default(self) -> None:
        code, out, _ = self._run(["-d", "10x10", "--no-x-is-row"], "0 0\n0 0\n1 1\n2 4\n")
        self.assertEqual(code, EXIT_OK)
        lines = out.splitlines()
        self.assertEqual(lines[9], ":----+----")
        self.assertEqual(lines[7], "|   .")

    def test_reads_input_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.txt"
            path.write_text("0 0\n1 1\n2 4\n", encoding="utf-8")
            code, out, _ = self._run(["-d", "10x10", "--dot", "--no-x-is-row", "--input", str(path)], "")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out.splitlines()[1], "|       *")

    def test_missing_input_file_is_a_usage_error(self) -> None:
        code, out, err = self._run(["--input", "/nonexistent/termplot/data.txt"], "")
        self.assertEqual(code, EXIT_USAGE)
        self.assertEqual(out, "")
        self.assertIn("cannot read input", err)

    def test_invalid_dimensions_exit_with_hint(self) -> None:
        code, out, err = self._run(["-d", "wide"], "1\n")
        self.assertEqual(code, EXIT_USAGE)
        self.assertEqual(out, "")
        self.assertIn(DIMENSIONS_HINT, err)

    def test_no_finite_data_is_a_usage_error(self) -> None:
        code, _, err = self._run(["-d", "10x10"], "abc\nnan\n")
        self.assertEqual(code, EXIT_USAGE)
        self.assertIn("no plottable data", err)

    def test_separator_only_input_is_a_usage_error(self) -> None:
        code, out, err = self._run(["-d", "10x10", "--no-x-is-row"], ",\n")
        self.assertEqual(code, EXIT_USAGE)
        self.assertEqual(out, "")
        self.assertIn("no plottable data", err)

    def test_internal_error_has_its_own_exit_code(self) -> None:
        with mock.patch("termplot.cli.render_plot", side_effect=FrameConsistencyError(3, 4, "vertical", 0.0)):
            code, out, _ = self._run(["-d", "10x10"], "1\n2\n")
        self.assertEqual(code, EXIT_INTERNAL)
        self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
