"""Tests for the command-line interface."""

import io
import logging
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from unit_converter.cli import build_parser, main
from unit_converter.logging_utils import setup_logger


def _run(argv, inputs=None):
    out = io.StringIO()
    with redirect_stdout(out):
        if inputs is None:
            code = main(argv)
        else:
            with patch("builtins.input", side_effect=inputs):
                code = main(argv)
    return code, out.getvalue()


class TestParser(unittest.TestCase):
    def test_defaults(self):
        args = build_parser().parse_args(["convert", "10"])
        self.assertEqual(args.category, "distance")
        self.assertFalse(args.reverse)

    def test_unknown_category_rejected(self):
        with redirect_stdout(io.StringIO()), patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                build_parser().parse_args(["convert", "10", "--category", "volume"])


class TestConvertCommand(unittest.TestCase):
    def test_default_pair(self):
        code, out = _run(["convert", "10"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "10 Kilometers = 6.25 Miles")

    def test_reverse(self):
        code, out = _run(["convert", "10", "--reverse"])
        self.assertEqual(out.strip(), "10 Miles = 16.0 Kilometers")

    def test_mass(self):
        code, out = _run(["convert", "1", "--category", "mass", "--reverse"])
        self.assertEqual(out.strip(), "1 Pounds = 0.45359237 Kilograms")

    def test_invalid_value(self):
        code, out = _run(["convert", "abc"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "\n")

    def test_exponent_with_sign(self):
        code, out = _run(["convert", "-1e3"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "-1e3 Kilometers = -625.0 Miles")

    def test_negative_infinity(self):
        code, out = _run(["convert", "-inf", "--category", "mass"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "-inf Kilograms = -inf Pounds")

    def test_negative_value_after_options(self):
        code, out = _run(["convert", "--reverse", "-1e3"])
        self.assertEqual(out.strip(), "-1e3 Miles = -1600.0 Kilometers")

    def test_unknown_flag_rejected(self):
        with redirect_stdout(io.StringIO()), patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["convert", "-x"])
        self.assertEqual(ctx.exception.code, 2)

    def test_missing_value_rejected(self):
        with redirect_stdout(io.StringIO()), patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["convert"])
        self.assertEqual(ctx.exception.code, 2)


class TestOtherCommands(unittest.TestCase):
    def test_labels(self):
        code, out = _run(["labels", "--category", "mass"])
        self.assertIn("Source:      Kilograms", out)
        self.assertIn("Destination: Pounds", out)

    def test_categories(self):
        code, out = _run(["categories"])
        self.assertIn("Miles and Kilometers", out)
        self.assertIn("Pounds to Kilograms", out)

    def test_no_command_prints_help(self):
        code, out = _run([])
        self.assertEqual(code, 0)
        self.assertIn("usage:", out)


class TestLogging(unittest.TestCase):
    def tearDown(self):
        setup_logger("WARNING")

    def test_verbose_enables_debug(self):
        with patch("sys.stderr", io.StringIO()) as err:
            _run(["-v", "labels"])
        self.assertEqual(logging.getLogger("unit_converter").level, logging.DEBUG)
        self.assertIn("Running command labels", err.getvalue())

    def test_level_from_environment(self):
        with patch("unit_converter.config.LOG_LEVEL", "error"):
            _run(["labels"])
        self.assertEqual(logging.getLogger("unit_converter").level, logging.ERROR)

    def test_unknown_level_falls_back_to_warning(self):
        with patch("unit_converter.config.LOG_LEVEL", "loud"), \
                patch("sys.stderr", io.StringIO()) as err:
            code, out = _run(["labels"])
        self.assertEqual(code, 0)
        self.assertEqual(logging.getLogger("unit_converter").level, logging.WARNING)
        self.assertIn("Unknown log level 'LOUD'", err.getvalue())


class TestInteractive(unittest.TestCase):
    def test_reconverts_after_transitions(self):
        code, out = _run(["interactive"], inputs=["10", "t", "c mass", "q"])
        lines = out.strip().splitlines()
        self.assertEqual(code, 0)
        self.assertIn("6.25", lines)
        self.assertIn("Miles -> Kilometers (distance)", lines)
        self.assertIn("16.0", lines)
        self.assertIn("Pounds -> Kilograms (mass)", lines)
        self.assertAlmostEqual(float(lines[-1]), 4.5359237)

    def test_invalid_input_prints_empty(self):
        code, out = _run(["interactive"], inputs=["abc", "t", "q"])
        lines = out.splitlines()
        # Empty result for the input, then again after the toggle
        self.assertEqual(lines.count(""), 2)

    def test_unknown_category(self):
        code, out = _run(["interactive"], inputs=["c volume", "q"])
        self.assertIn("Unknown category 'volume'", out)

    def test_padded_value_is_not_a_number(self):
        code, out = _run(["interactive"], inputs=[" 10", "10", "q"])
        lines = out.splitlines()
        self.assertEqual(lines[-2:], ["", "6.25"])


if __name__ == "__main__":
    unittest.main()
