import argparse
import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from app.perfectgrid.main import main, positive_float

SQUARES = ["--width", "800", "--gap", "0", "--min-height", "200", "--max-height", "500", "--min-item-width", "180"]


class TestMain(unittest.TestCase):
    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(argv)
        return out.getvalue().splitlines()

    def test_prints_heights(self):
        self.assertEqual(self._run(["1", "1", "1", "1", "1"] + SQUARES), ["200", "200", "200", "200", "500"])

    def test_prints_rows(self):
        self.assertEqual(self._run(["1", "1", "1", "1", "1", "--rows"] + SQUARES), ["4 x 200", "1 x 500"])

    def test_reports_dropped(self):
        argv = ["1", "1", "1", "1", "2.5", "2"] + SQUARES[:-1] + ["150"]
        with redirect_stderr(io.StringIO()):
            lines = self._run(argv)
        self.assertEqual(lines[-1], "dropped: 2")

    def test_no_ratios(self):
        self.assertEqual(self._run(SQUARES), [])

    def test_bad_config_exits(self):
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            main(["1", "--min-height", "600", "--max-height", "500"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("Min height can not be bigger than max height", err.getvalue())

    def test_rejects_nan_ratio(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            main(["1", "nan"])
        self.assertEqual(ctx.exception.code, 2)

    def test_non_number_ratio_error_is_not_chained(self):
        with self.assertRaises(argparse.ArgumentTypeError) as ctx:
            positive_float("abc")
        self.assertTrue(ctx.exception.__suppress_context__)
        self.assertIsNone(ctx.exception.__cause__)

    def test_rejects_non_positive_ratio(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            main(["1", "0"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
