import unittest
import sys
import os
import io
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import demo
from algorithms.sorting.sort_config import VARIANT_ENV


def run_demo(argv):
    out = io.StringIO()
    with redirect_stdout(out):
        code = demo.main(argv)
    return code, out.getvalue()


class TestDemo(unittest.TestCase):

    def test_default_output(self):
        code, out = run_demo([])
        self.assertEqual(code, 0)
        self.assertEqual(out, "1 2 3 4 5 6 8\n26 31 41 42 58 59\n")

    def test_variant_flag(self):
        for variant in ("sentinel", "buffered"):
            code, out = run_demo(["--variant", variant])
            self.assertEqual(out.splitlines()[1], "26 31 41 42 58 59")

    def test_samples_not_mutated(self):
        run_demo([])
        self.assertEqual(demo.SORT_SAMPLE, [31, 41, 59, 26, 42, 58])
        self.assertEqual(demo.MERGE_SAMPLE, [1, 3, 5, 2, 4, 6, 8])

    def test_custom_values(self):
        code, out = run_demo(["--values", "9", "3", "7", "1"])
        self.assertEqual(out, "1 3 7 9\n")

    def test_custom_range(self):
        code, out = run_demo(["--values", "9", "3", "7", "1", "--low", "1", "--high", "3"])
        self.assertEqual(out, "9 1 3 7\n")

    def test_env_variant_for_custom_values(self):
        with mock.patch.dict(os.environ, {VARIANT_ENV: "buffered"}):
            code, out = run_demo(["--values", "2", "1"])
        self.assertEqual(out, "1 2\n")

    def test_bad_range_exits_with_usage_error(self):
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            run_demo(["--values", "1", "2", "--high", "5"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("outside a sequence of length 2", err.getvalue())

    def test_range_without_values_rejected(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            run_demo(["--low", "1"])
        self.assertEqual(ctx.exception.code, 2)

    def test_format_values(self):
        self.assertEqual(demo.format_values([]), "")
        self.assertEqual(demo.format_values([1, -2]), "1 -2")


if __name__ == '__main__':
    unittest.main()
