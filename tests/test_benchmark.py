import unittest
import sys
import os
import io
import csv
import random
import tempfile
from contextlib import redirect_stderr, redirect_stdout

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import benchmark_sorts
import generate_sort_charts


class TestBenchmark(unittest.TestCase):

    def test_single_trial_checks_every_variant(self):
        row = benchmark_sorts.run_single_trial(1, 64, random.Random(3))
        self.assertEqual(row["size"], 64)
        for variant in ("sentinel", "buffered"):
            self.assertTrue(row[f"{variant}_ok"])
            self.assertEqual(row[f"{variant}_writes"], 64 * 6)
            self.assertEqual(row[f"{variant}_depth"], 6)
        self.assertEqual(row["sentinel_comparisons"], 64 * 6)
        self.assertLessEqual(row["buffered_comparisons"], row["sentinel_comparisons"])

    def test_summarize(self):
        with redirect_stdout(io.StringIO()):
            results = benchmark_sorts.run_benchmark([10, 20], repeats=2, seed=1)
        self.assertEqual(len(results), 4)
        summary = benchmark_sorts.summarize(results)
        self.assertEqual(summary["sentinel"]["correct"], 4)
        self.assertEqual(summary["buffered"]["correct"], 4)

    def test_main_writes_csv(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.csv")
            with redirect_stdout(io.StringIO()) as out:
                code = benchmark_sorts.main(["--sizes", "5", "50", "--repeats", "1", "--output", path])
            self.assertEqual(code, 0)
            with open(path, newline="") as f:
                rows = list(csv.DictReader(f))
        self.assertEqual([r["size"] for r in rows], ["5", "50"])
        self.assertEqual(rows[0]["sentinel_ok"], "True")
        self.assertIn("Summary Statistics", out.getvalue())


class TestCharts(unittest.TestCase):

    def test_nlogn_reference_passes_through_anchor(self):
        ref = generate_sort_charts.nlogn_reference([16, 64, 256], 256, 2.0)
        self.assertAlmostEqual(float(ref[-1]), 2.0)
        self.assertLess(float(ref[0]), float(ref[1]))

    def test_main_rejects_non_positive_repeats(self):
        for repeats in ("0", "-2"):
            with tempfile.TemporaryDirectory() as tmp:
                with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()) as err, \
                        self.assertRaises(SystemExit) as ctx:
                    generate_sort_charts.main(["--quick", "--repeats", repeats, "--output-dir", tmp])
                self.assertEqual(ctx.exception.code, 2)
                self.assertIn("--repeats must be positive", err.getvalue())
                self.assertEqual(os.listdir(tmp), [])

    def test_main_quick_run_writes_charts(self):
        with tempfile.TemporaryDirectory() as tmp:
            with redirect_stdout(io.StringIO()):
                code = generate_sort_charts.main(["--quick", "--repeats", "1", "--output-dir", tmp])
            self.assertEqual(code, 0)
            self.assertEqual(sorted(os.listdir(tmp)), ["1_timing.png", "2_comparisons.png", "3_depth.png"])

    def test_generate_charts_writes_pngs(self):
        with redirect_stdout(io.StringIO()):
            results = benchmark_sorts.run_benchmark([8, 32], repeats=1)
            with tempfile.TemporaryDirectory() as tmp:
                paths = generate_sort_charts.generate_charts(results, tmp)
                self.assertEqual(len(paths), 3)
                for path in paths:
                    self.assertTrue(os.path.getsize(path) > 0)


if __name__ == '__main__':
    unittest.main()
