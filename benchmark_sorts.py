import sys
import os
import time
import csv
import random
import argparse
from typing import Dict, Any, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from algorithms.sorting.merge_sort import MERGE_VARIANTS, merge_sort
from algorithms.sorting.sort_config import VARIANT_NAMES
from algorithms.sorting.sort_metrics import SortStats

DEFAULT_SIZES = [100, 1000, 5000, 20000]


def run_single_trial(trial_id: int, size: int, rng: random.Random) -> Dict[str, Any]:
    """
    Sorts one random list with every merge variant on isolated copies.
    """
    base = [rng.randint(0, size) for _ in range(size)]
    expected = sorted(base)

    result: Dict[str, Any] = {"trial_id": trial_id, "size": size}

    for variant in VARIANT_NAMES:
        values = list(base)
        stats = SortStats()
        start_time = time.perf_counter()
        merge_sort(values, merge_fn=MERGE_VARIANTS[variant], stats=stats)
        elapsed = time.perf_counter() - start_time

        result[f"{variant}_ok"] = values == expected
        result[f"{variant}_time"] = elapsed
        result[f"{variant}_comparisons"] = stats.comparisons
        result[f"{variant}_writes"] = stats.writes
        result[f"{variant}_depth"] = stats.max_depth

    return result


def run_benchmark(sizes: List[int], repeats: int, seed: int = 0) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    results = []
    total = len(sizes) * repeats
    done = 0
    for size in sizes:
        for _ in range(repeats):
            done += 1
            print(f"Running trial {done}/{total} (n={size})...", end="\r")
            results.append(run_single_trial(done, size, rng))
    print()
    return results


def summarize(results: List[Dict[str, Any]]) -> Dict[str, Dict[str, float]]:
    """Average time/comparisons per variant across all trials."""
    summary = {}
    for variant in VARIANT_NAMES:
        count = len(results)
        summary[variant] = {
            "correct": sum(1 for r in results if r[f"{variant}_ok"]),
            "avg_time": sum(r[f"{variant}_time"] for r in results) / count if count else 0.0,
            "avg_comparisons": sum(r[f"{variant}_comparisons"] for r in results) / count if count else 0.0,
        }
    return summary


def write_csv(results: List[Dict[str, Any]], path: str):
    keys = results[0].keys()
    with open(path, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark merge variants")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="List sizes to sort")
    parser.add_argument("--repeats", type=int, default=3, help="Trials per size")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args(argv)
    if args.repeats < 1 or any(n < 0 for n in args.sizes):
        parser.error("--repeats must be positive and --sizes non-negative")

    print(f"Starting Benchmark: sizes={args.sizes}, repeats={args.repeats}, seed={args.seed}")

    results = run_benchmark(args.sizes, args.repeats, args.seed)
    write_csv(results, args.output)
    print(f"Results saved to {args.output}")

    # Print Summary Table
    print("\nSummary Statistics:")
    print(f"{'Variant':<10} | {'Correct':<9} | {'Avg Time (s)':<12} | {'Avg Comparisons':<15}")
    print("-" * 56)

    for variant, row in summarize(results).items():
        correct = f"{row['correct']}/{len(results)}"
        print(f"{variant:<10} | {correct:>9} | {row['avg_time']:>12.4f} | {row['avg_comparisons']:>15.1f}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
