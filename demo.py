"""
Merge Sort Demo
===============
Prints the two classic textbook examples:

    merge([1, 3, 5, 2, 4, 6, 8], 0, 2, 6)   ->  1 2 3 4 5 6 8
    sort([31, 41, 59, 26, 42, 58])          ->  26 31 41 42 58 59

Run:  python demo.py
      python demo.py --values 9 3 7 1 --low 1 --high 3
"""

import sys
import os
import argparse
from typing import List, Optional, Sequence

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms.sorting.merge_sort import MERGE_VARIANTS, merge, merge_sort, merge_sort_buffered
from algorithms.sorting.sort_config import VARIANT_NAMES, resolve_variant
from algorithms.sorting.sort_errors import SortError, check_range

MERGE_SAMPLE = [1, 3, 5, 2, 4, 6, 8]
SORT_SAMPLE = [31, 41, 59, 26, 42, 58]


def format_values(values: Sequence) -> str:
    return " ".join(str(v) for v in values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="In-place merge sort demo")
    parser.add_argument("--variant", choices=VARIANT_NAMES, default=None,
                        help="Merge technique (default: env MERGESORT_VARIANT or 'sentinel')")
    parser.add_argument("--values", type=int, nargs="+", default=None,
                        help="Sort these integers instead of the built-in samples")
    parser.add_argument("--low", type=int, default=None, help="First index of the range")
    parser.add_argument("--high", type=int, default=None, help="Last index of the range (inclusive)")
    return parser


def run_samples(variant: Optional[str] = None) -> List[List[int]]:
    """Run the fixed examples and return both resulting lists."""
    merged = list(MERGE_SAMPLE)
    merge(merged, 0, 2, len(merged) - 1)

    values = list(SORT_SAMPLE)
    if variant is None:
        merge_sort_buffered(values, 0, len(values) - 1)
    else:
        merge_sort(values, 0, len(values) - 1, merge_fn=MERGE_VARIANTS[variant])
    return [merged, values]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.values is None:
        if args.low is not None or args.high is not None:
            parser.error("--low/--high need --values")
        for line in run_samples(args.variant):
            print(format_values(line))
        return 0

    values = list(args.values)
    low = 0 if args.low is None else args.low
    high = len(values) - 1 if args.high is None else args.high
    try:
        check_range(values, low, high)
        variant = resolve_variant(args.variant)
    except SortError as e:
        parser.error(str(e))

    merge_sort(values, low, high, merge_fn=MERGE_VARIANTS[variant])
    print(format_values(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())
