"""
Merge Variant Chart Generator
=============================
Benchmarks the sentinel and buffered merges and draws 3 charts.
Run:  python generate_sort_charts.py --repeats 3
Output: sort_charts/ folder with 3 PNG files.
"""

import sys
import os
import argparse
import numpy as np
from collections import defaultdict
from typing import Any, Dict, List

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from algorithms.sorting.sort_config import VARIANT_NAMES
from benchmark_sorts import run_benchmark

# ──────────────────────────────────────────────────────────────
# Color Palette & Styling
# ──────────────────────────────────────────────────────────────
COLORS = {
    "sentinel": "#51CF66",   # Emerald Green
    "buffered": "#339AF0",   # Sky Blue
}
VARIANT_LABELS = {"sentinel": "Sentinel merge", "buffered": "Buffered merge"}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"
ACCENT_GOLD = "#E0AF68"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "savefig.dpi": 150,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def group_by_size(results: List[Dict[str, Any]]) -> Dict[int, List[Dict[str, Any]]]:
    grouped = defaultdict(list)
    for row in results:
        grouped[row["size"]].append(row)
    return dict(sorted(grouped.items()))


def nlogn_reference(sizes, anchor_size, anchor_value):
    """n log2 n curve scaled to pass through (anchor_size, anchor_value)."""
    sizes = np.asarray(sizes, dtype=float)
    curve = sizes * np.log2(np.maximum(sizes, 2))
    anchor = anchor_size * np.log2(max(anchor_size, 2))
    if anchor == 0:
        return curve
    return curve * (anchor_value / anchor)


# ──────────────────────────────────────────────────────────────
# Chart Generators
# ──────────────────────────────────────────────────────────────
def chart_1_timing(grouped, out_dir):
    """Line chart: mean time vs n, with an n log n guide."""
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = np.array(list(grouped.keys()))

    for variant in VARIANT_NAMES:
        times = [np.mean([r[f"{variant}_time"] for r in rows]) for rows in grouped.values()]
        ax.plot(sizes, times, marker="o", linewidth=2.5, color=COLORS[variant],
                label=VARIANT_LABELS[variant], zorder=3)

    last = list(grouped.values())[-1]
    ref = nlogn_reference(sizes, sizes[-1], np.mean([r["sentinel_time"] for r in last]))
    ax.plot(sizes, ref, linestyle="--", color=ACCENT_GOLD, label="n log₂ n (scaled)")

    ax.set_xlabel("n (elements)")
    ax.set_ylabel("Average Time (seconds)")
    ax.set_title("Sort Time vs Input Size", pad=15)
    ax.legend(loc="upper left")
    ax.grid(zorder=0)

    fig.savefig(os.path.join(out_dir, "1_timing.png"))
    plt.close(fig)
    print("  ✓ Chart 1: Timing")


def chart_2_comparisons(grouped, out_dir):
    """Grouped bars: mean comparisons per variant at each n."""
    fig, ax = plt.subplots(figsize=(10, 6))
    labels = [str(n) for n in grouped.keys()]
    x = np.arange(len(labels))
    width = 0.35

    for i, variant in enumerate(VARIANT_NAMES):
        counts = [np.mean([r[f"{variant}_comparisons"] for r in rows]) for rows in grouped.values()]
        ax.bar(x + i * width, counts, width, label=VARIANT_LABELS[variant],
               color=COLORS[variant], edgecolor="none", alpha=0.9, zorder=3)

    ax.set_xticks(x + width / 2)
    ax.set_xticklabels(labels)
    ax.set_xlabel("n (elements)")
    ax.set_ylabel("Comparisons")
    ax.set_title("Comparisons per Merge Variant", pad=15)
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)

    fig.savefig(os.path.join(out_dir, "2_comparisons.png"))
    plt.close(fig)
    print("  ✓ Chart 2: Comparisons")


def chart_3_depth(grouped, out_dir):
    """Recursion depth against ceil(log2 n)."""
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = np.array(list(grouped.keys()))
    depths = [max(r["sentinel_depth"] for r in rows) for rows in grouped.values()]
    bound = np.ceil(np.log2(np.maximum(sizes, 1)))

    ax.plot(sizes, depths, marker="s", linewidth=2.5, color=COLORS["sentinel"], label="Observed depth")
    ax.plot(sizes, bound, linestyle="--", color=ACCENT_GOLD, label="⌈log₂ n⌉")
    ax.set_xscale("log")
    ax.set_xlabel("n (elements)")
    ax.set_ylabel("Recursion depth")
    ax.set_title("Recursion Depth", pad=15)
    ax.legend(loc="upper left")
    ax.grid(zorder=0)

    fig.savefig(os.path.join(out_dir, "3_depth.png"))
    plt.close(fig)
    print("  ✓ Chart 3: Recursion Depth")


def generate_charts(results, out_dir) -> List[str]:
    os.makedirs(out_dir, exist_ok=True)
    setup_style()
    grouped = group_by_size(results)
    chart_1_timing(grouped, out_dir)
    chart_2_comparisons(grouped, out_dir)
    chart_3_depth(grouped, out_dir)
    return [os.path.join(out_dir, name)
            for name in ("1_timing.png", "2_comparisons.png", "3_depth.png")]


# ──────────────────────────────────────────────────────────────
# Main
# ──────────────────────────────────────────────────────────────
def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate merge variant charts")
    parser.add_argument("--repeats", type=int, default=3,
                        help="Trials per size (default: 3)")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: small sizes only")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Folder for the PNG files (default: ./sort_charts)")
    args = parser.parse_args(argv)
    if args.repeats < 1:
        parser.error("--repeats must be positive")

    out_dir = args.output_dir or os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                              "sort_charts")
    sizes = [16, 64, 256] if args.quick else [16, 64, 256, 1024, 4096, 16384]

    print(f"  Sizes         : {sizes}")
    print(f"  Repeats       : {args.repeats}")
    print(f"  Output folder : {out_dir}")
    print()

    print("Phase 1/2: Running Benchmarks...")
    results = run_benchmark(sizes, args.repeats)

    print("\nPhase 2/2: Generating Charts...")
    generate_charts(results, out_dir)

    print(f"All charts saved to: {out_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
