"""Time every registered closest-pair algorithm on random point sets.

    python scripts/benchmark.py [size ...]

Prints a results table and writes benchmark.png (time vs. n, log-log).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from closest_pair.engine.benchmark import BenchmarkResult, format_results, run_benchmark
from closest_pair.engine.config import BenchmarkConfig

OUT_PATH = Path("benchmark.png")


def plot_results(results: list[BenchmarkResult], out_path: Path) -> None:
    fig, ax = plt.subplots(figsize=(8, 5))
    for name in sorted({r.algorithm for r in results}):
        rows = [r for r in results if r.algorithm == name]
        ax.plot([r.n for r in rows], [r.elapsed_ms for r in rows], marker="o", label=name)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("points")
    ax.set_ylabel("time (ms)")
    ax.set_title("Closest pair — best-of-N wall time")
    ax.legend()
    ax.grid(True, which="both", alpha=0.3)
    fig.tight_layout()
    fig.savefig(out_path, dpi=120)
    plt.close(fig)


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s %(message)s")

    sizes = [int(a) for a in sys.argv[1:]] or [1_000, 2_000, 5_000]
    config = BenchmarkConfig(sizes=sizes, seed=0, repeats=3)

    results = run_benchmark(config)
    print(format_results(results))

    plot_results(results, OUT_PATH)
    print(f"Saved {OUT_PATH}")


if __name__ == "__main__":
    main()
