"""Benchmark harness — times registered algorithms across input sizes.

Each size gets one random point set shared by every algorithm. Results can be
cross-checked against brute force on sizes small enough for it to finish.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from closest_pair.engine.config import BenchmarkConfig
from closest_pair.engine.primitives import ClosestPair, Point
from closest_pair.engine.registry import AlgorithmRegistry, get_registry
from closest_pair.utils.points import random_points

logger = logging.getLogger(__name__)

REFERENCE_ALGORITHM = "brute_force"


@dataclass
class BenchmarkResult:
    algorithm: str
    n: int
    elapsed_ms: float
    distance: float
    reference_distance: float | None = None

    @property
    def matches_reference(self) -> bool | None:
        if self.reference_distance is None:
            return None
        return self.distance == self.reference_distance


def _time_call(
    registry: AlgorithmRegistry,
    name: str,
    points: list[Point],
    bits: int,
    repeats: int,
) -> tuple[ClosestPair, float]:
    t0 = time.perf_counter()
    result = registry.run(name, points, bits=bits)
    best_ms = (time.perf_counter() - t0) * 1000
    for _ in range(repeats - 1):
        t0 = time.perf_counter()
        result = registry.run(name, points, bits=bits)
        best_ms = min(best_ms, (time.perf_counter() - t0) * 1000)
    return result, best_ms


def run_benchmark(
    config: BenchmarkConfig | None = None,
    registry: AlgorithmRegistry | None = None,
) -> list[BenchmarkResult]:
    """Run every requested algorithm on every requested size."""
    config = config or BenchmarkConfig()
    registry = registry or get_registry()
    names = config.algorithms or registry.names
    for name in names:
        registry.get(name)  # fail fast on unknown names

    results: list[BenchmarkResult] = []
    start = time.perf_counter()

    for n in config.sizes:
        points = random_points(n, coordinate_bits=config.coordinate_bits, seed=config.seed)

        reference: float | None = None
        if config.cross_validate and n <= config.cross_validate_max_points:
            reference = registry.run(REFERENCE_ALGORITHM, points).distance

        for name in names:
            pair, elapsed = _time_call(registry, name, points, config.pack_bits, config.repeats)
            row = BenchmarkResult(
                algorithm=name,
                n=n,
                elapsed_ms=round(elapsed, 3),
                distance=pair.distance,
                reference_distance=reference,
            )
            results.append(row)
            logger.info("  %s n=%d: %.1fms distance=%.3f", name, n, elapsed, pair.distance)
            if row.matches_reference is False:
                logger.warning(
                    "  %s n=%d disagrees with %s: %.6f != %.6f",
                    name,
                    n,
                    REFERENCE_ALGORITHM,
                    pair.distance,
                    reference,
                )

    total = (time.perf_counter() - start) * 1000
    logger.info("Benchmark complete: %d runs in %.0fms", len(results), total)
    return results


def format_results(results: list[BenchmarkResult]) -> str:
    """Render results as an aligned text table."""
    header = f"{'algorithm':<12} {'n':>10} {'time (ms)':>12} {'distance':>14} {'check':>6}"
    lines = [header, "-" * len(header)]
    for r in results:
        check = {True: "ok", False: "MISS", None: "-"}[r.matches_reference]
        lines.append(
            f"{r.algorithm:<12} {r.n:>10} {r.elapsed_ms:>12.3f} {r.distance:>14.3f} {check:>6}"
        )
    return "\n".join(lines)
