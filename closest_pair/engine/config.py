"""Benchmark configuration — sizes, bit widths and cross-checking for the benchmark harness."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BenchmarkConfig:
    """Controls which algorithms run, on which input sizes, and how results are checked."""

    sizes: list[int] = field(default_factory=lambda: [1_000, 10_000, 100_000])
    # Empty means every registered algorithm
    algorithms: list[str] = field(default_factory=list)

    # Random points are drawn from [0, 2**coordinate_bits)
    coordinate_bits: int = 31
    # Bit width handed to algorithms that pack coordinates
    pack_bits: int = 31
    seed: int | None = None

    # Best-of-N timing
    repeats: int = 1

    # Cross-check every result against brute force up to this many points
    cross_validate: bool = True
    cross_validate_max_points: int = 5_000
