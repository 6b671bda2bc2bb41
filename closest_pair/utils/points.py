"""Point-set builders for benchmarks, tests and the API. No algorithm imports."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from closest_pair.engine.primitives import COORDINATE_BITS, Point


def random_points(n: int, coordinate_bits: int = 31, seed: int | None = None) -> list[Point]:
    """``n`` points drawn uniformly from ``[0, 2**coordinate_bits)`` on both axes."""
    if not 1 <= coordinate_bits <= COORDINATE_BITS:
        raise ValueError(f"coordinate_bits must be between 1 and {COORDINATE_BITS}")
    rng = np.random.default_rng(seed)
    coords = rng.integers(0, 1 << coordinate_bits, size=(n, 2), dtype=np.int64)
    return [Point(int(x), int(y)) for x, y in coords]


def grid_points(width: int, height: int) -> list[Point]:
    """Every integer point with 0 <= x < width and 0 <= y < height."""
    return [Point(x, y) for x in range(width) for y in range(height)]


def points_from_pairs(pairs: Iterable[tuple[int, int]]) -> list[Point]:
    return [Point(x, y) for x, y in pairs]
