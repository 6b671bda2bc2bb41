"""Closest pair of 2D points with unsigned integer coordinates.

Three interchangeable algorithms:
- closest_pair_brute_force: exhaustive O(n^2) baseline
- closest_pair_optimized: exact O(n log n) divide and conquer
- closest_pair_bit_shift: packed-key sort heuristic, accuracy set by ``bits``

Usage:
    from closest_pair import Point, closest_pair_optimized

    first, second, distance = closest_pair_optimized([Point(0, 0), Point(3, 0), Point(0, 4)])
"""

__version__ = "0.1.0"

from closest_pair.engine import (  # noqa: E402
    ClosestPair,
    ClosestPairError,
    InternalInvariantViolation,
    InvalidInput,
    Point,
    closest_pair_bit_shift,
    closest_pair_brute_force,
    closest_pair_optimized,
    euclidean_distance,
    pack_numbers,
    unpack_numbers,
)

__all__ = [
    "ClosestPair",
    "ClosestPairError",
    "InternalInvariantViolation",
    "InvalidInput",
    "Point",
    "closest_pair_bit_shift",
    "closest_pair_brute_force",
    "closest_pair_optimized",
    "euclidean_distance",
    "pack_numbers",
    "unpack_numbers",
]
