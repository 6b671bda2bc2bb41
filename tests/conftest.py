"""Shared test fixtures."""

from __future__ import annotations

import pytest

from closest_pair.engine import (
    closest_pair_bit_shift,
    closest_pair_brute_force,
    closest_pair_optimized,
)
from closest_pair.engine.primitives import Point
from closest_pair.utils.points import grid_points, points_from_pairs


# Fixed point sets with known minimum distances

TRIANGLE = points_from_pairs([(0, 0), (3, 0), (0, 4)])

SMALL_SET = points_from_pairs([(0, 0), (3, 0), (0, 4), (10, 10)])

DUPLICATES = points_from_pairs([(10, 20), (30, 40), (10, 20), (50, 60)])

DIAGONAL = points_from_pairs([(1, 1), (3, 3), (5, 5), (7, 7), (9, 9)])

LARGE_RANGE = points_from_pairs([(0, 0), (10000, 10000), (20000, 20000), (20005, 20005)])

GRID_5X5 = grid_points(5, 5)


def _bit_shift_32(points):
    return closest_pair_bit_shift(points, 32)


ALGORITHMS = {
    "brute_force": closest_pair_brute_force,
    "optimized": closest_pair_optimized,
    "bit_shift_32": _bit_shift_32,
}


@pytest.fixture(params=sorted(ALGORITHMS))
def find_closest(request):
    """Every algorithm, each called with a single ``points`` argument."""
    return ALGORITHMS[request.param]


@pytest.fixture
def triangle() -> list[Point]:
    return list(TRIANGLE)


@pytest.fixture
def grid() -> list[Point]:
    return list(GRID_5X5)
