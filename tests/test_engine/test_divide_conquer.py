"""Tests for the divide-and-conquer engine, cross-checked against brute force."""

from __future__ import annotations

import numpy as np
import pytest

from closest_pair.engine import brute_force, divide_conquer
from closest_pair.engine.brute_force import closest_pair_brute_force
from closest_pair.engine.divide_conquer import closest_pair_optimized
from closest_pair.engine.errors import InternalInvariantViolation
from closest_pair.engine.primitives import Point, euclidean_distance
from closest_pair.utils.points import random_points


@pytest.mark.parametrize("seed", range(5))
def test_matches_brute_force_on_random_points(seed):
    points = random_points(400, coordinate_bits=31, seed=seed)
    assert closest_pair_optimized(points).distance == closest_pair_brute_force(points).distance


@pytest.mark.parametrize("seed", range(5))
def test_matches_brute_force_on_dense_points(seed):
    # Small coordinate range: many ties and duplicates
    points = random_points(300, coordinate_bits=5, seed=seed)
    assert closest_pair_optimized(points).distance == closest_pair_brute_force(points).distance


@pytest.mark.parametrize("seed", range(5))
def test_matches_brute_force_with_repeated_x(seed):
    rng = np.random.default_rng(seed)
    xs = rng.integers(0, 4, size=200)
    ys = rng.integers(0, 100_000, size=200)
    points = [Point(int(x), int(y)) for x, y in zip(xs, ys)]
    assert closest_pair_optimized(points).distance == closest_pair_brute_force(points).distance


def test_pair_straddling_the_split():
    # Halves are far apart internally; the closest pair crosses the midpoint
    points = [
        Point(0, 0),
        Point(0, 1000),
        Point(499, 500),
        Point(501, 500),
        Point(1000, 0),
        Point(1000, 1000),
    ]
    p1, p2, dist = closest_pair_optimized(points)
    assert dist == 2.0
    assert {p1, p2} == {Point(499, 500), Point(501, 500)}


def test_all_points_on_vertical_line():
    points = [Point(7, y) for y in (0, 40, 90, 91, 150, 300, 310, 400)]
    p1, p2, dist = closest_pair_optimized(points)
    assert dist == 1.0
    assert {p1, p2} == {Point(7, 90), Point(7, 91)}


def test_strip_near_zero_does_not_underflow():
    points = [Point(0, 0), Point(0, 10), Point(1, 20), Point(2, 30), Point(3, 35)]
    _, _, dist = closest_pair_optimized(points)
    assert dist == closest_pair_brute_force(points).distance


def test_strip_near_coordinate_max():
    top = 2**32 - 1
    points = [Point(top, 0), Point(top, 5), Point(top - 1, 9), Point(top - 3, 20), Point(top - 2, 21)]
    p1, p2, dist = closest_pair_optimized(points)
    assert dist == closest_pair_brute_force(points).distance
    assert dist == euclidean_distance(p1, p2)


def test_distance_equals_reported_points():
    points = random_points(1000, coordinate_bits=20, seed=42)
    p1, p2, dist = closest_pair_optimized(points)
    assert dist == euclidean_distance(p1, p2)
    assert p1 in points and p2 in points


def test_no_finite_minimum_is_internal_error(monkeypatch):
    def all_infinite(xa, ya, xb, yb):
        return np.full(len(xb), np.inf, dtype=np.float32)

    monkeypatch.setattr(brute_force, "pair_distances", all_infinite)
    monkeypatch.setattr(divide_conquer, "pair_distances", all_infinite)
    with pytest.raises(InternalInvariantViolation):
        closest_pair_optimized([Point(x, x * 3) for x in range(10)])
