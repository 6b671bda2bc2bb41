"""Tests for the packed-key sort heuristic."""

from __future__ import annotations

import numpy as np
import pytest

from closest_pair.engine import bit_shift
from closest_pair.engine.bit_shift import closest_pair_bit_shift
from closest_pair.engine.brute_force import closest_pair_brute_force
from closest_pair.engine.errors import InternalInvariantViolation, InvalidInput
from closest_pair.engine.primitives import Point
from closest_pair.utils.points import random_points
from tests.conftest import DIAGONAL, GRID_5X5


@pytest.mark.parametrize("seed", range(5))
def test_full_width_matches_brute_force_on_random_points(seed):
    points = random_points(400, coordinate_bits=31, seed=seed)
    assert closest_pair_bit_shift(points, 32).distance == closest_pair_brute_force(points).distance


def test_small_bits_on_small_coordinates():
    _, _, dist = closest_pair_bit_shift(list(GRID_5X5), 8)
    assert dist == 1.0
    _, _, dist = closest_pair_bit_shift(list(DIAGONAL), 8)
    assert dist == pytest.approx(2 * np.sqrt(2), abs=1e-3)


def test_truncation_reports_truncated_points():
    # 261 and 517 both keep the low byte 5, so they collide after packing at 8 bits
    p1, p2, dist = closest_pair_bit_shift([Point(261, 7), Point(517, 7), Point(90, 90)], 8)
    assert dist == 0.0
    assert p1 == p2 == Point(5, 7)


def _far_apart_between(count):
    # Closest pair (0,0)-(count+1,0) with `count` mutually distant points between them in key order
    middle = [Point(k, 1_000_000 * k) for k in range(1, count + 1)]
    return [Point(0, 0)] + middle + [Point(count + 1, 0)]


def test_window_reaches_bits_successors():
    points = _far_apart_between(31)
    assert closest_pair_bit_shift(points, 32).distance == 32.0


def test_pair_beyond_window_is_missed():
    points = _far_apart_between(32)
    assert closest_pair_brute_force(points).distance == 33.0
    assert closest_pair_bit_shift(points, 32).distance > 1000


@pytest.mark.parametrize("bits", [0, 33, -4])
def test_invalid_bits_rejected(bits):
    with pytest.raises(InvalidInput):
        closest_pair_bit_shift([Point(0, 0), Point(1, 1)], bits)


def test_no_finite_minimum_is_internal_error(monkeypatch):
    def all_infinite(xa, ya, xb, yb):
        return np.full(len(xb), np.inf, dtype=np.float32)

    monkeypatch.setattr(bit_shift, "pair_distances", all_infinite)
    with pytest.raises(InternalInvariantViolation):
        closest_pair_bit_shift([Point(0, 0), Point(1, 1)], 8)
