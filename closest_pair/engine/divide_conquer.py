"""Divide-and-conquer closest pair in O(n log n).

The input is sorted once by x and once by y into index orders over a shared
coordinate buffer. Each recursive call works on a range ``[lo, hi)`` of the
x-order together with the same points in y-order, so nothing is re-sorted
below the top level.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from closest_pair.engine.brute_force import brute_force_indices
from closest_pair.engine.errors import InternalInvariantViolation, require_pair
from closest_pair.engine.primitives import (
    COORDINATE_MAX,
    ClosestPair,
    Point,
    pair_distances,
    points_to_arrays,
)
from closest_pair.engine.registry import algorithm

logger = logging.getLogger(__name__)

# Partitions this small go straight to brute force
BASE_CASE_SIZE = 3
# Strip successors compared per point (geometric packing bound)
STRIP_SUCCESSORS = 6


def _scan_strip(
    xs: NDArray[np.int64],
    ys: NDArray[np.int64],
    strip: NDArray[np.intp],
    best: tuple[int, int, float],
) -> tuple[int, int, float]:
    """Compare every strip point with its next STRIP_SUCCESSORS points in y-order."""
    i, j, delta = best
    sx = xs[strip]
    sy = ys[strip]
    for offset in range(1, min(STRIP_SUCCESSORS, len(strip) - 1) + 1):
        d = pair_distances(sx[:-offset], sy[:-offset], sx[offset:], sy[offset:])
        k = int(np.argmin(d))
        if d[k] < delta:
            i, j, delta = int(strip[k]), int(strip[k + offset]), float(d[k])
    return i, j, delta


def _closest_in_range(
    xs: NDArray[np.int64],
    ys: NDArray[np.int64],
    x_order: NDArray[np.intp],
    x_rank: NDArray[np.intp],
    lo: int,
    hi: int,
    y_idx: NDArray[np.intp],
) -> tuple[int, int, float]:
    n = hi - lo
    if n <= BASE_CASE_SIZE:
        return brute_force_indices(xs, ys, x_order[lo:hi])

    mid = lo + n // 2
    mid_x = int(xs[x_order[mid]])

    # Left = everything ranked before the midpoint in x-order, so both views
    # of a call always hold the same points even when x values repeat.
    goes_left = x_rank[y_idx] < mid
    y_left = y_idx[goes_left]
    y_right = y_idx[~goes_left]

    left = _closest_in_range(xs, ys, x_order, x_rank, lo, mid, y_left)
    right = _closest_in_range(xs, ys, x_order, x_rank, mid, hi, y_right)
    best = left if left[2] < right[2] else right

    half_width = int(best[2]) if math.isfinite(best[2]) else COORDINATE_MAX
    left_bound = max(0, mid_x - half_width)
    right_bound = min(COORDINATE_MAX, mid_x + half_width)

    strip_x = xs[y_idx]
    strip = y_idx[(strip_x >= left_bound) & (strip_x <= right_bound)]
    if len(strip) < 2:
        return best
    return _scan_strip(xs, ys, strip, best)


@algorithm(
    name="optimized",
    complexity="O(n log n)",
    exact=True,
    description="Divide and conquer on x with a y-sorted boundary strip",
)
def closest_pair_optimized(points: Sequence[Point]) -> ClosestPair:
    """Find the closest pair with the classic divide-and-conquer algorithm.

    The caller's sequence is never reordered; sorting happens on index arrays.

    Raises:
        InvalidInput: fewer than two points.
    """
    require_pair(points)
    n = len(points)
    xs, ys = points_to_arrays(points)

    x_order = np.argsort(xs, kind="stable")
    y_order = np.argsort(ys, kind="stable")
    x_rank = np.empty(n, dtype=np.intp)
    x_rank[x_order] = np.arange(n)

    i, j, dist = _closest_in_range(xs, ys, x_order, x_rank, 0, n, y_order)
    if not math.isfinite(dist):
        raise InternalInvariantViolation("No closest pair found - all distances are infinite")

    logger.debug("optimized: n=%d distance=%.3f", n, dist)
    return ClosestPair(points[i], points[j], dist)
