"""Brute force — compare every unordered pair once.

Used standalone for small inputs and as the base case of divide-and-conquer.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from closest_pair.engine.errors import InternalInvariantViolation, require_pair
from closest_pair.engine.primitives import ClosestPair, Point, pair_distances, points_to_arrays
from closest_pair.engine.registry import algorithm

logger = logging.getLogger(__name__)


def brute_force_indices(
    xs: NDArray[np.int64],
    ys: NDArray[np.int64],
    idx: NDArray[np.intp],
) -> tuple[int, int, float]:
    """Closest pair among ``idx`` as (i, j, distance) indices into ``xs``/``ys``.

    Rows are scanned in i < j order; the first pair reaching the minimum wins.
    Returns distance ``inf`` when fewer than two indices are given.
    """
    best = math.inf
    best_i = best_j = -1
    px = xs[idx]
    py = ys[idx]
    for a in range(len(idx) - 1):
        d = pair_distances(px[a], py[a], px[a + 1 :], py[a + 1 :])
        k = int(np.argmin(d))
        if d[k] < best:
            best = float(d[k])
            best_i = int(idx[a])
            best_j = int(idx[a + 1 + k])
    return best_i, best_j, best


@algorithm(
    name="brute_force",
    complexity="O(n^2)",
    exact=True,
    description="Exhaustive comparison of every unordered pair",
)
def closest_pair_brute_force(points: Sequence[Point]) -> ClosestPair:
    """Find the closest pair by comparing every unordered pair exactly once.

    Raises:
        InvalidInput: fewer than two points.
        InternalInvariantViolation: no finite minimum distance was found.
    """
    require_pair(points)
    xs, ys = points_to_arrays(points)

    i, j, dist = brute_force_indices(xs, ys, np.arange(len(points)))
    if not math.isfinite(dist):
        raise InternalInvariantViolation("No closest pair found - all distances are infinite")

    logger.debug("brute_force: n=%d distance=%.3f", len(points), dist)
    return ClosestPair(points[i], points[j], dist)
