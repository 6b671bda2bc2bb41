"""Sort-based heuristic — pack, sort, scan a fixed window of successors.

Sorting packed keys orders points lexicographically by (x, y). Points that are
close in space are not guaranteed to be close in that order, so the
``bits``-wide window is an accuracy/speed knob, not a proven bound. Reported
points carry the truncated coordinates when ``bits`` is narrower than the
input coordinates.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from closest_pair.engine.errors import InternalInvariantViolation, require_pair
from closest_pair.engine.packing import pack_arrays, unpack_arrays, validate_bits
from closest_pair.engine.primitives import ClosestPair, Point, pair_distances, points_to_arrays
from closest_pair.engine.registry import algorithm

logger = logging.getLogger(__name__)


@algorithm(
    name="bit_shift",
    complexity="O(n log n)",
    exact=False,
    takes_bits=True,
    description="Sort packed (x, y) keys and scan the next `bits` keys of each",
)
def closest_pair_bit_shift(points: Sequence[Point], bits: int) -> ClosestPair:
    """Find a candidate closest pair by scanning neighbours in packed-key order.

    Args:
        points: at least two points.
        bits: bits kept per coordinate (1-32); also the successor window size.

    Raises:
        InvalidInput: fewer than two points, or ``bits`` out of range.
        InternalInvariantViolation: no finite minimum distance was found.
    """
    require_pair(points)
    bits = validate_bits(bits)
    n = len(points)
    xs, ys = points_to_arrays(points)

    keys = np.sort(pack_arrays(xs, ys, bits))
    kx, ky = unpack_arrays(keys, bits)

    best = math.inf
    best_i = best_j = -1
    for offset in range(1, min(bits, n - 1) + 1):
        d = pair_distances(kx[:-offset], ky[:-offset], kx[offset:], ky[offset:])
        k = int(np.argmin(d))
        if d[k] < best:
            best = float(d[k])
            best_i, best_j = k, k + offset

    if not math.isfinite(best):
        raise InternalInvariantViolation("No closest pair found - all distances are infinite")

    logger.debug("bit_shift: n=%d bits=%d distance=%.3f", n, bits, best)
    return ClosestPair(
        Point(int(kx[best_i]), int(ky[best_i])),
        Point(int(kx[best_j]), int(ky[best_j])),
        best,
    )
