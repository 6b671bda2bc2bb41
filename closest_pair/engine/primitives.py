"""Leaf-node geometry primitives. No algorithm imports.

Coordinates live in the unsigned 32-bit domain. Distances are evaluated in
float32 so that the scalar and the vectorised paths agree bit for bit.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from closest_pair.engine.errors import InvalidInput

COORDINATE_BITS = 32
COORDINATE_MAX = (1 << COORDINATE_BITS) - 1


@dataclass(frozen=True)
class Point:
    """An immutable point with unsigned integer coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidInput(f"Point.{name} must be an integer, got {value!r}")
            # Normalise numpy scalars so equality and hashing behave like plain ints
            value = int(value)
            if not 0 <= value <= COORDINATE_MAX:
                raise InvalidInput(
                    f"Point.{name}={value} outside unsigned {COORDINATE_BITS}-bit range"
                )
            object.__setattr__(self, name, value)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


class ClosestPair(NamedTuple):
    """Result triple: the two points and the distance between them."""

    first: Point
    second: Point
    distance: float


def euclidean_distance(a: Point, b: Point) -> float:
    """Euclidean distance with unsigned differences, evaluated in float32."""
    dx = np.float32(abs(a.x - b.x))
    dy = np.float32(abs(a.y - b.y))
    return float(np.sqrt(dx * dx + dy * dy))


def pair_distances(
    xa: NDArray[np.int64],
    ya: NDArray[np.int64],
    xb: NDArray[np.int64],
    yb: NDArray[np.int64],
) -> NDArray[np.float32]:
    """Element-wise version of ``euclidean_distance`` over coordinate arrays."""
    dx = np.abs(xa - xb).astype(np.float32)
    dy = np.abs(ya - yb).astype(np.float32)
    return np.sqrt(dx * dx + dy * dy)


def points_to_arrays(points: Sequence[Point]) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Split points into (xs, ys) int64 arrays. int64 holds any u32 difference."""
    xs = np.fromiter((p.x for p in points), dtype=np.int64, count=len(points))
    ys = np.fromiter((p.y for p in points), dtype=np.int64, count=len(points))
    return xs, ys
