"""Closest-pair algorithm engine."""

from closest_pair.engine.errors import ClosestPairError, InternalInvariantViolation, InvalidInput
from closest_pair.engine.primitives import ClosestPair, Point, euclidean_distance
from closest_pair.engine.packing import pack_numbers, unpack_numbers
from closest_pair.engine.registry import algorithm, get_registry
from closest_pair.engine.brute_force import closest_pair_brute_force
from closest_pair.engine.divide_conquer import closest_pair_optimized
from closest_pair.engine.bit_shift import closest_pair_bit_shift

__all__ = [
    "ClosestPair",
    "ClosestPairError",
    "InternalInvariantViolation",
    "InvalidInput",
    "Point",
    "algorithm",
    "closest_pair_bit_shift",
    "closest_pair_brute_force",
    "closest_pair_optimized",
    "euclidean_distance",
    "get_registry",
    "pack_numbers",
    "unpack_numbers",
]
