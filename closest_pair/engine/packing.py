"""Key packing — map an (x, y) pair to one sortable unsigned 64-bit key and back.

The first coordinate's low ``bits`` bits go in the high half, the second's in
the low half, so keys sort lexicographically by (x, y). This is not a
space-filling curve. Bits above ``bits`` are dropped (truncation), never
rejected. Negative values have no unsigned key and raise ``InvalidInput``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from closest_pair.engine.errors import InvalidInput

KEY_BITS = 64
MAX_PACK_BITS = KEY_BITS // 2


def validate_bits(bits: int) -> int:
    if isinstance(bits, bool) or not isinstance(bits, (int, np.integer)):
        raise InvalidInput(f"bits must be an integer, got {bits!r}")
    if not 1 <= bits <= MAX_PACK_BITS:
        raise InvalidInput(f"bits must be between 1 and {MAX_PACK_BITS}, got {bits}")
    return int(bits)


def _mask(bits: int) -> int:
    return (1 << bits) - 1


def _require_unsigned(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise InvalidInput(f"{name} must be non-negative, got {value}")


def pack_numbers(num1: int, num2: int, bits: int) -> int:
    """Pack two coordinates into one key: ``((num1 & mask) << bits) | (num2 & mask)``."""
    bits = validate_bits(bits)
    _require_unsigned(num1=num1, num2=num2)
    mask = _mask(bits)
    return ((num1 & mask) << bits) | (num2 & mask)


def unpack_numbers(packed: int, bits: int) -> tuple[int, int]:
    """Inverse of ``pack_numbers`` up to truncation: returns ``(num1 & mask, num2 & mask)``."""
    bits = validate_bits(bits)
    _require_unsigned(packed=packed)
    mask = _mask(bits)
    return (packed >> bits) & mask, packed & mask


def pack_arrays(xs: NDArray[np.integer], ys: NDArray[np.integer], bits: int) -> NDArray[np.uint64]:
    """Vectorised ``pack_numbers`` over coordinate arrays."""
    bits = validate_bits(bits)
    mask = np.uint64(_mask(bits))
    shift = np.uint64(bits)
    return ((xs.astype(np.uint64) & mask) << shift) | (ys.astype(np.uint64) & mask)


def unpack_arrays(keys: NDArray[np.uint64], bits: int) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Vectorised ``unpack_numbers``; coordinates come back as int64 for distance math."""
    bits = validate_bits(bits)
    mask = np.uint64(_mask(bits))
    shift = np.uint64(bits)
    xs = (keys >> shift) & mask
    ys = keys & mask
    return xs.astype(np.int64), ys.astype(np.int64)
