"""Tests for key packing and unpacking."""

from __future__ import annotations

import numpy as np
import pytest

from closest_pair.engine.errors import InvalidInput
from closest_pair.engine.packing import pack_arrays, pack_numbers, unpack_arrays, unpack_numbers


@pytest.mark.parametrize(
    "x, y, bits",
    [
        (42, 123, 16),
        (65535, 256, 16),
        (127, 255, 8),
        (16777215, 12345678, 24),
        (0, 0, 16),
        (2**32 - 1, 2**32 - 1, 32),
        (1, 0, 1),
    ],
)
def test_round_trip_when_coordinates_fit(x, y, bits):
    assert unpack_numbers(pack_numbers(x, y, bits), bits) == (x, y)


def test_zero_packs_to_zero():
    assert pack_numbers(0, 0, 16) == 0


def test_layout_high_then_low():
    assert pack_numbers(1, 2, 8) == (1 << 8) | 2
    assert pack_numbers(0xAB, 0xCD, 8) == 0xABCD


def test_truncation_keeps_low_bits():
    packed = pack_numbers(1000, 2000, 8)
    assert unpack_numbers(packed, 8) == (1000 & 0xFF, 2000 & 0xFF)
    assert unpack_numbers(packed, 8) == (232, 208)


def test_key_order_is_lexicographic():
    pairs = [(3, 1), (1, 9), (1, 2), (2, 0), (3, 0)]
    keys = sorted(pack_numbers(x, y, 8) for x, y in pairs)
    assert [unpack_numbers(k, 8) for k in keys] == sorted(pairs)


def test_full_width_key_fits_u64():
    assert pack_numbers(2**32 - 1, 2**32 - 1, 32) == 2**64 - 1


@pytest.mark.parametrize("bits", [0, 33, -1, 2.5])
def test_invalid_bits_rejected(bits):
    with pytest.raises(InvalidInput):
        pack_numbers(1, 1, bits)
    with pytest.raises(InvalidInput):
        unpack_numbers(1, bits)


def test_array_versions_agree_with_scalar():
    xs = np.array([0, 1000, 42, 2**32 - 1], dtype=np.int64)
    ys = np.array([5, 2000, 7, 3], dtype=np.int64)
    for bits in (8, 16, 32):
        keys = pack_arrays(xs, ys, bits)
        assert keys.dtype == np.uint64
        assert [int(k) for k in keys] == [pack_numbers(int(x), int(y), bits) for x, y in zip(xs, ys)]
        kx, ky = unpack_arrays(keys, bits)
        mask = (1 << bits) - 1
        assert list(kx) == [int(x) & mask for x in xs]
        assert list(ky) == [int(y) & mask for y in ys]


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (-256, -256)])
def test_negative_coordinates_rejected(x, y):
    with pytest.raises(InvalidInput, match="non-negative"):
        pack_numbers(x, y, 8)


def test_negative_key_rejected():
    with pytest.raises(InvalidInput, match="non-negative"):
        unpack_numbers(-1, 8)
