"""Native and fallback popcount paths must agree."""

import random

import numpy as np
import pytest

from checkerboard.bits import (
    HAS_NATIVE_POPCOUNT, popcount, popcount32, popcount64,
    popcount_array, popcount_fallback,
)
from checkerboard.bits.popcount import _popcount_array_swar

M32 = 0xFFFFFFFF
M64 = 0xFFFFFFFFFFFFFFFF


def sample(width, k=500, seed=0):
    rng = random.Random(seed)
    top = (1 << width) - 1
    values = [0, 1, top, top >> 1, 1 << (width - 1), 0x55555555, 0xAAAAAAAA]
    values += [rng.getrandbits(width) for _ in range(k)]
    return values


class TestScalar:
    def test_known_values(self):
        assert popcount32(0) == 0
        assert popcount32(M32) == 32
        assert popcount64(0) == 0
        assert popcount64(M64) == 64
        assert popcount64(0b1011) == 3

    @pytest.mark.parametrize("width", [32, 64])
    def test_fallback_matches_reference(self, width):
        for v in sample(width):
            assert popcount_fallback(v, width) == bin(v).count("1")

    @pytest.mark.parametrize("width", [32, 64])
    def test_native_matches_fallback(self, width):
        for v in sample(width, seed=width):
            assert popcount(v, width) == popcount_fallback(v, width)

    def test_32_bit_masks_high_bits(self):
        assert popcount32(1 << 40 | 0b111) == 3
        assert popcount(1 << 40 | 0b111, 32) == 3

    def test_native_flag(self):
        assert HAS_NATIVE_POPCOUNT == hasattr(int, "bit_count")


class TestArray:
    def test_matches_scalar(self):
        values = np.array(sample(64, seed=7), dtype=np.uint64)
        expected = [popcount64(int(v)) for v in values]
        assert popcount_array(values).tolist() == expected

    def test_swar_matches_dispatch(self):
        values = np.arange(1 << 12, dtype=np.uint32)
        assert np.array_equal(_popcount_array_swar(values), popcount_array(values))
