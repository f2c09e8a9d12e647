# Population count: native path when the interpreter exposes one, SWAR
# reductions otherwise. Both give identical results for every input.

from __future__ import annotations

import numpy as np

HAS_NATIVE_POPCOUNT = hasattr(int, "bit_count")
HAS_NUMPY_POPCOUNT = hasattr(np, "bitwise_count")

_M32 = 0xFFFFFFFF
_M64 = 0xFFFFFFFFFFFFFFFF


def popcount32(value: int) -> int:
    """Hamming weight of the low 32 bits."""
    value &= _M32
    value = value - ((value >> 1) & 0x55555555)
    value = (value & 0x33333333) + ((value >> 2) & 0x33333333)
    return ((((value + (value >> 4)) & 0x0F0F0F0F) * 0x01010101) & _M32) >> 24


def popcount64(value: int) -> int:
    """Hamming weight of the low 64 bits."""
    value &= _M64
    value = (value & 0x5555555555555555) + ((value >> 1) & 0x5555555555555555)
    value = (value & 0x3333333333333333) + ((value >> 2) & 0x3333333333333333)
    value = (value + (value >> 4)) & 0x0F0F0F0F0F0F0F0F
    value = value + (value >> 8)
    value = value + (value >> 16)
    value = (value + (value >> 32)) & 0x0000007F
    return value


def popcount_fallback(value: int, width: int = 64) -> int:
    assert width in (32, 64), f"unsupported word width {width}"
    return popcount32(value) if width == 32 else popcount64(value)


def popcount(value: int, width: int = 64) -> int:
    assert value >= 0, "popcount is defined on unsigned words"
    if HAS_NATIVE_POPCOUNT:
        mask = _M32 if width == 32 else _M64
        return (value & mask).bit_count()
    return popcount_fallback(value, width)


def popcount_array(values: np.ndarray) -> np.ndarray:
    """Element-wise popcount of an unsigned integer array."""
    values = np.asarray(values)
    if HAS_NUMPY_POPCOUNT:
        return np.bitwise_count(values).astype(np.int64)
    return _popcount_array_swar(values)


def _popcount_array_swar(values: np.ndarray) -> np.ndarray:
    v = np.asarray(values).astype(np.uint64)
    v = (v & np.uint64(0x5555555555555555)) + ((v >> np.uint64(1)) & np.uint64(0x5555555555555555))
    v = (v & np.uint64(0x3333333333333333)) + ((v >> np.uint64(2)) & np.uint64(0x3333333333333333))
    v = (v + (v >> np.uint64(4))) & np.uint64(0x0F0F0F0F0F0F0F0F)
    v = v + (v >> np.uint64(8))
    v = v + (v >> np.uint64(16))
    v = (v + (v >> np.uint64(32))) & np.uint64(0x7F)
    return v.astype(np.int64)
