# Single-bit access and bit-string conversion for fixed-width unsigned words.
#
# States are plain Python ints interpreted as n-bit vectors; `width` is the
# word width the value is meant to fit in (32 or 64) and only bounds the
# bit index, the way a fixed-size unsigned integer would.

from __future__ import annotations

import numpy as np

DEFAULT_WIDTH = 64
MARKER = "b"


def word_width_for(ndim: int) -> int:
    """Smallest supported word width that holds `ndim` bits plus headroom for 2^ndim."""
    assert 0 <= ndim < 64, f"dimension {ndim} does not fit a 64-bit word"
    return 32 if ndim < 32 else 64


def word_dtype_for(ndim: int) -> type:
    return np.uint32 if word_width_for(ndim) == 32 else np.uint64


def get_bit(value: int, index: int, width: int = DEFAULT_WIDTH) -> int:
    """Return bit `index` of `value` (0 or 1)."""
    assert 0 <= index < width, f"bit index {index} out of range for {width}-bit word"
    return (value >> index) & 0x01


def set_bit(value: int, index: int, bit: int, width: int = DEFAULT_WIDTH) -> int:
    """Return `value` with bit `index` cleared, then set to the low bit of `bit`."""
    assert 0 <= index < width, f"bit index {index} out of range for {width}-bit word"
    value &= ~(0x01 << index)
    value |= (bit & 0x01) << index
    return value


def flip_bit(value: int, index: int, width: int = DEFAULT_WIDTH) -> int:
    return set_bit(value, index, get_bit(value, index, width) ^ 0x01, width)


def parse_bit_string(s: str, width: int = DEFAULT_WIDTH) -> int:
    """
    Parse a '0'/'1' string into an int, least-significant character first.

    "011" -> 0b110 == 6
    """
    assert len(s) <= width, f"bit string of length {len(s)} does not fit a {width}-bit word"
    value = 0
    for i, ch in enumerate(s):
        if ch not in ("0", "1"):
            raise ValueError(f"Could not parse bit string {s!r}: invalid character {ch!r} at {i}")
        value = set_bit(value, i, int(ch), width)
    return value


def format_bit_string(value: int, ndim: int, width: int = DEFAULT_WIDTH) -> str:
    """
    Render the low `ndim` bits of `value` as MARKER + bits, least-significant first.
    Inverse of `parse_bit_string` once the marker is stripped.
    """
    assert 0 <= ndim <= width, f"cannot format {ndim} bits of a {width}-bit word"
    return MARKER + "".join(str(get_bit(value, i, width)) for i in range(ndim))
