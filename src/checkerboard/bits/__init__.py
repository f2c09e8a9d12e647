from checkerboard.bits.bitvector import (
    DEFAULT_WIDTH, MARKER, word_width_for, word_dtype_for,
    get_bit, set_bit, flip_bit, parse_bit_string, format_bit_string,
)
from checkerboard.bits.popcount import (
    HAS_NATIVE_POPCOUNT, HAS_NUMPY_POPCOUNT,
    popcount, popcount32, popcount64, popcount_fallback, popcount_array,
)
