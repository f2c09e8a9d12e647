from __future__ import annotations
from typing import Iterator
import logging
import numpy as np

from checkerboard.bits import word_dtype_for
from checkerboard.graphs import all_states, number_of_states
from checkerboard.registry import STRATEGIES

logger = logging.getLogger(__name__)


class MirrorAssignment:
    """
    Closed-form coloring: a triangular wave 0, 1, .., n-1, n-1, .., 0 repeated
    over the numeric state value with period 2n. It ignores adjacency, so it
    only satisfies the closed-neighborhood property by coincidence.

    Behaves as a read-only sequence of length 2^n.
    """

    def __init__(self, ndim: int):
        assert ndim > 0, "dimension must be positive"
        self.ndim = ndim
        self.n_states = number_of_states(ndim)

    def __getitem__(self, state: int) -> int:
        assert 0 <= state < self.n_states, f"state {state} out of range for n={self.ndim}"
        cycle_offset = state % (self.ndim * 2)
        if cycle_offset < self.ndim:
            return cycle_offset
        return 2 * self.ndim - cycle_offset - 1

    def __len__(self) -> int:
        return self.n_states

    def __iter__(self) -> Iterator[int]:
        for state in range(self.n_states):
            yield self[state]

    def to_array(self) -> np.ndarray:
        cycle_offset = all_states(self.ndim) % (self.ndim * 2)
        folded = np.where(cycle_offset < self.ndim, cycle_offset, 2 * self.ndim - cycle_offset - 1)
        return folded.astype(word_dtype_for(self.ndim))

    def __repr__(self) -> str:
        return f"MirrorAssignment(ndim={self.ndim})"


@STRATEGIES.register("mirror")
def mirror_coloring(ndim: int) -> np.ndarray:
    result = MirrorAssignment(ndim).to_array()
    logger.debug("mirror coloring for n=%d: %d states, period %d", ndim, len(result), 2 * ndim)
    return result
