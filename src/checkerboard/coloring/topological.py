# Breadth-first round-robin coloring.
#
# States are finalized in order of increasing Hamming weight (distance from
# state 0); among states of equal weight the larger value goes first. Each
# finalized state takes the next color of the cycle 0, 1, .., n-1, 0, ...

from __future__ import annotations
import heapq
import logging
from typing import List, Tuple
import numpy as np

from checkerboard.bits import get_bit, set_bit, word_dtype_for, word_width_for
from checkerboard.graphs import hamming_weights, number_of_colors, number_of_states
from checkerboard.registry import STRATEGIES

logger = logging.getLogger(__name__)


def _priority(weights: np.ndarray, state: int) -> Tuple[int, int]:
    return (int(weights[state]), -state)


def topological_order(ndim: int) -> List[int]:
    """
    States in the order they are finalized (colored). Only unset bits are
    flipped when expanding a state, so every state is discovered exactly once,
    from a lighter parent.
    """
    n_states = number_of_states(ndim)
    width = word_width_for(ndim)
    weights = hamming_weights(ndim)

    opened = [False] * n_states
    closed = [False] * n_states
    order: List[int] = []

    opened[0] = True
    queue = [_priority(weights, 0)]

    while queue:
        _, neg_state = heapq.heappop(queue)
        current = -neg_state

        if not closed[current]:
            closed[current] = True
            order.append(current)

        for i in range(ndim):
            if get_bit(current, i, width) == 0:
                child = set_bit(current, i, 1, width)
                if not opened[child]:
                    opened[child] = True
                    heapq.heappush(queue, _priority(weights, child))

    assert len(order) == n_states
    return order


@STRATEGIES.register("topological")
def topological_coloring(ndim: int) -> np.ndarray:
    assert ndim > 0, "dimension must be positive"
    num_colors = number_of_colors(ndim)
    result = np.zeros(number_of_states(ndim), dtype=word_dtype_for(ndim))

    next_color = 0
    for state in topological_order(ndim):
        result[state] = next_color
        next_color = (next_color + 1) % num_colors

    logger.debug("topological coloring for n=%d: %d states, %d colors", ndim, len(result), num_colors)
    return result
