from __future__ import annotations
from typing import Iterator
import numpy as np
import networkx as nx

from checkerboard.bits import flip_bit, popcount_array, word_dtype_for, word_width_for


def number_of_states(ndim: int) -> int:
    """There are 2^n states."""
    word_width_for(ndim)
    return 0x01 << ndim


def number_of_colors(ndim: int) -> int:
    """
    Distinct colors expected in every closed neighborhood; equals the vertex
    degree. The even-rounded 2 * ((ndim + 1) // 2) is not used.
    """
    return ndim


def neighbors_of(state: int, ndim: int) -> Iterator[int]:
    """Yield the `ndim` states that differ from `state` in exactly one bit."""
    width = word_width_for(ndim)
    for i in range(ndim):
        yield flip_bit(state, i, width)


def all_states(ndim: int) -> np.ndarray:
    return np.arange(number_of_states(ndim), dtype=word_dtype_for(ndim))


def hamming_weights(ndim: int) -> np.ndarray:
    """Graph distance of every state from state 0."""
    return popcount_array(all_states(ndim))


def hypercube_graph(ndim: int) -> nx.Graph:
    """
    The n-cube as a networkx graph with integer nodes 0..2^n-1.
    Node attribute `weight` holds the Hamming weight of the label.
    Complexity: O(n 2^n).
    """
    g = nx.Graph(ndim=ndim)
    weights = hamming_weights(ndim)
    for state in range(number_of_states(ndim)):
        g.add_node(state, weight=int(weights[state]))
    for state in range(number_of_states(ndim)):
        for nb in neighbors_of(state, ndim):
            if state < nb:
                g.add_edge(state, nb)
    return g
