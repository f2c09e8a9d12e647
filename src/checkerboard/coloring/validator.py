from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, TextIO
import logging
import sys
import networkx as nx

from checkerboard.bits import popcount, set_bit, word_width_for
from checkerboard.coloring.base import Coloring
from checkerboard.graphs import neighbors_of, number_of_colors, number_of_states

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    valid: bool
    ndim: int
    expected: int
    # first failing state, if any
    state: Optional[int] = None
    seen: Optional[int] = None
    colors_seen: Optional[int] = None

    def __bool__(self) -> bool:
        return self.valid

    def diagnostic(self) -> str:
        if self.valid:
            return ""
        n = self.ndim
        return (
            f"For state {self.state:0{n}b}, saw {self.seen} ({self.colors_seen:0{n}b}) colors, "
            f"expected {self.expected:d}\n"
            f"colors_seen: {self.colors_seen:08b}\n"
        )


def closed_neighborhood_mask(coloring: Coloring, state: int, ndim: int) -> int:
    """Bit-set of the colors on `state` and its `ndim` neighbors."""
    width = word_width_for(ndim)
    colors_seen = set_bit(0, int(coloring[state]), 1, width)
    for nb in neighbors_of(state, ndim):
        colors_seen = set_bit(colors_seen, int(coloring[nb]), 1, width)
    return colors_seen


def validate_coloring(coloring: Coloring, ndim: int, out: Optional[TextIO] = None) -> ValidationReport:
    """
    Check that every closed neighborhood holds exactly `number_of_colors(ndim)`
    distinct colors. Stops at the first failing state and writes a diagnostic
    for it to `out` (stdout by default).

    Complexity: O(n 2^n).
    """
    n_states = number_of_states(ndim)
    expected = number_of_colors(ndim)
    width = word_width_for(ndim)
    assert len(coloring) == n_states, f"coloring has {len(coloring)} entries, expected {n_states}"

    for state in range(n_states):
        colors_seen = closed_neighborhood_mask(coloring, state, ndim)
        seen = popcount(colors_seen, width)
        if seen != expected:
            report = ValidationReport(
                valid=False, ndim=ndim, expected=expected,
                state=state, seen=seen, colors_seen=colors_seen,
            )
            logger.warning("n=%d: state %d sees %d colors, expected %d", ndim, state, seen, expected)
            (out if out is not None else sys.stdout).write(report.diagnostic())
            return report

    return ValidationReport(valid=True, ndim=ndim, expected=expected)


def count_violations(g: nx.Graph, coloring: Coloring, expected: int) -> int:
    """
    Number of nodes whose closed neighborhood in `g` does not hold exactly
    `expected` distinct colors. Exhaustive, works on any graph with integer
    nodes indexing `coloring`.
    """
    bad = 0
    for v in g.nodes():
        colors = {int(coloring[v])}
        colors.update(int(coloring[u]) for u in g.neighbors(v))
        if len(colors) != expected:
            bad += 1
    return bad
