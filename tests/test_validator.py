"""Closed-neighborhood validation."""

import io
import logging

import pytest

from checkerboard.coloring import (
    MirrorAssignment, ValidationReport, closed_neighborhood_mask, count_violations,
    mirror_coloring, topological_coloring, validate_coloring,
)
from checkerboard.graphs import hypercube_graph, number_of_colors


class TestHandMade:
    def test_alternating_is_valid(self):
        out = io.StringIO()
        report = validate_coloring([0, 1, 0, 1], 2, out)
        assert report
        assert report.valid
        assert report.state is None
        assert out.getvalue() == ""

    def test_constant_fails_at_zero(self, caplog):
        out = io.StringIO()
        with caplog.at_level(logging.WARNING, logger="checkerboard.coloring.validator"):
            report = validate_coloring([0, 0, 0, 0], 2, out)
        assert "state 0 sees 1 colors, expected 2" in caplog.text
        assert not report
        assert report.state == 0
        assert report.seen == 1
        assert report.colors_seen == 0b1
        assert report.expected == 2
        assert out.getvalue() == (
            "For state 00, saw 1 (01) colors, expected 2\n"
            "colors_seen: 00000001\n"
        )

    def test_mask(self):
        assert closed_neighborhood_mask([0, 1, 0, 1], 0, 2) == 0b11
        assert closed_neighborhood_mask([2, 2, 0, 0], 1, 2) == 0b101

    def test_too_many_colors(self):
        # four colors around a 2-cube vertex is as wrong as one
        report = validate_coloring([0, 1, 2, 3], 2, io.StringIO())
        assert not report
        assert report.seen == 3

    def test_wrong_length(self):
        with pytest.raises(AssertionError):
            validate_coloring([0, 1, 0], 2, io.StringIO())


class TestStrategies:
    def test_mirror_2_valid(self):
        assert validate_coloring(mirror_coloring(2), 2, io.StringIO())

    def test_mirror_3_fails_at_state_2(self):
        out = io.StringIO()
        report = validate_coloring(MirrorAssignment(3), 3, out)
        assert (report.valid, report.state, report.seen, report.colors_seen) == (False, 2, 2, 0b101)
        assert out.getvalue().startswith("For state 010, saw 2 (101) colors, expected 3\n")

    def test_topological_2_valid(self):
        assert validate_coloring(topological_coloring(2), 2, io.StringIO())

    def test_topological_3_fails_at_state_1(self):
        report = validate_coloring(topological_coloring(3), 3, io.StringIO())
        assert (report.valid, report.state, report.seen, report.colors_seen) == (False, 1, 2, 0b101)

    @pytest.mark.parametrize("ndim", [2, 3, 4, 5])
    def test_deterministic(self, ndim):
        for make in (mirror_coloring, topological_coloring):
            a = validate_coloring(make(ndim), ndim, io.StringIO())
            b = validate_coloring(make(ndim), ndim, io.StringIO())
            assert a == b

    @pytest.mark.parametrize("ndim", [2, 3, 4, 5, 6])
    def test_agrees_with_graph_count(self, ndim):
        g = hypercube_graph(ndim)
        for make in (mirror_coloring, topological_coloring):
            coloring = make(ndim)
            report = validate_coloring(coloring, ndim, io.StringIO())
            bad = count_violations(g, coloring, number_of_colors(ndim))
            assert report.valid == (bad == 0)

    def test_lazy_and_array_agree(self):
        for ndim in (2, 3, 4, 5):
            lazy = validate_coloring(MirrorAssignment(ndim), ndim, io.StringIO())
            eager = validate_coloring(mirror_coloring(ndim), ndim, io.StringIO())
            assert lazy == eager


class TestReport:
    def test_valid_has_no_diagnostic(self):
        assert ValidationReport(valid=True, ndim=2, expected=2).diagnostic() == ""

    def test_count_violations_constant(self):
        assert count_violations(hypercube_graph(3), [0] * 8, 3) == 8
