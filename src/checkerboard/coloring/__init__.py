from checkerboard.coloring.base import Coloring, ColoringStrategy
from checkerboard.coloring.mirror import MirrorAssignment, mirror_coloring
from checkerboard.coloring.topological import topological_coloring, topological_order
from checkerboard.coloring.validator import (
    ValidationReport, closed_neighborhood_mask, count_violations, validate_coloring,
)
