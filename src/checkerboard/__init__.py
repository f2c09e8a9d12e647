"""Colorings of the n-dimensional hypercube graph ("devil's checkerboard")."""
from checkerboard.registry import STRATEGIES
import checkerboard.coloring  # registers strategies

__version__ = "0.1.0"

__all__ = ["STRATEGIES", "__version__"]
