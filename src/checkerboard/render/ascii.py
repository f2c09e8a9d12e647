from __future__ import annotations
from typing import Optional, TextIO
import sys

from checkerboard.coloring.base import Coloring

# vertex labels are printed most-significant bit first
SQUARE = (
    "  (10) o ----- o (11)   (00) : {0:d} \n"
    "       |       |        (01) : {1:d} \n"
    "       |       |        (10) : {2:d} \n"
    "  (00) o-------o (01)   (11) : {3:d} \n"
)

CUBE = (
    "\n"
    "    (110) o-------o (111)   (000) : {0:d} \n"
    "         /|      /|         (001) : {1:d} \n"
    " (010)  / |     / |         (010) : {2:d} \n"
    "       o ----- o  o (101)   (011) : {3:d} \n"
    "       | /     | /          (100) : {4:d} \n"
    "       |/      |/           (101) : {5:d} \n"
    " (000) o-------o (001)      (110) : {6:d} \n"
    "                            (111) : {7:d} \n"
)

TEMPLATES = {2: SQUARE, 3: CUBE}


def render_to_string(coloring: Coloring, ndim: int) -> str:
    if ndim in TEMPLATES:
        return TEMPLATES[ndim].format(*(int(coloring[s]) for s in range(2 ** ndim)))
    if ndim == 4:
        # tesseract diagram not drawn
        return ""
    return f"No visualization for dimension {ndim}\n"


def render(coloring: Coloring, ndim: int, out: Optional[TextIO] = None) -> None:
    """Write an ASCII diagram of `coloring` (n = 2, 3), nothing (n = 4), or a notice."""
    text = render_to_string(coloring, ndim)
    if text:
        (out if out is not None else sys.stdout).write(text)
