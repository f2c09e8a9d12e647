from __future__ import annotations
from typing import Protocol, Sequence, Union
import numpy as np

# state -> color; anything indexable by state with len() == 2^n
Coloring = Union[np.ndarray, Sequence[int]]

class ColoringStrategy(Protocol):
    def __call__(self, ndim: int) -> Coloring:
        ...
