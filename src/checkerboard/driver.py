# Generate -> validate -> render pipeline, one independent run per dimension.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TextIO
import io
import logging
import sys
import time

import pandas as pd
from tqdm import tqdm

from checkerboard.coloring import ColoringStrategy, count_violations, validate_coloring
from checkerboard.graphs import hypercube_graph, number_of_colors, number_of_states
from checkerboard.registry import STRATEGIES
from checkerboard.render import render

logger = logging.getLogger(__name__)


def squaring_dims(start: int = 2, stop: int = 17) -> List[int]:
    """n, n*n, (n*n)^2, ... while below `stop`: 2, 4, 16 by default."""
    dims = []
    n = start
    while n < stop:
        dims.append(n)
        n *= n
    return dims


DEFAULT_DIMS = {
    "mirror": squaring_dims(),
    "topological": [2, 3, 4],
}


@dataclass
class RunConfig:
    strategy: str = "mirror"
    dims: Optional[List[int]] = None
    render: bool = True
    strict: bool = False
    log_level: str = "INFO"

    def resolved_dims(self) -> List[int]:
        if self.dims:
            return list(self.dims)
        return list(DEFAULT_DIMS.get(self.strategy, DEFAULT_DIMS["mirror"]))


@dataclass
class DimensionResult:
    strategy: str
    ndim: int
    valid: bool
    first_failure: Optional[int] = None
    generate_ms: float = 0.0
    validate_ms: float = 0.0


def header(ndim: int) -> str:
    return f"\n\nn = {ndim}, {number_of_states(ndim)} states, {number_of_colors(ndim)} colors\n"


def run_dimension(strategy: str, ndim: int, out: Optional[TextIO] = None, draw: bool = True) -> DimensionResult:
    out = out if out is not None else sys.stdout
    generate: ColoringStrategy = STRATEGIES.get(strategy)

    t0 = time.perf_counter()
    coloring = generate(ndim)
    t1 = time.perf_counter()

    out.write(header(ndim))
    if draw:
        render(coloring, ndim, out)

    t2 = time.perf_counter()
    report = validate_coloring(coloring, ndim, out)
    t3 = time.perf_counter()

    out.write(f"Validated: {'yes' if report else 'no'}\n")
    out.flush()

    result = DimensionResult(
        strategy=strategy,
        ndim=ndim,
        valid=report.valid,
        first_failure=report.state,
        generate_ms=round((t1 - t0) * 1000.0, 3),
        validate_ms=round((t3 - t2) * 1000.0, 3),
    )
    logger.info(
        "strategy=%s n=%d valid=%s generate=%.3f ms validate=%.3f ms",
        strategy, ndim, result.valid, result.generate_ms, result.validate_ms,
    )
    return result


def run(cfg: RunConfig, out: Optional[TextIO] = None) -> List[DimensionResult]:
    return [run_dimension(cfg.strategy, ndim, out=out, draw=cfg.render) for ndim in cfg.resolved_dims()]


@dataclass
class SweepConfig:
    strategies: List[str] = field(default_factory=lambda: STRATEGIES.keys())
    min_dim: int = 2
    max_dim: int = 10


def sweep(cfg: SweepConfig, progress: bool = True) -> pd.DataFrame:
    """
    Run every strategy over min_dim..max_dim without rendering and tabulate
    validity, first failing state, total violating states and timings.
    """
    jobs = [(s, n) for s in cfg.strategies for n in range(cfg.min_dim, cfg.max_dim + 1)]
    rows = []
    for strategy, ndim in tqdm(jobs, desc="Sweeping", disable=not progress):
        generate: ColoringStrategy = STRATEGIES.get(strategy)

        t0 = time.perf_counter()
        coloring = generate(ndim)
        t1 = time.perf_counter()
        report = validate_coloring(coloring, ndim, out=io.StringIO())
        t2 = time.perf_counter()

        rows.append({
            "strategy": strategy,
            "n": ndim,
            "states": number_of_states(ndim),
            "colors": number_of_colors(ndim),
            "valid": report.valid,
            "first_failure": report.state if report.state is not None else -1,
            "violations": count_violations(hypercube_graph(ndim), coloring, number_of_colors(ndim)),
            "generate_ms": round((t1 - t0) * 1000.0, 3),
            "validate_ms": round((t2 - t1) * 1000.0, 3),
        })

    return pd.DataFrame(rows, columns=[
        "strategy", "n", "states", "colors", "valid",
        "first_failure", "violations", "generate_ms", "validate_ms",
    ])

