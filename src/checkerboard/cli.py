from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from checkerboard.driver import RunConfig, SweepConfig, run, sweep
from checkerboard.registry import STRATEGIES
from checkerboard.utils.config import load_config

import checkerboard.coloring  # register strategies

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
# states must fit a 64-bit word
MAX_DIM = 63


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="devils-checkerboard",
        description="Color the n-cube and check that every closed neighborhood sees n colors.",
    )
    ap.add_argument("--log-level", default=None, help="DEBUG | INFO | WARNING (default: INFO)")
    sub = ap.add_subparsers(dest="command")

    rp = sub.add_parser("run", help="generate, render and validate a few dimensions (default)")
    rp.add_argument("--config", default=None, help="YAML file with a `run:` section")
    rp.add_argument("--strategy", default=None, help=f"one of {STRATEGIES.keys()}")
    rp.add_argument("--dims", type=int, nargs="+", default=None)
    rp.add_argument("--no-render", action="store_true")
    rp.add_argument("--strict", action="store_true", help="exit with status 1 if any dimension fails")

    sp = sub.add_parser("sweep", help="tabulate validity for every strategy over a range of dimensions")
    sp.add_argument("--strategies", nargs="+", default=None)
    sp.add_argument("--min-dim", type=int, default=2)
    sp.add_argument("--max-dim", type=int, default=10)
    sp.add_argument("--no-progress", action="store_true")
    return ap


def _check_strategies(ap: argparse.ArgumentParser, names: List[str]) -> None:
    for name in names:
        try:
            STRATEGIES.get(name)
        except KeyError as e:
            ap.error(e.args[0])


def make_run_config(args: argparse.Namespace) -> RunConfig:
    cfg = RunConfig()
    if args.config:
        cfg = RunConfig(**(load_config(args.config).get("run") or {}))
    if args.strategy is not None:
        cfg.strategy = args.strategy
    if args.dims is not None:
        cfg.dims = args.dims
    if args.no_render:
        cfg.render = False
    if args.strict:
        cfg.strict = True
    if args.log_level is not None:
        cfg.log_level = args.log_level
    return cfg


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.command is None:
        args = ap.parse_args(list(argv if argv is not None else sys.argv[1:]) + ["run"])

    if args.command == "sweep":
        logging.basicConfig(level=(args.log_level or "INFO").upper(), format=LOG_FORMAT)
        scfg = SweepConfig(min_dim=args.min_dim, max_dim=args.max_dim)
        if args.strategies:
            scfg.strategies = args.strategies
        _check_strategies(ap, scfg.strategies)
        if scfg.min_dim < 1 or scfg.max_dim < scfg.min_dim or scfg.max_dim > MAX_DIM:
            ap.error(f"invalid dimension range {scfg.min_dim}..{scfg.max_dim}")
        df = sweep(scfg, progress=not args.no_progress)
        print(df.to_string(index=False))
        return 0

    cfg = make_run_config(args)
    logging.basicConfig(level=cfg.log_level.upper(), format=LOG_FORMAT)
    _check_strategies(ap, [cfg.strategy])
    for ndim in cfg.resolved_dims():
        if not 1 <= ndim <= MAX_DIM:
            ap.error(f"invalid dimension {ndim}, expected 1..{MAX_DIM}")
    logging.getLogger(__name__).debug("run config: %s", asdict(cfg))

    results = run(cfg)
    if cfg.strict and not all(r.valid for r in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
