"""Command line entry points for solving share documents and running sweeps."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Iterable

from .errors import ShareConsensusError
from .recovery.config import load_request_file
from .recovery.solver import solve
from .simulation.experiment import ExperimentConfig, run_corruption_sweep


def run_solve(args: argparse.Namespace) -> int:
    try:
        config, encodings = load_request_file(args.input)
        result = solve(config, encodings)
    except (ShareConsensusError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    text = json.dumps(result.to_dict(), indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
        print(f"Saved result to {args.output}")
    else:
        print(text)
    return 0


def run_experiment(args: argparse.Namespace) -> int:
    try:
        config = ExperimentConfig(k=args.k, n=args.n, trials=args.trials, seed=args.seed)
    except ValueError as exc:
        raise SystemExit(str(exc))
    print(f"[CONFIG] k={config.k}, n={config.n}, trials={config.trials}, seed={config.seed}")
    t0 = time.perf_counter()
    metrics_path, plot_path = run_corruption_sweep(config, args.output)
    dt = time.perf_counter() - t0
    print(f"[DONE] sweep finished in {dt:.3f}s")
    print(f"Saved metrics to {metrics_path} and figure to {plot_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="share-consensus",
        description="Recover Shamir secrets from share sets that may contain corrupted shares.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    solve_p = sub.add_parser("solve", help="Reconstruct the secret from a JSON share document.")
    solve_p.add_argument("input", type=Path, help="Share document (JSON).")
    solve_p.add_argument("--output", type=Path, help="Write the result JSON here instead of stdout.")
    solve_p.set_defaults(func=run_solve)

    exp = sub.add_parser("experiment", help="Sweep corruption counts and record recovery metrics.")
    exp.add_argument("--k", type=int, default=3, help="Shamir threshold k.")
    exp.add_argument("--n", type=int, default=6, help="Number of dealt shares.")
    exp.add_argument("--trials", type=int, default=20, help="Trials per corruption count.")
    exp.add_argument("--seed", type=int, default=0, help="Seed for the numpy generator.")
    exp.add_argument(
        "--output",
        type=Path,
        default=Path("output/consensus"),
        help="Directory where metrics and plots will be stored.",
    )
    exp.set_defaults(func=run_experiment)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
