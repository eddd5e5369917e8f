from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from moswarm.engine.algorithm.registry import available_algorithm_names, make_algorithm
from moswarm.foundation.checkpoint import load_checkpoint, save_checkpoint
from moswarm.foundation.exceptions import MoswarmError
from moswarm.foundation.kernel.multi_objective import fast_non_dominated_sorting, ideal
from moswarm.foundation.logging import configure_moswarm_logging
from moswarm.foundation.population import Population
from moswarm.foundation.problem.registry import PROBLEM_SPECS, available_problem_names, make_problem

DEFAULT_ALGORITHM = "nspso"
DEFAULT_PROBLEM = "zdt1"
DEFAULT_VERBOSITY = 1


def _load_config_file(path: str) -> dict[str, Any]:
    """Load algorithm options from a YAML or JSON file."""
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file '{config_path}' does not exist.")
    with config_path.open("r", encoding="utf-8") as fh:
        if config_path.suffix.lower() in {".yaml", ".yml"}:
            data = yaml.safe_load(fh) or {}
        else:
            data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file '{config_path}' must hold a mapping of option names to values.")
    return data


def _parse_overrides(parser: argparse.ArgumentParser, items: Sequence[str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for item in items:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            parser.error(f"--set expects key=value, got '{item}'.")
        overrides[key.strip()] = yaml.safe_load(raw)
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moswarm",
        description="Run the NSPSO and ACO optimizers on benchmark problems.",
    )
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Evolve a random population and report the result.")
    run.add_argument("--algorithm", default=DEFAULT_ALGORITHM, choices=available_algorithm_names())
    run.add_argument("--problem", default=DEFAULT_PROBLEM, choices=available_problem_names())
    run.add_argument("--n-var", type=int, default=None, help="Number of decision variables (problem default).")
    run.add_argument("--pop-size", type=int, default=40)
    run.add_argument("--gen", type=int, default=None, help="Generations (overrides config and --set).")
    run.add_argument("--seed", type=int, default=None)
    run.add_argument(
        "--verbosity",
        type=int,
        default=None,
        help="Log a table line every N generations (0 = off; default 1, or the checkpoint value with --resume).",
    )
    run.add_argument("--config", default=None, help="YAML or JSON file with algorithm options.")
    run.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Algorithm option, e.g. --set diversity_mechanism='max min'. Repeatable.",
    )
    run.add_argument("--checkpoint", default=None, help="Save the algorithm state here after the run.")
    run.add_argument("--resume", default=None, help="Load the algorithm from a checkpoint instead of building it.")
    run.add_argument("--quiet", action="store_true", help="Only report warnings and the summary.")

    sub.add_parser("list", help="List available algorithms and problems.")
    return parser


def _print_summary(pop: Population) -> None:
    problem = pop.problem
    F = pop.get_f()
    print(f"\nProblem: {problem.get_name()}  |  population: {pop.size()}  |  fevals: {problem.get_fevals()}")
    if problem.n_obj == 1:
        best = pop.best_idx()
        print(f"Best objective: {F[best, 0]:.6g}")
        print(f"Best decision vector: {np.array2string(pop.get_x()[best], precision=4)}")
        if problem.n_constraints:
            print(f"Constraint residuals: {np.array2string(F[best, 1:], precision=4)}")
        return
    fronts, _, _, _ = fast_non_dominated_sorting(F)
    print(f"Non-dominated individuals: {len(fronts[0])}")
    print(f"Ideal point: {np.array2string(ideal(F), precision=6)}")


def _run(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    configure_moswarm_logging(level=logging.WARNING if args.quiet else logging.INFO)

    if args.resume:
        algorithm = load_checkpoint(args.resume)
    else:
        options: dict[str, Any] = {}
        if args.config:
            options.update(_load_config_file(args.config))
        options.update(_parse_overrides(parser, args.overrides))
        if args.gen is not None:
            options["gen"] = args.gen
        if args.seed is not None:
            options["seed"] = args.seed
        algorithm = make_algorithm(args.algorithm, options)
        algorithm.set_verbosity(DEFAULT_VERBOSITY)
    if args.verbosity is not None:
        algorithm.set_verbosity(args.verbosity)

    problem = make_problem(args.problem, n_var=args.n_var)
    pop = Population(problem, size=args.pop_size, seed=args.seed)
    print(f"{algorithm.get_name()} on {PROBLEM_SPECS[args.problem].label}")
    print(algorithm.get_extra_info())
    pop = algorithm.evolve(pop)
    _print_summary(pop)

    if args.checkpoint:
        path = save_checkpoint(args.checkpoint, algorithm)
        print(f"Checkpoint written to {path}")
    return 0


def _list() -> int:
    print("Algorithms:")
    for name in available_algorithm_names():
        print(f"  {name}")
    print("Problems:")
    for key, spec in PROBLEM_SPECS.items():
        print(f"  {key:<12} {spec.description}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.command == "list":
        return _list()
    if args.command != "run":
        parser.print_help()
        return 1
    try:
        return _run(parser, args)
    except (MoswarmError, FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
