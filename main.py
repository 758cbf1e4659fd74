"""CLI entrypoint for the self-descriptive number search."""

from __future__ import annotations

import argparse
import random
import sys

from selfdesc.core.constants import DEFAULT_MAX_STEPS, DEMO_BASES, MAX_BASE, MIN_BASE, Strategy
from selfdesc.core.exceptions import InvalidBaseError
from selfdesc.engine.enumerator import estimate_remaining
from selfdesc.engine.finder import SearchConfig, SolutionFinder, find_solutions_autoselect
from selfdesc.utils.logger import configure_logging, parse_level
from selfdesc.utils.pretty import ProgressPrinter, format_solutions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Find self-descriptive numbers. Without a mode option, list the "
            f"solutions for bases {DEMO_BASES[0]}-{DEMO_BASES[1]}."
        ),
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--brute-force",
        type=int,
        metavar="N",
        help=f"Enumerate every number of base N ({MIN_BASE}-{MAX_BASE}) and print all solutions",
    )
    mode.add_argument(
        "--quick-solve",
        type=int,
        metavar="N",
        help="Look for one solution of base N with the heuristic repair search",
    )
    mode.add_argument(
        "--cp-sat",
        type=int,
        metavar="N",
        help="Enumerate all solutions of base N with the CP-SAT model",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_MAX_STEPS,
        help="Step budget of the heuristic search",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def show_demo(rng: random.Random, stream=None) -> None:
    """Print every solution found for the demo range of bases."""

    stream = stream or sys.stdout
    low, high = DEMO_BASES
    for base in range(low, high + 1):
        solutions = find_solutions_autoselect(base, rng=rng)
        print(f"Solution(s) for base {base:2}: {format_solutions(solutions)}", file=stream)


def run_brute_force(config: SearchConfig, stream=None) -> None:
    stream = stream or sys.stdout
    print(f"====== Test base {config.base}", file=stream)
    printer = ProgressPrinter(estimate_remaining, stream=stream)
    finder = SolutionFinder(config, on_progress=printer)
    found = finder.find_all()
    print(file=stream)
    print("Matching numbers: ", file=stream)
    if not found:
        print("   No results found.", file=stream)
    else:
        for number in found:
            print(f"   {number}", file=stream)
    print(file=stream)


def run_quick_solve(config: SearchConfig, stream=None) -> None:
    stream = stream or sys.stdout
    result = SolutionFinder(config).quick_solve()
    if result.ok:
        print(f"Solution in {result.steps} step(s) for base {config.base}: {result.number}", file=stream)
    else:
        print(
            f"No solution for base {config.base} within {config.max_steps} step(s)",
            file=stream,
        )


def run_cp_sat(config: SearchConfig, stream=None) -> None:
    stream = stream or sys.stdout
    result = SolutionFinder(config).find()
    print(
        f"Solution(s) for base {config.base} ({result.elapsed:.2f}s): "
        f"{format_solutions(result.solutions)}",
        file=stream,
    )


def main(argv: list[str] | None = None, stream=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = parse_level(args.log_level)
    configure_logging(level)

    if args.brute_force is not None:
        base, strategy, runner = args.brute_force, Strategy.EXHAUSTIVE, run_brute_force
    elif args.quick_solve is not None:
        base, strategy, runner = args.quick_solve, Strategy.HEURISTIC, run_quick_solve
    elif args.cp_sat is not None:
        base, strategy, runner = args.cp_sat, Strategy.CP_SAT, run_cp_sat
    else:
        show_demo(random.Random(args.seed), stream=stream)
        return

    config = SearchConfig(
        base=base,
        strategy=strategy,
        seed=args.seed,
        max_steps=args.max_steps,
    )
    try:
        config.validate()
    except InvalidBaseError as exc:
        parser.error(str(exc))
    runner(config, stream=stream)


if __name__ == "__main__":  # pragma: no cover
    main()
