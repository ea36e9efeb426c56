from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from bruteopt.models.constraints import SearchConfig
from bruteopt.models.expressions import variables
from bruteopt.models.validated import LinearProblemSpec, ValidatedSearchConfig
from bruteopt.solver.base import Direction
from bruteopt.solver.engine import LpProblem
from bruteopt.utils.logging_setup import get_logger, log_function_call, setup_logging

logger = get_logger("bruteopt.cli")

_VERBOSITY = ["WARNING", "INFO", "DEBUG", "TRACE"]


def sample_problem(config: Optional[SearchConfig] = None) -> LpProblem:
    """Three products competing for three resources, at most 20 units of p3."""
    p1, p2, p3 = variables("p1", "p2", "p3")
    problem = LpProblem("p1", "p2", "p3", objective=50 * p1 + 20 * p2 + 25 * p3, config=config)
    problem.add_restriction(9 * p1 + 3 * p2 + 5 * p3 <= 500)
    problem.add_restriction(5 * p1 + 4 * p2 <= 350)
    problem.add_restriction(3 * p1 + 2 * p3 <= 150)
    problem.add_restriction(p3 <= 20)
    return problem


@log_function_call
def load_problem(path: str) -> LinearProblemSpec:
    """Read and validate a JSON problem file."""
    return LinearProblemSpec.model_validate_json(Path(path).read_text(encoding="utf-8"))


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    if args.limit is not None:
        cfg["limit"] = int(args.limit)
    if args.no_non_negativity:
        cfg["non_negativity"] = False
    if args.workers is not None:
        cfg["workers"] = int(args.workers)
    return cfg


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bruteopt",
        description="Solve a small integer problem by exhaustive search",
    )
    p.add_argument("--problem", help="JSON problem file (default: built-in sample problem)")
    sense = p.add_mutually_exclusive_group()
    sense.add_argument("--maximize", dest="sense", action="store_const", const="max")
    sense.add_argument("--minimize", dest="sense", action="store_const", const="min")
    p.add_argument("--limit", type=int, help="Inclusive upper bound of every variable (default: 100)")
    p.add_argument("--no-non-negativity", action="store_true", help="Do not add value >= 0 restrictions")
    p.add_argument("--workers", type=int, help="Threads for the partitioned search (default: 1)")
    p.add_argument("--json", dest="json_out", action="store_true", help="JSON output (result + stats)")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--log-file", help="Also log to this file (rotating)")
    return p


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    setup_logging(
        level="DEBUG",
        log_file=args.log_file,
        console_level=_VERBOSITY[min(args.verbose, len(_VERBOSITY) - 1)],
    )

    try:
        if args.problem:
            definition = load_problem(args.problem)
            merged = {**definition.search.model_dump(), **_overrides(args)}
            config = ValidatedSearchConfig(**merged).to_dataclass()
            problem = definition.to_problem(config)
            sense = args.sense or definition.sense
        else:
            config = ValidatedSearchConfig(**_overrides(args)).to_dataclass()
            problem = sample_problem(config)
            sense = args.sense or "max"
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Invalid input: {e}")
        print(f"bruteopt: error: {e}", file=sys.stderr)
        return 2

    direction = Direction.MAXIMIZE if sense == "max" else Direction.MINIMIZE
    outcome = problem.solve(direction)

    if args.json_out:
        print(json.dumps({
            "status": outcome.status.value,
            "direction": outcome.direction.value,
            **outcome.result.to_dict(),
            "config": ValidatedSearchConfig.from_dataclass(problem.config).model_dump(),
            "stats": outcome.stats.summary(),
        }, ensure_ascii=False, indent=2))
    else:
        print(outcome.result)
        if not outcome.is_success:
            print(f"Note: search status is '{outcome.status.value}'; the result is the default", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
