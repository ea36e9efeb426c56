"""
Search Contracts
================
Direction of optimization, status of a finished search and the outcome
object bundling result and statistics.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Protocol, TypeVar

from bruteopt.models.result import LpResult
from bruteopt.models.scope import ProblemScope
from bruteopt.solver.stats import SearchStats

K = TypeVar("K", bound=Hashable)


class Direction(str, Enum):
    """Which way the objective is optimized."""
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"

    def is_better(self, best: float, candidate: float) -> bool:
        """Strict comparison: ties keep the current best."""
        if self is Direction.MAXIMIZE:
            return best < candidate
        return best > candidate


class SearchStatus(str, Enum):
    """Status of a finished search."""
    OPTIMAL = "optimal"        # At least one candidate satisfied every restriction
    INFEASIBLE = "infeasible"  # Variables declared, no candidate survived
    EMPTY = "empty"            # No variables declared


@dataclass
class SearchOutcome:
    """Everything one search produced."""
    result: LpResult
    status: SearchStatus
    direction: Direction
    stats: SearchStats

    @property
    def is_success(self) -> bool:
        """True if the result comes from a feasible candidate."""
        return self.status == SearchStatus.OPTIMAL


class ObjectiveFunction(Protocol):
    """Real-valued function of an assignment."""

    def __call__(self, scope: ProblemScope) -> float:
        ...


class RestrictionPredicate(Protocol):
    """Boolean predicate over an assignment. Must be pure."""

    def __call__(self, scope: ProblemScope) -> bool:
        ...
