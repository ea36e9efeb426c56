"""
Brute-Force Search Engine
=========================
``LpProblem`` owns the variables, the objective and the restrictions of a
small integer problem and finds the best assignment by visiting every
candidate in ``[0, limit]^n``.

Usage:
    problem = LpProblem("p1", "p2", objective=lambda s: 3 * s.value("p1") + s.value("p2"))
    problem.add_restriction(lambda s: s.value("p1") + s.value("p2") <= 10)
    print(problem.get_max())
"""
import concurrent.futures
import time
from typing import Dict, Generic, Hashable, List, Optional, Sequence, Tuple, TypeVar

from bruteopt.models.constraints import Restriction, SearchConfig
from bruteopt.models.result import LpResult
from bruteopt.models.scope import ProblemScope
from bruteopt.solver.base import (
    Direction,
    ObjectiveFunction,
    RestrictionPredicate,
    SearchOutcome,
    SearchStatus,
)
from bruteopt.solver.enumeration import iterate_every_combination, partition
from bruteopt.solver.stats import SearchStats
from bruteopt.utils.logging_setup import TRACE, SolverLogger, get_logger

logger = get_logger("bruteopt.solver.engine")
slog = SolverLogger("bruteopt.solver.engine")

K = TypeVar("K", bound=Hashable)


def _non_negative(variable) -> RestrictionPredicate:
    def check(scope: ProblemScope) -> bool:
        return scope.value(variable) >= 0
    return check


class LpProblem(Generic[K]):
    """
    An integer optimization problem solved by exhaustive search.

    Variables and objective are fixed at construction. Restrictions
    accumulate through ``add_restriction`` / ``add_restrictions`` and are
    checked in registration order; the automatic non-negativity restrictions
    come first. ``get_max`` / ``get_min`` never modify the problem and can be
    called any number of times.

    Args:
        *variables: Variable identifiers (any hashable); duplicates collapse,
            first occurrence fixes the enumeration order
        objective: Function of a ``ProblemScope`` returning the score
        non_negativity: Register ``value >= 0`` for every variable
            (defaults to ``config.non_negativity``, i.e. True)
        limit: Inclusive upper bound of every variable (default 100)
        workers: Split the search over this many threads (default 1)
        config: Base configuration; explicit keyword arguments override it
    """

    def __init__(
        self,
        *variables: K,
        objective: ObjectiveFunction,
        non_negativity: Optional[bool] = None,
        limit: Optional[int] = None,
        workers: Optional[int] = None,
        config: Optional[SearchConfig] = None,
    ):
        base = config or SearchConfig()
        self.config = SearchConfig(
            limit=base.limit if limit is None else limit,
            non_negativity=base.non_negativity if non_negativity is None else non_negativity,
            workers=base.workers if workers is None else workers,
        )
        self._variables: Tuple[K, ...] = tuple(dict.fromkeys(variables))
        self._objective = objective
        self._restrictions: List[Restriction] = []

        if self.config.non_negativity:
            for v in self._variables:
                self.add_restriction(_non_negative(v), name=f"non_negative({v})")

        logger.debug(
            f"Problem created: {len(self._variables)} variables, "
            f"config={self.config.to_dict()}"
        )

    # ========== Configuration ==========

    @property
    def variables(self) -> Tuple[K, ...]:
        """Declared variables in enumeration order."""
        return self._variables

    @property
    def objective(self) -> ObjectiveFunction:
        return self._objective

    @property
    def restrictions(self) -> Tuple[Restriction, ...]:
        """Registered restrictions in evaluation order."""
        return tuple(self._restrictions)

    @property
    def limit(self) -> int:
        return self.config.limit

    def add_restriction(self, restriction: RestrictionPredicate, name: Optional[str] = None) -> None:
        """
        Append one restriction.

        Args:
            restriction: Pure predicate over a ``ProblemScope``
            name: Label used in logs and validation reports; defaults to the
                predicate's own ``name`` (expression comparisons have one)
                or ``restriction_<index>``
        """
        label = name or getattr(restriction, "name", None) or f"restriction_{len(self._restrictions)}"
        self._restrictions.append(Restriction(restriction, str(label)))

    def add_restrictions(self, *restrictions: RestrictionPredicate) -> None:
        """Append several restrictions in argument order."""
        for restriction in restrictions:
            self.add_restriction(restriction)

    # ========== Solving ==========

    def get_max(self) -> LpResult:
        """Best assignment maximizing the objective (ties: first in enumeration order)."""
        return self.solve(Direction.MAXIMIZE).result

    def get_min(self) -> LpResult:
        """Best assignment minimizing the objective (ties: first in enumeration order)."""
        return self.solve(Direction.MINIMIZE).result

    def solve(self, direction: Direction = Direction.MAXIMIZE) -> SearchOutcome:
        """
        Run one full search.

        Args:
            direction: MAXIMIZE or MINIMIZE

        Returns:
            SearchOutcome with the result, a status telling whether any
            candidate was feasible, and the search statistics. A feasible
            search may still return the zero default when no score beats 0.
        """
        direction = Direction(direction)
        start_time = time.time()
        restrictions = tuple(self._restrictions)

        slog.phase(f"{direction.value.capitalize()} over {len(self._variables)} variables")
        slog.detail("limit", self.config.limit)
        slog.detail("restrictions", len(restrictions))
        slog.detail("candidates", self.config.candidate_count(len(self._variables)))

        if not self._variables:
            logger.info("No variables declared - returning default result")
            return SearchOutcome(
                result=LpResult(),
                status=SearchStatus.EMPTY,
                direction=direction,
                stats=SearchStats(elapsed_seconds=time.time() - start_time),
            )

        try:
            best, stats = self._run(direction, restrictions)
        except Exception as e:
            logger.error(f"Search aborted: {type(e).__name__}: {e}")
            raise

        stats.elapsed_seconds = time.time() - start_time
        if not stats.feasible:
            logger.warning(
                f"No candidate satisfies all {len(restrictions)} restrictions "
                f"({stats.candidates} visited) - returning default zero result"
            )
            outcome = SearchOutcome(best, SearchStatus.INFEASIBLE, direction, stats)
        else:
            outcome = SearchOutcome(best, SearchStatus.OPTIMAL, direction, stats)

        slog.step(
            f"{outcome.status.value}: value={outcome.result.optimal_value} "
            f"({stats.feasible}/{stats.candidates} feasible, {stats.elapsed_seconds:.2f}s)"
        )
        return outcome

    def _run(
        self,
        direction: Direction,
        restrictions: Sequence[Restriction],
    ) -> Tuple[LpResult, SearchStats]:
        chunks = partition(self.config.limit, self.config.workers)
        if len(chunks) == 1:
            return self._search(direction, restrictions, chunks[0])

        logger.debug(f"Partitioned search: {len(chunks)} chunks of {self._variables[0]}")
        with concurrent.futures.ThreadPoolExecutor(max_workers=len(chunks)) as executor:
            partials = list(executor.map(
                lambda chunk: self._search(direction, restrictions, chunk),
                chunks,
            ))

        # Fold in chunk order so ties resolve exactly as in the sequential search
        best = LpResult()
        stats = SearchStats()
        for part_best, part_stats in partials:
            stats.merge(part_stats)
            if direction.is_better(best.optimal_value, part_best.optimal_value):
                best = part_best
        return best, stats

    def _search(
        self,
        direction: Direction,
        restrictions: Sequence[Restriction],
        first_values: range,
    ) -> Tuple[LpResult, SearchStats]:
        """
        Visit every candidate whose first variable lies in ``first_values``.

        The best starts as the zero default and is only replaced by a strictly
        better score, so a search whose feasible scores never beat 0 returns
        ``LpResult(0.0, {})``.
        """
        best = LpResult()
        stats = SearchStats()
        buffer: Dict[K, int] = {}

        for values in iterate_every_combination(self._variables, self.config.limit, buffer, first_values):
            stats.candidates += 1
            scope = ProblemScope(values)

            failed = self._first_failure(scope, restrictions)
            if failed is not None:
                stats.record_rejection(failed.name)
                continue
            stats.feasible += 1

            score = float(self._objective(scope))
            if direction.is_better(best.optimal_value, score):
                # Snapshot: the buffer is overwritten by the next candidate
                best = LpResult(score, dict(values))
                stats.improvements += 1
                logger.log(TRACE, f"New best {score} at {best.variables}")

        return best, stats

    @staticmethod
    def _first_failure(scope: ProblemScope, restrictions: Sequence[Restriction]) -> Optional[Restriction]:
        for restriction in restrictions:
            if not restriction.predicate(scope):
                return restriction
        return None

    def check_all(self, assignment: Dict[K, int]) -> bool:
        """True if ``assignment`` satisfies every restriction (short-circuits)."""
        return self._first_failure(ProblemScope(assignment), self._restrictions) is None

    def __repr__(self) -> str:
        return (
            f"LpProblem(variables={list(self._variables)!r}, "
            f"restrictions={len(self._restrictions)}, limit={self.config.limit})"
        )
