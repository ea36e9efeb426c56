"""
Property-Based Tests with Hypothesis
====================================
Invariants of the search that must hold for arbitrary small linear problems.
"""
import itertools

from hypothesis import given, settings, strategies as st

from bruteopt.models.expressions import LinearExpr
from bruteopt.models.result import LpResult
from bruteopt.models.scope import ProblemScope
from bruteopt.solver.base import Direction, SearchStatus
from bruteopt.solver.engine import LpProblem
from bruteopt.solver.validation import validate_assignment

NAMES = ("a", "b", "c")

coefficients = st.lists(st.integers(min_value=-5, max_value=5), min_size=3, max_size=3)


@st.composite
def linear_problems(draw):
    n = draw(st.integers(min_value=1, max_value=3))
    limit = draw(st.integers(min_value=0, max_value=4))
    names = NAMES[:n]
    objective = LinearExpr(dict(zip(names, draw(coefficients))))
    restriction = LinearExpr(dict(zip(names, draw(coefficients)))) <= draw(
        st.integers(min_value=-5, max_value=15)
    )
    return names, limit, objective, restriction


def _build(names, limit, objective, restriction, workers=1):
    problem = LpProblem(*names, objective=objective, limit=limit, workers=workers)
    problem.add_restriction(restriction)
    return problem


def _reference_search(names, limit, objective, restriction, direction):
    """Start from (0, {}), replace only on a strictly better feasible score."""
    best = LpResult()
    feasible = 0
    for combo in itertools.product(range(limit + 1), repeat=len(names)):
        scope = ProblemScope(dict(zip(names, combo)))
        if not restriction(scope):
            continue
        feasible += 1
        score = float(objective(scope))
        if direction.is_better(best.optimal_value, score):
            best = LpResult(score, dict(zip(names, combo)))
    return best, feasible


class TestSearchProperties:
    """Search invariants against an independent itertools enumeration."""

    @settings(max_examples=60, deadline=None)
    @given(linear_problems())
    def test_max_and_min_match_exhaustive_reference(self, case):
        """get_max/get_min agree with a zero-seeded itertools search, ties included."""
        problem = _build(*case)

        for direction in (Direction.MAXIMIZE, Direction.MINIMIZE):
            expected, feasible = _reference_search(*case, direction)
            outcome = problem.solve(direction)

            assert outcome.result == expected
            assert outcome.stats.feasible == feasible
            if feasible:
                assert outcome.status == SearchStatus.OPTIMAL
            else:
                assert outcome.status == SearchStatus.INFEASIBLE
                assert outcome.result == LpResult()

    @settings(max_examples=60, deadline=None)
    @given(linear_problems())
    def test_winner_is_feasible(self, case):
        """A non-default winner satisfies every restriction and stays in bounds."""
        names, limit, _, _ = case
        problem = _build(*case)
        outcome = problem.solve(Direction.MAXIMIZE)

        if outcome.result.variables:
            assert validate_assignment(problem, outcome.result.variables).is_valid
            assert all(0 <= v <= limit for v in outcome.result.variables.values())

    @settings(max_examples=30, deadline=None)
    @given(linear_problems())
    def test_repeatable(self, case):
        """Same configuration, same winner."""
        problem = _build(*case)
        assert problem.get_max() == problem.get_max()
        assert problem.get_min() == problem.get_min()

    @settings(max_examples=30, deadline=None)
    @given(linear_problems(), st.integers(min_value=2, max_value=4))
    def test_partitioned_matches_sequential(self, case, workers):
        """Splitting the first variable's range changes nothing, ties included."""
        sequential = _build(*case)
        parallel = _build(*case, workers=workers)

        assert parallel.get_max() == sequential.get_max()
        assert parallel.get_min() == sequential.get_min()

    @settings(max_examples=30, deadline=None)
    @given(
        n=st.integers(min_value=1, max_value=3),
        limit=st.integers(min_value=0, max_value=5),
    )
    def test_candidate_count(self, n, limit):
        """(limit+1)^n candidates are visited."""
        problem = LpProblem(*NAMES[:n], objective=lambda s: 0.0, limit=limit)
        assert problem.solve().stats.candidates == (limit + 1) ** n
