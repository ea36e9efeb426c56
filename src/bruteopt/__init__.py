"""
bruteopt: tiny modeling tool for small integer optimization problems.

Declare variables and an objective, add restrictions, then ask for the
maximum or minimum. Every assignment in ``[0, limit]^n`` is visited.

Example usage:
    from bruteopt import LpProblem, variables

    p1, p2, p3 = variables("p1", "p2", "p3")
    problem = LpProblem("p1", "p2", "p3", objective=50 * p1 + 20 * p2 + 25 * p3)
    problem.add_restrictions(
        9 * p1 + 3 * p2 + 5 * p3 <= 500,
        5 * p1 + 4 * p2 <= 350,
        3 * p1 + 2 * p3 <= 150,
        p3 <= 20,
    )
    print(problem.get_max())
"""
from bruteopt.models import LpResult, ProblemScope, SearchConfig, Var, variables
from bruteopt.solver import Direction, LpProblem, SearchOutcome, SearchStatus

__version__ = "0.1.0"
__all__ = [
    "LpProblem",
    "LpResult",
    "ProblemScope",
    "SearchConfig",
    "Var",
    "variables",
    "Direction",
    "SearchOutcome",
    "SearchStatus",
]
