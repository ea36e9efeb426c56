# bruteopt/models - Data models for problem definition and results
from .constraints import DEFAULT_LIMIT, Restriction, SearchConfig
from .expressions import Comparison, LinearExpr, Var, variables
from .result import LpResult
from .scope import ProblemScope

__all__ = [
    "ProblemScope",
    "Var", "LinearExpr", "Comparison", "variables",
    "LpResult",
    "Restriction", "SearchConfig", "DEFAULT_LIMIT",
]
