# bruteopt/solver - exhaustive integer search
from .base import Direction, SearchOutcome, SearchStatus
from .engine import LpProblem
from .enumeration import iterate_every_combination, partition
from .stats import SearchStats
from .validation import ValidationResult, validate_assignment

__all__ = [
    "LpProblem",
    "Direction",
    "SearchStatus",
    "SearchOutcome",
    "SearchStats",
    "iterate_every_combination",
    "partition",
    "validate_assignment",
    "ValidationResult",
]
