"""Search configuration and restriction definitions."""
from dataclasses import dataclass
from typing import Any, Callable, Dict

from .scope import ProblemScope

DEFAULT_LIMIT = 100


@dataclass(frozen=True)
class Restriction:
    """A named predicate every feasible assignment must satisfy."""
    predicate: Callable[[ProblemScope], bool]
    name: str

    def __call__(self, scope: ProblemScope) -> bool:
        return bool(self.predicate(scope))


@dataclass
class SearchConfig:
    """Configuration for the brute-force search."""

    # Every variable ranges over [0, limit]
    limit: int = DEFAULT_LIMIT

    # Register `value >= 0` for every variable at construction
    non_negativity: bool = True

    # > 1 splits the first variable's range across a thread pool
    workers: int = 1

    def __post_init__(self):
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

    def candidate_count(self, n_variables: int) -> int:
        """Number of assignments enumerated for ``n_variables`` variables (1 for none)."""
        return (self.limit + 1) ** n_variables

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "limit": self.limit,
            "non_negativity": self.non_negativity,
            "workers": self.workers,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SearchConfig":
        """Create from dictionary, ignoring unknown keys."""
        return cls(
            limit=int(d.get("limit", DEFAULT_LIMIT)),
            non_negativity=bool(d.get("non_negativity", True)),
            workers=int(d.get("workers", 1)),
        )
