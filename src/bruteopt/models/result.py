"""Result of a brute-force search."""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class LpResult(Generic[K]):
    """
    Best score found and the assignment that produced it.

    ``variables`` is a snapshot taken when the result was recorded, never the
    engine's working buffer. The default ``LpResult()`` (0.0, empty mapping)
    is what a search returns when no candidate satisfies the restrictions.
    """

    optimal_value: float = 0.0
    variables: Dict[K, int] = field(default_factory=dict)

    def __str__(self) -> str:
        entries = ", ".join(f"{k}={v}" for k, v in self.variables.items())
        return f"Question Result: optimal value is {self.optimal_value} with variables [{entries}]"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization (keys become strings)."""
        return {
            "optimal_value": self.optimal_value,
            "variables": {str(k): v for k, v in self.variables.items()},
        }
