"""
Search Statistics
=================
Counters collected while one search runs. Each search (or each worker of a
partitioned search) owns its own ``SearchStats``; partial stats are merged
afterwards.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class SearchStats:
    """Counters for a single search."""
    candidates: int = 0     # Assignments generated
    feasible: int = 0       # Passed every restriction
    rejected: int = 0       # Failed at least one restriction
    improvements: int = 0   # Times the best-so-far result changed
    elapsed_seconds: float = 0.0

    # Restriction name -> number of candidates it rejected first
    rejections_by_restriction: Dict[str, int] = field(default_factory=dict)

    def record_rejection(self, name: str):
        self.rejected += 1
        self.rejections_by_restriction[name] = self.rejections_by_restriction.get(name, 0) + 1

    def merge(self, other: "SearchStats") -> "SearchStats":
        """Add ``other``'s counters into this one (elapsed time is not summed)."""
        self.candidates += other.candidates
        self.feasible += other.feasible
        self.rejected += other.rejected
        self.improvements += other.improvements
        for name, count in other.rejections_by_restriction.items():
            self.rejections_by_restriction[name] = self.rejections_by_restriction.get(name, 0) + count
        return self

    def summary(self) -> Dict[str, Any]:
        """Get summary dictionary for display."""
        return {
            "candidates": self.candidates,
            "feasible": self.feasible,
            "rejected": self.rejected,
            "improvements": self.improvements,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
            "rejections_by_restriction": dict(self.rejections_by_restriction),
        }
