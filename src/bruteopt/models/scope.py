"""Evaluation scope handed to objectives and restrictions."""
from typing import Generic, Hashable, Mapping, TypeVar

K = TypeVar("K", bound=Hashable)


class ProblemScope(Generic[K]):
    """
    Read-only view of one candidate assignment.

    Objectives and restrictions receive a scope and ask it for variable
    values, e.g. ``lambda s: 50 * s.value("p1") + 20 * s.value("p2")``.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[K, int]):
        self._values = values

    def value(self, variable: K) -> float:
        """Value of ``variable`` as a float, 0.0 if it is not assigned."""
        found = self._values.get(variable)
        if found is None:
            return 0.0
        return float(found)

    def __getitem__(self, variable: K) -> float:
        return self.value(variable)

    def times(self, coefficient: float, variable: K) -> float:
        """``coefficient * value(variable)``."""
        return self.value(variable) * coefficient

    def linear(self, coefficients: Mapping[K, float]) -> float:
        """Sum of ``coefficient * value(variable)`` over the mapping."""
        return sum((self.times(c, v) for v, c in coefficients.items()), 0.0)

    def __repr__(self) -> str:
        return f"ProblemScope({dict(self._values)!r})"
