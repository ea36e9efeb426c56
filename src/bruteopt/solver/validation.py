"""
Assignment Validation
=====================
Re-check an assignment against every restriction of a problem, without
short-circuiting, and report which ones it violates.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping

from bruteopt.models.scope import ProblemScope
from bruteopt.utils.logging_setup import get_logger, log_constraint

logger = get_logger("bruteopt.solver.validation")


@dataclass
class ValidationResult:
    """Outcome of checking one assignment."""
    checked: int = 0
    violated: List[str] = field(default_factory=list)
    missing_variables: List[Hashable] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if every restriction holds and the assignment is total."""
        return not self.violated and not self.missing_variables

    def as_dict(self) -> Dict[str, Any]:
        return {
            "checked": self.checked,
            "violated": list(self.violated),
            "missing_variables": [str(v) for v in self.missing_variables],
            "is_valid": self.is_valid,
        }


def validate_assignment(problem, assignment: Mapping[Hashable, int]) -> ValidationResult:
    """
    Evaluate every restriction of ``problem`` on ``assignment``.

    Args:
        problem: An ``LpProblem``
        assignment: Variable -> value mapping, e.g. ``result.variables``

    Returns:
        ValidationResult listing violated restriction names and any declared
        variable missing from the assignment
    """
    validation = ValidationResult()
    validation.missing_variables = [v for v in problem.variables if v not in assignment]
    if validation.missing_variables:
        logger.warning(f"Assignment is missing variables: {validation.missing_variables}")

    scope = ProblemScope(assignment)
    for restriction in problem.restrictions:
        satisfied = restriction(scope)
        validation.checked += 1
        log_constraint(logger, restriction.name, satisfied)
        if not satisfied:
            validation.violated.append(restriction.name)

    return validation
