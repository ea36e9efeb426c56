"""
Pydantic Validated Models
=========================
Validation layer for input that crosses a process boundary (CLI flags, JSON
problem files). The dataclass ``SearchConfig`` and the engine itself do not
depend on pydantic.

Usage:
    from bruteopt.models.validated import LinearProblemSpec

    definition = LinearProblemSpec.model_validate_json(path.read_text())
    problem = definition.to_problem()
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bruteopt.models.constraints import DEFAULT_LIMIT, SearchConfig
from bruteopt.models.expressions import Comparison, LinearExpr
from bruteopt.utils.logging_setup import log_function_call


class ValidatedSearchConfig(BaseModel):
    """
    Pydantic-validated search configuration.

    Can be converted to/from the dataclass SearchConfig.
    """
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    limit: int = Field(default=DEFAULT_LIMIT, ge=0, description="Inclusive upper bound of every variable")
    non_negativity: bool = Field(default=True, description="Add value >= 0 for every variable")
    workers: int = Field(default=1, ge=1, le=64)

    def to_dataclass(self) -> SearchConfig:
        """Convert to dataclass SearchConfig for the engine."""
        return SearchConfig(
            limit=self.limit,
            non_negativity=self.non_negativity,
            workers=self.workers,
        )

    @classmethod
    def from_dataclass(cls, config: SearchConfig) -> "ValidatedSearchConfig":
        """Create from dataclass SearchConfig."""
        return cls(
            limit=config.limit,
            non_negativity=config.non_negativity,
            workers=config.workers,
        )


class LinearRestrictionSpec(BaseModel):
    """``sum(coefficients[v] * v) <operator> bound``."""
    model_config = ConfigDict(extra="forbid")

    coefficients: Dict[str, float]
    operator: Literal["<=", "<", ">=", ">"] = "<="
    bound: float
    name: Optional[str] = None

    @field_validator("coefficients")
    @classmethod
    def validate_coefficients(cls, v: Dict[str, float]) -> Dict[str, float]:
        if not v:
            raise ValueError("a restriction needs at least one coefficient")
        return v

    def to_comparison(self) -> Comparison:
        return Comparison(LinearExpr(self.coefficients), self.operator, LinearExpr(constant=self.bound))


class LinearProblemSpec(BaseModel):
    """A complete linear problem as read from JSON."""
    model_config = ConfigDict(extra="forbid")

    variables: List[str] = Field(default_factory=list)
    objective: Dict[str, float] = Field(default_factory=dict)
    restrictions: List[LinearRestrictionSpec] = Field(default_factory=list)
    sense: Literal["max", "min"] = "max"
    search: ValidatedSearchConfig = Field(default_factory=ValidatedSearchConfig)

    @model_validator(mode="after")
    def validate_model(self):
        """Every coefficient must refer to a declared variable."""
        declared = set(self.variables)
        unknown = set(self.objective) - declared
        for restriction in self.restrictions:
            unknown |= set(restriction.coefficients) - declared
        if unknown:
            raise ValueError(f"undeclared variables: {sorted(unknown)}")
        return self

    @log_function_call
    def to_problem(self, config: Optional[SearchConfig] = None):
        """Build an ``LpProblem`` with every restriction registered."""
        from bruteopt.solver.engine import LpProblem

        problem = LpProblem(
            *self.variables,
            objective=LinearExpr(self.objective),
            config=config or self.search.to_dataclass(),
        )
        for i, restriction in enumerate(self.restrictions):
            comparison = restriction.to_comparison()
            problem.add_restriction(comparison, name=restriction.name or f"r{i + 1}: {comparison}")
        return problem
