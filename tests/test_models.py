"""Tests for data models."""
import pytest
from pydantic import ValidationError

from bruteopt.models.constraints import Restriction, SearchConfig
from bruteopt.models.result import LpResult
from bruteopt.models.scope import ProblemScope
from bruteopt.models.validated import (
    LinearProblemSpec,
    LinearRestrictionSpec,
    ValidatedSearchConfig,
)
from bruteopt.utils.logging_setup import TRACE


class TestSearchConfig:
    """Tests for SearchConfig dataclass."""

    def test_defaults(self):
        config = SearchConfig()
        assert config.limit == 100
        assert config.non_negativity is True
        assert config.workers == 1

    def test_negative_limit(self):
        with pytest.raises(ValueError):
            SearchConfig(limit=-5)

    def test_zero_workers(self):
        with pytest.raises(ValueError):
            SearchConfig(workers=0)

    def test_candidate_count(self):
        config = SearchConfig(limit=100)
        assert config.candidate_count(3) == 101 ** 3
        assert config.candidate_count(0) == 1

    def test_from_dict_ignores_unknown_keys(self):
        config = SearchConfig.from_dict({"limit": 7, "colour": "blue"})
        assert config.limit == 7
        assert config.to_dict() == {"limit": 7, "non_negativity": True, "workers": 1}


class TestRestriction:

    def test_call_coerces_to_bool(self):
        restriction = Restriction(lambda s: s.value("x"), "x nonzero")
        assert restriction(ProblemScope({"x": 3})) is True
        assert restriction(ProblemScope({"x": 0})) is False


class TestLpResult:
    """Tests for LpResult."""

    def test_default_is_zero_and_empty(self):
        result = LpResult()
        assert result.optimal_value == 0.0
        assert result.variables == {}

    def test_str(self):
        result = LpResult(11.0, {"x": 3, "y": 1})
        assert str(result) == "Question Result: optimal value is 11.0 with variables [x=3, y=1]"

    def test_to_dict_stringifies_keys(self):
        result = LpResult(4.0, {("a", 1): 2})
        assert result.to_dict() == {"optimal_value": 4.0, "variables": {"('a', 1)": 2}}

    def test_frozen(self):
        result = LpResult()
        with pytest.raises(AttributeError):
            result.optimal_value = 3.0


class TestValidatedSearchConfig:
    """Tests for the pydantic boundary model."""

    def test_round_trip_with_dataclass(self):
        config = SearchConfig(limit=12, non_negativity=False, workers=2)
        assert ValidatedSearchConfig.from_dataclass(config).to_dataclass() == config

    def test_rejects_negative_limit(self):
        with pytest.raises(ValidationError):
            ValidatedSearchConfig(limit=-1)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ValidatedSearchConfig(timeout=3)


class TestLinearProblemSpec:
    """Tests for JSON problem definitions."""

    @pytest.fixture
    def payload(self):
        return {
            "variables": ["x", "y"],
            "objective": {"x": 3, "y": 2},
            "restrictions": [
                {"coefficients": {"x": 1, "y": 1}, "operator": "<=", "bound": 4},
                {"coefficients": {"x": 1}, "bound": 3, "name": "x cap"},
            ],
            "search": {"limit": 5},
        }

    def test_to_problem_solves(self, payload):
        problem = LinearProblemSpec.model_validate(payload).to_problem()
        assert problem.get_max() == LpResult(11.0, {"x": 3, "y": 1})

    def test_to_problem_is_traced(self, payload, caplog):
        with caplog.at_level(TRACE, logger="bruteopt.models.validated"):
            LinearProblemSpec.model_validate(payload).to_problem()

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("→ to_problem(") for m in messages)
        assert any(m.startswith("← to_problem returned: LpProblem(") for m in messages)

    def test_restriction_names(self, payload):
        problem = LinearProblemSpec.model_validate(payload).to_problem()
        names = [r.name for r in problem.restrictions]
        assert names == ["non_negative(x)", "non_negative(y)", "r1: x + y <= 4", "x cap"]

    def test_undeclared_variable(self, payload):
        payload["objective"]["z"] = 1
        with pytest.raises(ValidationError, match="undeclared"):
            LinearProblemSpec.model_validate(payload)

    def test_bad_operator(self):
        with pytest.raises(ValidationError):
            LinearRestrictionSpec(coefficients={"x": 1}, operator="==", bound=1)

    def test_empty_coefficients(self):
        with pytest.raises(ValidationError):
            LinearRestrictionSpec(coefficients={}, bound=1)

    def test_explicit_config_wins(self, payload):
        problem = LinearProblemSpec.model_validate(payload).to_problem(SearchConfig(limit=2))
        assert problem.limit == 2
