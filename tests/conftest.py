"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from bruteopt.cli import sample_problem
from bruteopt.models.expressions import variables
from bruteopt.solver.base import Direction
from bruteopt.solver.engine import LpProblem


@pytest.fixture
def xy():
    """Expression handles for two variables."""
    return variables("x", "y")


@pytest.fixture
def small_problem(xy):
    """max 3x + 2y s.t. x + y <= 4, x <= 3 over [0, 5]^2 (optimum 11 at x=3, y=1)."""
    x, y = xy
    problem = LpProblem("x", "y", objective=3 * x + 2 * y, limit=5)
    problem.add_restrictions(x + y <= 4, x <= 3)
    return problem


@pytest.fixture(scope="session")
def sample_max_outcome():
    """Full search of the sample problem, shared because it visits 101^3 candidates."""
    return sample_problem().solve(Direction.MAXIMIZE)
