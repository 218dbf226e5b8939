"""Tests for custom exception hierarchy."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from traffic_flow import (  # noqa: E402
    InvalidArgumentError,
    IterationLimitError,
    SolverConfigurationError,
    TrafficFlowError,
)
from traffic_flow.data import SolverOptions, build_problem  # noqa: E402


def test_all_exceptions_inherit_from_base():
    """Test that all custom exceptions inherit from TrafficFlowError."""
    assert issubclass(InvalidArgumentError, TrafficFlowError)
    assert issubclass(IterationLimitError, TrafficFlowError)
    assert issubclass(SolverConfigurationError, TrafficFlowError)


def test_base_exception_is_exception():
    assert issubclass(TrafficFlowError, Exception)


def test_iteration_limit_error_carries_state():
    error = IterationLimitError("limit", augmentations=5, flow=12)

    assert str(error) == "limit"
    assert error.augmentations == 5
    assert error.flow == 12


def test_iteration_limit_error_defaults():
    error = IterationLimitError("limit")
    assert error.augmentations == 0
    assert error.flow == 0


@pytest.mark.parametrize("value", [0, -3])
def test_solver_options_reject_non_positive_limit(value):
    with pytest.raises(SolverConfigurationError, match="max_augmentations"):
        SolverOptions(max_augmentations=value)


def test_build_problem_validates_vertex_count():
    with pytest.raises(InvalidArgumentError, match="positive"):
        build_problem(0, [], source=0, sink=0)


def test_build_problem_validates_edges():
    with pytest.raises(InvalidArgumentError, match="Destination vertex 4"):
        build_problem(3, [(0, 4, 1)], source=0, sink=2)


def test_build_problem_reports_missing_fields():
    with pytest.raises(InvalidArgumentError, match="capacity"):
        build_problem(3, [{"source": 0, "destination": 1}], source=0, sink=2)


def test_catch_all_with_base_class():
    with pytest.raises(TrafficFlowError):
        build_problem(2, [(0, 1, -1)], source=0, sink=1)
