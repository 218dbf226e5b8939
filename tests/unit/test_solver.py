"""Unit tests for solver module."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from traffic_flow.data import FlowProblem, FlowResult, MinimizationResult, SolverOptions  # noqa: E402
from traffic_flow.exceptions import InvalidArgumentError, IterationLimitError  # noqa: E402
from traffic_flow.network import build_network  # noqa: E402
from traffic_flow.scenarios import textbook_intersection, uniform_intersection  # noqa: E402
from traffic_flow.solver import (  # noqa: E402
    load_problem,
    save_result,
    solve_max_flow,
    solve_problem,
)


class TestSolveMaxFlow:
    """Tests for solve_max_flow() function."""

    def test_simple_network(self):
        network = build_network(4, [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3)])
        result = solve_max_flow(network, 0, 3)

        assert isinstance(result, FlowResult)
        assert result.status == "optimal"
        assert result.max_flow == 4
        assert result.augmentations == 2
        assert [edge.flow for edge in result.flows] == [2, 2, 2, 2]

    def test_degenerate_request(self):
        network = build_network(2, [(0, 1, 3)])
        result = solve_max_flow(network, 1, 1)

        assert result.status == "degenerate"
        assert result.max_flow == 0
        assert result.augmentations == 0

    def test_second_solve_pushes_nothing(self):
        network = textbook_intersection().to_network()
        first = solve_max_flow(network, 0, 5)
        second = solve_max_flow(network, 0, 5)

        assert first.max_flow == second.max_flow == 23
        assert second.augmentations == 0
        assert second.flows == first.flows

    def test_options_are_forwarded(self):
        network = textbook_intersection().to_network()

        with pytest.raises(IterationLimitError):
            solve_max_flow(network, 0, 5, options=SolverOptions(max_augmentations=1))

    def test_invalid_sink(self):
        network = build_network(2, [(0, 1, 3)])

        with pytest.raises(InvalidArgumentError):
            solve_max_flow(network, 0, 2)


class TestSolveProblem:
    """Tests for solve_problem() function."""

    @pytest.mark.parametrize(
        "factory, expected",
        [(uniform_intersection, 40), (textbook_intersection, 23)],
    )
    def test_scenarios(self, factory, expected):
        problem = factory()
        network, baseline, minimized = solve_problem(problem)

        assert baseline.max_flow == expected
        assert isinstance(minimized, MinimizationResult)
        assert minimized.max_flow == expected
        assert minimized.baseline == baseline.flows
        assert network.edge_flows() == minimized.flows

    def test_problem_builds_fresh_network_each_time(self):
        problem = textbook_intersection()
        first, _, _ = solve_problem(problem)
        second, _, _ = solve_problem(problem)

        assert first is not second
        assert first.snapshot_flows() == second.snapshot_flows()

    def test_custom_problem(self):
        problem = FlowProblem(num_vertices=3, source=0, sink=2, edges=[(0, 1, 4), (1, 2, 6)])
        _, baseline, minimized = solve_problem(problem)

        assert baseline.max_flow == 4
        assert [edge.flow for edge in minimized.flows] == [4, 4]


class TestFileRoundTrip:
    """Tests for load_problem() and save_result() wrappers."""

    def test_load_solve_save(self, tmp_path: Path):
        problem_path = tmp_path / "corner.json"
        problem_path.write_text(
            '{"vertices": 3, "source": 0, "sink": 2, '
            '"edges": [{"source": 0, "destination": 1, "capacity": 5}, '
            '{"source": 1, "destination": 2, "capacity": 3}]}',
            encoding="utf-8",
        )

        problem = load_problem(problem_path)
        _, _, minimized = solve_problem(problem)
        output = tmp_path / "solution.json"
        save_result(output, minimized, name=problem.name)

        assert problem.name == "corner"
        assert minimized.max_flow == 3
        assert output.exists()
        assert '"max_flow": 3' in output.read_text(encoding="utf-8")
