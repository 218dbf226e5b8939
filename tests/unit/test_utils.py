"""Unit tests for flow validation, min-cut and bottleneck utilities."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from traffic_flow.maxflow import compute_max_flow  # noqa: E402
from traffic_flow.network import build_network  # noqa: E402
from traffic_flow.scenarios import TEXTBOOK_EDGES, UNIFORM_EDGES  # noqa: E402
from traffic_flow.utils import (  # noqa: E402
    compute_bottleneck_edges,
    minimum_cut,
    validate_flow,
)


class TestValidateFlow:
    """Tests for validate_flow()."""

    def test_empty_flow_is_valid(self):
        network = build_network(3, [(0, 1, 5), (1, 2, 5)])
        result = validate_flow(network, 0, 2)

        assert result.is_valid
        assert result.errors == []
        assert result.flow_balance == {0: 0, 1: 0, 2: 0}

    def test_solved_flow_balances_at_terminals(self):
        network = build_network(6, UNIFORM_EDGES)
        compute_max_flow(network, 0, 5)
        result = validate_flow(network, 0, 5)

        assert result.is_valid
        assert result.flow_balance[0] == -40
        assert result.flow_balance[5] == 40

    def test_conservation_violation(self):
        network = build_network(3, [(0, 1, 5), (1, 2, 5)])
        network.push(0, 3)
        network.push(2, 1)
        result = validate_flow(network, 0, 2)

        assert not result.is_valid
        assert any("Vertex 1" in error for error in result.errors)
        assert result.flow_balance[1] == 2

    def test_capacity_violation(self):
        network = build_network(2, [(0, 1, 2)])
        network.push(0, 3)
        result = validate_flow(network, 0, 1)

        assert not result.is_valid
        assert result.capacity_violations == [0]

    def test_unmirrored_reverse_arc(self):
        network = build_network(2, [(0, 1, 2)])
        network.arcs[0].flow = 1
        result = validate_flow(network, 0, 1)

        assert not result.is_valid
        assert any("reverse arc" in error for error in result.errors)


class TestMinimumCut:
    """Tests for minimum_cut()."""

    @pytest.mark.parametrize("edges, expected", [(UNIFORM_EDGES, 40), (TEXTBOOK_EDGES, 23)])
    def test_cut_capacity_equals_max_flow(self, edges, expected):
        network = build_network(6, edges)
        value = compute_max_flow(network, 0, 5)
        cut = minimum_cut(network, 0)

        assert value == expected
        assert cut.capacity == expected
        assert 5 not in cut.source_side

    def test_uniform_cut_is_at_source(self):
        network = build_network(6, UNIFORM_EDGES)
        compute_max_flow(network, 0, 5)

        cut = minimum_cut(network, 0)
        assert cut.source_side == {0}
        assert cut.edges == [0, 1]

    def test_cut_on_empty_flow_reaches_everything_connected(self):
        network = build_network(4, [(0, 1, 5), (1, 2, 5)])
        cut = minimum_cut(network, 0)

        assert cut.source_side == {0, 1, 2}
        assert cut.edges == []
        assert cut.capacity == 0


class TestBottlenecks:
    """Tests for compute_bottleneck_edges()."""

    def test_saturated_edges_are_reported(self):
        network = build_network(6, TEXTBOOK_EDGES)
        compute_max_flow(network, 0, 5)

        bottlenecks = compute_bottleneck_edges(network, threshold=1.0)
        assert sorted(b.index for b in bottlenecks) == [3, 8, 9]
        assert all(b.slack == 0 and b.utilization == 1.0 for b in bottlenecks)

    def test_sorted_by_utilization(self):
        network = build_network(3, [(0, 1, 10), (1, 2, 9)])
        compute_max_flow(network, 0, 2)

        bottlenecks = compute_bottleneck_edges(network, threshold=0.5)
        assert [b.index for b in bottlenecks] == [1, 0]
        assert bottlenecks[1].utilization == pytest.approx(0.9)
        assert bottlenecks[1].slack == 1

    def test_zero_capacity_edges_are_skipped(self):
        network = build_network(2, [(0, 1, 0)])
        assert compute_bottleneck_edges(network, threshold=0.0) == []
