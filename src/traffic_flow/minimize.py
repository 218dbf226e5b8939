"""Greedy per-edge flow minimization that preserves the maximum flow value."""

from __future__ import annotations

import logging

from .data import MinimizationResult, SolverOptions, as_vertex
from .exceptions import IterationLimitError
from .maxflow import EdmondsKarp
from .network import FlowNetwork


class FlowMinimizer:
    """Trim one unit of flow from each edge when throughput allows it.

    Edges are visited once each, in declaration order. For every edge carrying
    flow, a probe caps that edge at one unit below its current flow and every
    other edge at its current flow, clears all flows, and re-solves max flow
    from scratch. The reduction is accepted only if the probe still reaches the
    baseline value; otherwise the assignment from before the probe is restored.

    Because every probe is bounded by the current assignment, no edge's flow can
    grow during minimization, and each accepted probe leaves a complete flow of
    the baseline value on the network. The outcome depends on declaration order;
    it is a single greedy pass, not a global minimum.

    Attributes:
        network: Network carrying the flow to minimize. Mutated in place.
        source: Vertex where flow originates.
        sink: Vertex where flow terminates.
        options: Solver configuration forwarded to every re-solve.
    """

    def __init__(
        self,
        network: FlowNetwork,
        source: int,
        sink: int,
        options: SolverOptions | None = None,
    ):
        self.network = network
        self.source = as_vertex(source, network.num_vertices, "source")
        self.sink = as_vertex(sink, network.num_vertices, "sink")
        self.options = options if options is not None else SolverOptions()
        self.logger = logging.getLogger(__name__)
        self._solver = EdmondsKarp(network, options=self.options)

    def _probe(self, edge_index: int, target: int) -> int:
        """Re-solve from zero with ``edge_index`` capped at ``target``."""
        network = self.network
        limits = [network.edge_flow(i) for i in range(len(network.original_edges))]
        limits[edge_index] = target
        with network.bounded(limits):
            network.reset_flows()
            return self._solver.run(self.source, self.sink)

    def run(self) -> MinimizationResult:
        network = self.network
        max_flow = self._solver.run(self.source, self.sink)
        result = MinimizationResult(max_flow=max_flow, baseline=network.edge_flows())

        for index, edge in enumerate(network.original_edges):
            original_flow = network.edge_flow(index)
            if original_flow <= 0 or self.source == self.sink:
                result.rejected.append(index)
                continue

            snapshot = network.snapshot_flows()
            try:
                probe_flow = self._probe(index, original_flow - 1)
            except IterationLimitError:
                network.restore_flows(snapshot)
                raise
            result.probes += 1

            if probe_flow != max_flow:
                network.restore_flows(snapshot)
                result.rejected.append(index)
                verdict = "rejected"
            else:
                result.accepted.append(index)
                verdict = "accepted"

            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug(
                    f"Reduction of edge {edge.source} -> {edge.destination} {verdict}",
                    extra={
                        "edge": index,
                        "original_flow": original_flow,
                        "probe_flow": probe_flow,
                        "max_flow": max_flow,
                    },
                )

        result.flows = network.edge_flows()
        self.logger.info(
            "Flow minimization finished",
            extra={
                "max_flow": max_flow,
                "accepted": len(result.accepted),
                "rejected": len(result.rejected),
                "probes": result.probes,
                "total_reduction": result.total_reduction,
            },
        )
        return result


def minimize_flows(
    network: FlowNetwork,
    source: int,
    sink: int,
    options: SolverOptions | None = None,
) -> MinimizationResult:
    """Reduce per-edge flows without lowering the maximum flow.

    The network is first brought to maximum flow (a no-op if it already carries
    one), then each declared edge is probed once as described in FlowMinimizer.

    Args:
        network: Network to minimize. Arc flows are updated in place; declared
                 capacities are left unchanged.
        source: Vertex where flow originates.
        sink: Vertex where flow terminates.
        options: Solver configuration forwarded to every re-solve.

    Returns:
        MinimizationResult with baseline and final per-edge flows.

    Raises:
        InvalidArgumentError: If source or sink is not a vertex of the network.

    Examples:
        >>> from traffic_flow import build_network, compute_max_flow, minimize_flows
        >>> network = build_network(3, [(0, 1, 4), (1, 2, 4)])
        >>> result = minimize_flows(network, 0, 2)
        >>> result.max_flow, [edge.flow for edge in result.flows]
        (4, [4, 4])
        >>> compute_max_flow(network, 0, 2)
        4
    """
    return FlowMinimizer(network, source, sink, options=options).run()
