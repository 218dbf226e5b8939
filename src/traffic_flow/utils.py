"""Utility functions for analyzing and validating flow assignments."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

import numpy as np

from .data import as_vertex
from .network import FlowNetwork


@dataclass
class ValidationResult:
    """Results from validating a flow assignment.

    Attributes:
        is_valid: True if the flow satisfies all constraints.
        errors: List of validation error messages (empty if valid).
        flow_balance: Net inflow per vertex (inflow - outflow).
        capacity_violations: Indices of declared edges with flow outside [0, capacity].
    """

    is_valid: bool
    errors: list[str]
    flow_balance: dict[int, int]
    capacity_violations: list[int]


@dataclass
class MinCut:
    """A minimum source-sink cut read off a maximum flow.

    Attributes:
        source_side: Vertices reachable from the source in the residual graph.
        edges: Indices of declared edges crossing from source side to sink side.
        capacity: Total declared capacity of the cut edges.
    """

    source_side: set[int]
    edges: list[int]
    capacity: int


@dataclass
class BottleneckEdge:
    """A declared edge at or near capacity.

    Attributes:
        index: Position of the edge in declaration order.
        source: Tail vertex.
        destination: Head vertex.
        flow: Current flow.
        capacity: Declared capacity.
        utilization: flow / capacity.
        slack: capacity - flow.
    """

    index: int
    source: int
    destination: int
    flow: int
    capacity: int
    utilization: float
    slack: int


def validate_flow(network: FlowNetwork, source: int, sink: int) -> ValidationResult:
    """Validate that the network's current flow is a feasible source-sink flow.

    Checks:
    - Capacity constraints (0 <= flow <= capacity on each declared edge)
    - Flow conservation at every vertex other than source and sink
    - Reverse arcs mirror their forward arcs

    Args:
        network: Network whose current arc flows are checked.
        source: Vertex where flow originates.
        sink: Vertex where flow terminates.

    Returns:
        ValidationResult with detailed information about any violations.
    """
    source = as_vertex(source, network.num_vertices, "source")
    sink = as_vertex(sink, network.num_vertices, "sink")
    errors: list[str] = []
    capacity_violations: list[int] = []

    edges = network.original_edges
    tails = np.array([edge.source for edge in edges], dtype=np.int64)
    heads = np.array([edge.destination for edge in edges], dtype=np.int64)
    capacities = np.array([edge.capacity for edge in edges], dtype=np.int64)
    flows = np.array([network.arcs[edge.arc].flow for edge in edges], dtype=np.int64)

    balance = np.zeros(network.num_vertices, dtype=np.int64)
    np.add.at(balance, heads, flows)
    np.subtract.at(balance, tails, flows)

    for index in np.flatnonzero((flows < 0) | (flows > capacities)):
        edge = edges[index]
        capacity_violations.append(int(index))
        errors.append(
            f"Edge {index} ({edge.source} -> {edge.destination}): flow {flows[index]} "
            f"outside [0, {edge.capacity}]"
        )

    for edge in edges:
        forward = network.arcs[edge.arc]
        if network.arcs[forward.pair].flow != -forward.flow:
            errors.append(
                f"Edge {edge.source} -> {edge.destination}: reverse arc does not mirror "
                f"forward flow {forward.flow}"
            )

    for vertex in range(network.num_vertices):
        if vertex in (source, sink):
            continue
        if balance[vertex] != 0:
            errors.append(f"Vertex {vertex}: flow imbalance {balance[vertex]} (should be zero)")

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        flow_balance={vertex: int(value) for vertex, value in enumerate(balance)},
        capacity_violations=capacity_violations,
    )


def minimum_cut(network: FlowNetwork, source: int) -> MinCut:
    """Read a minimum cut off a network that carries a maximum flow.

    The source side is every vertex reachable from ``source`` through arcs with
    positive residual capacity. On a maximum flow its capacity equals the flow
    value (max-flow min-cut theorem); on a non-maximal flow the sink is reachable
    and the result is not a source-sink cut.
    """
    source = as_vertex(source, network.num_vertices, "source")
    reachable = {source}
    queue: deque[int] = deque([source])
    while queue:
        vertex = queue.popleft()
        for index in network.adjacent_arcs(vertex):
            arc = network.arcs[index]
            if arc.destination not in reachable and arc.residual() > 0:
                reachable.add(arc.destination)
                queue.append(arc.destination)

    cut_edges = [
        index
        for index, edge in enumerate(network.original_edges)
        if edge.source in reachable and edge.destination not in reachable
    ]
    capacity = sum(network.original_edges[index].capacity for index in cut_edges)
    return MinCut(source_side=reachable, edges=cut_edges, capacity=capacity)


def compute_bottleneck_edges(
    network: FlowNetwork,
    threshold: float = 0.95,
) -> list[BottleneckEdge]:
    """Identify declared edges that are at or near capacity.

    Args:
        network: Network carrying a flow.
        threshold: Minimum utilization to count as a bottleneck (default: 0.95 = 95%).

    Returns:
        List of BottleneckEdge objects sorted by utilization (descending), then
        slack (ascending). Zero-capacity edges are excluded.
    """
    bottlenecks: list[BottleneckEdge] = []
    for index, edge in enumerate(network.original_edges):
        if edge.capacity == 0:
            continue
        flow = network.arcs[edge.arc].flow
        utilization = flow / edge.capacity
        if utilization >= threshold:
            bottlenecks.append(
                BottleneckEdge(
                    index=index,
                    source=edge.source,
                    destination=edge.destination,
                    flow=flow,
                    capacity=edge.capacity,
                    utilization=utilization,
                    slack=edge.capacity - flow,
                )
            )

    bottlenecks.sort(key=lambda x: (-x.utilization, x.slack))
    return bottlenecks
