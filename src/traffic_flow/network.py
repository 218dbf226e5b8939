"""Residual-graph representation of a capacitated intersection network."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager

from .data import EdgeFlow, OriginalEdge, ResidualArc, as_vertex
from .exceptions import InvalidArgumentError


class FlowNetwork:
    """Directed capacitated network with paired residual arcs.

    Every declared edge becomes two arcs appended back to back: a forward arc with
    the declared capacity and a reverse arc with capacity 0. Each arc stores the
    index of its partner, so pushing flow on one arc cancels it on the other.

    Attributes:
        num_vertices: Number of vertices; vertices are 0 .. num_vertices - 1.
        arcs: All residual arcs, forward and reverse, in creation order.
        original_edges: Declared edges in declaration order.

    Examples:
        >>> network = FlowNetwork(3)
        >>> network.add_edge(0, 1, 5)
        >>> network.add_edge(1, 2, 3)
        >>> network.adjacent_arcs(1)
        (1, 2)
        >>> network.residual_capacity(0)
        5
    """

    def __init__(self, num_vertices: int):
        if isinstance(num_vertices, bool) or not isinstance(num_vertices, numbers.Integral):
            raise InvalidArgumentError(
                f"Vertex count must be an integer, got {num_vertices!r}."
            )
        if num_vertices <= 0:
            raise InvalidArgumentError(f"Vertex count must be positive, got {num_vertices}.")
        self.num_vertices = int(num_vertices)
        self.arcs: list[ResidualArc] = []
        self.original_edges: list[OriginalEdge] = []
        self._adjacency: list[list[int]] = [[] for _ in range(self.num_vertices)]

    def __repr__(self) -> str:
        return f"FlowNetwork(num_vertices={self.num_vertices}, edges={len(self.original_edges)})"

    def add_edge(self, source: int, destination: int, capacity: int) -> None:
        """Declare a directed edge and append its forward/reverse arc pair."""
        source = as_vertex(source, self.num_vertices, "source")
        destination = as_vertex(destination, self.num_vertices, "destination")
        if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
            raise InvalidArgumentError(
                f"Edge {source} -> {destination} has non-integer capacity {capacity!r}. "
                f"Capacities count cars and must be integers."
            )
        if capacity < 0:
            raise InvalidArgumentError(
                f"Edge {source} -> {destination} has negative capacity {capacity}. "
                f"Capacity must be >= 0."
            )

        forward = len(self.arcs)
        reverse = forward + 1
        self.arcs.append(ResidualArc(source, destination, int(capacity), 0, pair=reverse))
        self.arcs.append(ResidualArc(destination, source, 0, 0, pair=forward))
        self._adjacency[source].append(forward)
        self._adjacency[destination].append(reverse)
        self.original_edges.append(OriginalEdge(source, destination, int(capacity), forward))

    def residual_capacity(self, index: int) -> int:
        return self.arcs[index].residual()

    def adjacent_arcs(self, vertex: int) -> tuple[int, ...]:
        """Arc indices leaving ``vertex`` in insertion order."""
        return tuple(self._adjacency[vertex])

    def push(self, index: int, amount: int) -> None:
        """Send ``amount`` along arc ``index`` and cancel it on the paired arc."""
        arc = self.arcs[index]
        arc.flow += amount
        self.arcs[arc.pair].flow -= amount

    def flow_value(self, vertex: int) -> int:
        """Net flow leaving ``vertex`` over the declared edges."""
        value = 0
        for edge in self.original_edges:
            flow = self.arcs[edge.arc].flow
            if edge.source == vertex:
                value += flow
            if edge.destination == vertex:
                value -= flow
        return value

    def edge_flow(self, edge_index: int) -> int:
        return self.arcs[self.original_edges[edge_index].arc].flow

    def edge_flows(self) -> list[EdgeFlow]:
        """Flow on each declared edge, in declaration order."""
        return [
            EdgeFlow(edge.source, edge.destination, edge.capacity, self.arcs[edge.arc].flow)
            for edge in self.original_edges
        ]

    def snapshot_flows(self) -> list[int]:
        return [arc.flow for arc in self.arcs]

    def restore_flows(self, snapshot: Sequence[int]) -> None:
        if len(snapshot) != len(self.arcs):
            raise InvalidArgumentError(
                f"Flow snapshot has {len(snapshot)} entries but the network has "
                f"{len(self.arcs)} arcs."
            )
        for arc, flow in zip(self.arcs, snapshot):
            arc.flow = flow

    def reset_flows(self) -> None:
        for arc in self.arcs:
            arc.flow = 0

    @contextmanager
    def bounded(self, limits: Sequence[int]) -> Iterator[FlowNetwork]:
        """Temporarily cap each declared edge at ``limits[i]``.

        The forward arc capacities are restored to their declared values on exit.
        Limits must lie within [0, declared capacity].
        """
        if len(limits) != len(self.original_edges):
            raise InvalidArgumentError(
                f"Expected {len(self.original_edges)} edge limits, got {len(limits)}."
            )
        for edge, limit in zip(self.original_edges, limits):
            if not 0 <= limit <= edge.capacity:
                raise InvalidArgumentError(
                    f"Limit {limit} for edge {edge.source} -> {edge.destination} is outside "
                    f"[0, {edge.capacity}]."
                )
        for edge, limit in zip(self.original_edges, limits):
            self.arcs[edge.arc].capacity = limit
        try:
            yield self
        finally:
            for edge in self.original_edges:
                self.arcs[edge.arc].capacity = edge.capacity


def build_network(
    num_vertices: int,
    edges: Iterable[tuple[int, int, int]],
) -> FlowNetwork:
    """Factory helper: create a network and declare ``edges`` in order."""
    network = FlowNetwork(num_vertices)
    for edge in edges:
        if len(edge) != 3:
            raise InvalidArgumentError(
                f"Invalid edge specification: {edge!r}. Expected (source, destination, capacity)."
            )
        network.add_edge(*edge)
    return network
