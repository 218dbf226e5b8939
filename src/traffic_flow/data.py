"""Core data structures for intersection max-flow problems."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidArgumentError, SolverConfigurationError

if TYPE_CHECKING:
    from .network import FlowNetwork


def as_vertex(value: Any, num_vertices: int, role: str) -> int:
    """Return ``value`` as a vertex index, raising if it is not one."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(
            f"{role.capitalize()} vertex must be an integer, got {value!r}."
        )
    vertex = int(value)
    if not 0 <= vertex < num_vertices:
        raise InvalidArgumentError(
            f"{role.capitalize()} vertex {vertex} is out of range for a network with "
            f"{num_vertices} vertices. Valid indices are 0 to {num_vertices - 1}."
        )
    return vertex


@dataclass
class ResidualArc:
    """One direction of an edge in the residual graph.

    Attributes:
        source: Tail vertex.
        destination: Head vertex.
        capacity: Upper bound on flow (0 for reverse arcs).
        flow: Current flow. Reverse arcs mirror their forward arc with -flow.
        pair: Index of the paired arc in the opposite direction.
    """

    source: int
    destination: int
    capacity: int
    flow: int
    pair: int

    def residual(self) -> int:
        return self.capacity - self.flow


@dataclass(frozen=True)
class OriginalEdge:
    """An edge exactly as declared by the caller.

    Attributes:
        source: Tail vertex.
        destination: Head vertex.
        capacity: Declared capacity (cars per cycle).
        arc: Index of the forward ResidualArc carrying this edge's flow.
    """

    source: int
    destination: int
    capacity: int
    arc: int


@dataclass(frozen=True)
class EdgeFlow:
    """Flow carried by one original edge, as read back after a solve."""

    source: int
    destination: int
    capacity: int
    flow: int


@dataclass
class FlowResult:
    """Represents the output of a maximum-flow computation.

    Attributes:
        max_flow: Net flow leaving the source.
        flows: Flow on each original edge, in declaration order.
        augmentations: Number of augmenting paths pushed by this solve.
        status: 'optimal', or 'degenerate' when source == sink.

    Examples:
        >>> from traffic_flow import build_network, solve_max_flow
        >>> network = build_network(3, [(0, 1, 5), (1, 2, 3)])
        >>> result = solve_max_flow(network, source=0, sink=2)
        >>> result.max_flow
        3
        >>> [edge.flow for edge in result.flows]
        [3, 3]
    """

    max_flow: int
    flows: list[EdgeFlow] = field(default_factory=list)
    augmentations: int = 0
    status: str = "optimal"


@dataclass
class MinimizationResult:
    """Represents the output of the greedy flow minimization.

    Attributes:
        max_flow: Maximum flow value preserved by every accepted reduction.
        baseline: Edge flows before minimization.
        flows: Edge flows after minimization.
        accepted: Indices of original edges whose flow was reduced.
        rejected: Indices of original edges left untouched.
        probes: Number of max-flow re-solves actually run.
    """

    max_flow: int
    baseline: list[EdgeFlow] = field(default_factory=list)
    flows: list[EdgeFlow] = field(default_factory=list)
    accepted: list[int] = field(default_factory=list)
    rejected: list[int] = field(default_factory=list)
    probes: int = 0

    @property
    def total_reduction(self) -> int:
        """Total units of flow removed across all edges."""
        return sum(before.flow - after.flow for before, after in zip(self.baseline, self.flows))


@dataclass
class SolverOptions:
    """Configuration options for the max-flow solver.

    Attributes:
        max_augmentations: Maximum number of augmenting paths per solve.
                           None (default) means unlimited; Edmonds-Karp always
                           terminates on integer capacities.

    Examples:
        >>> options = SolverOptions()
        >>> capped = SolverOptions(max_augmentations=50)
    """

    max_augmentations: int | None = None

    def __post_init__(self) -> None:
        if self.max_augmentations is not None and self.max_augmentations <= 0:
            raise SolverConfigurationError(
                f"max_augmentations must be positive, got {self.max_augmentations}. "
                f"Use None for no limit."
            )


@dataclass
class FlowProblem:
    """A named intersection network with its source and sink.

    Attributes:
        num_vertices: Number of vertices; vertices are 0 .. num_vertices - 1.
        source: Vertex where traffic enters.
        sink: Vertex where traffic leaves.
        edges: (source, destination, capacity) triples in declaration order.
        name: Human-readable label used in reports.
    """

    num_vertices: int
    source: int
    sink: int
    edges: list[tuple[int, int, int]] = field(default_factory=list)
    name: str = "network"

    def validate(self) -> None:
        if isinstance(self.num_vertices, bool) or not isinstance(self.num_vertices, numbers.Integral):
            raise InvalidArgumentError(
                f"Vertex count must be an integer, got {self.num_vertices!r}."
            )
        if self.num_vertices <= 0:
            raise InvalidArgumentError(
                f"Vertex count must be positive, got {self.num_vertices}."
            )
        as_vertex(self.source, self.num_vertices, "source")
        as_vertex(self.sink, self.num_vertices, "sink")

    def to_network(self) -> FlowNetwork:
        """Build a fresh FlowNetwork carrying no flow."""
        from .network import build_network

        return build_network(self.num_vertices, self.edges)


def build_problem(
    num_vertices: int,
    edges: Iterable[Mapping[str, Any] | tuple[int, int, int]],
    source: int,
    sink: int,
    name: str = "network",
) -> FlowProblem:
    """Factory helper used by IO layer to assemble a FlowProblem."""
    triples: list[tuple[int, int, int]] = []
    for edge in edges:
        if isinstance(edge, Mapping):
            missing = [key for key in ("source", "destination", "capacity") if key not in edge]
            if missing:
                raise InvalidArgumentError(
                    f"Invalid edge specification: {dict(edge)}. Missing field(s): "
                    f"{', '.join(missing)}."
                )
            triples.append((edge["source"], edge["destination"], edge["capacity"]))
        else:
            triples.append(tuple(edge))  # type: ignore[arg-type]

    problem = FlowProblem(
        num_vertices=num_vertices,
        source=source,
        sink=sink,
        edges=triples,
        name=name,
    )
    problem.validate()
    # Building once surfaces bad edges now rather than at solve time.
    problem.to_network()
    return problem
