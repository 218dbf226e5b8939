"""Edmonds-Karp maximum flow over a FlowNetwork's residual graph."""

from __future__ import annotations

import logging
from collections import deque
from typing import cast

from .data import SolverOptions, as_vertex
from .exceptions import IterationLimitError
from .network import FlowNetwork


class EdmondsKarp:
    """Shortest-augmenting-path max-flow solver.

    The solver works on the network's current residual state, so it can resume
    from any valid flow: each round runs a breadth-first search from the source
    over arcs with positive residual capacity and pushes the bottleneck amount
    along the shortest path found. FIFO discovery keeps every path shortest in
    arc count, which bounds the number of rounds at O(VE).

    Attributes:
        network: The FlowNetwork whose arc flows are mutated in place.
        options: Solver configuration.
        augmentations: Augmenting paths pushed by the most recent run().

    Note:
        Use compute_max_flow() or solve_max_flow() instead of instantiating this
        class directly.
    """

    def __init__(self, network: FlowNetwork, options: SolverOptions | None = None):
        self.network = network
        self.options = options if options is not None else SolverOptions()
        self.logger = logging.getLogger(__name__)
        self.augmentations = 0

    def _find_augmenting_path(self, source: int, sink: int) -> list[int] | None:
        """Return the arc indices of a shortest source-sink path, or None."""
        network = self.network
        parent: list[int | None] = [None] * network.num_vertices
        visited = [False] * network.num_vertices
        visited[source] = True
        queue: deque[int] = deque([source])

        while queue:
            vertex = queue.popleft()
            for index in network.adjacent_arcs(vertex):
                arc = network.arcs[index]
                if not visited[arc.destination] and arc.residual() > 0:
                    visited[arc.destination] = True
                    parent[arc.destination] = index
                    queue.append(arc.destination)

        if not visited[sink]:
            return None

        path: list[int] = []
        vertex = sink
        while vertex != source:
            index = cast(int, parent[vertex])
            path.append(index)
            vertex = network.arcs[index].source
        path.reverse()
        return path

    def run(self, source: int, sink: int) -> int:
        """Augment until no path remains and return the network's flow value."""
        network = self.network
        source = as_vertex(source, network.num_vertices, "source")
        sink = as_vertex(sink, network.num_vertices, "sink")
        self.augmentations = 0

        if source == sink:
            self.logger.warning(
                "Source and sink are the same vertex; max flow is 0",
                extra={"vertex": source},
            )
            return 0

        limit = self.options.max_augmentations
        pushed = 0
        while True:
            path = self._find_augmenting_path(source, sink)
            if path is None:
                break
            if limit is not None and self.augmentations >= limit:
                raise IterationLimitError(
                    f"Augmentation limit reached: {self.augmentations} augmenting paths "
                    f"pushed before the residual graph was exhausted.",
                    augmentations=self.augmentations,
                    flow=network.flow_value(source),
                )
            bottleneck = min(network.residual_capacity(index) for index in path)
            for index in path:
                network.push(index, bottleneck)
            pushed += bottleneck
            self.augmentations += 1

            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug(
                    f"Augmented {bottleneck} along a {len(path)}-arc path",
                    extra={
                        "augmentation": self.augmentations,
                        "bottleneck": bottleneck,
                        "path_length": len(path),
                    },
                )

        value = network.flow_value(source)
        self.logger.debug(
            "Max flow solve finished",
            extra={
                "max_flow": value,
                "pushed": pushed,
                "augmentations": self.augmentations,
            },
        )
        return value


def compute_max_flow(
    network: FlowNetwork,
    source: int,
    sink: int,
    options: SolverOptions | None = None,
) -> int:
    """Run Edmonds-Karp on ``network`` and return the maximum flow value.

    Flow is augmented from whatever assignment the network already carries, so
    calling this on a network that is already at maximum flow returns the same
    value and leaves every arc untouched.

    Args:
        network: Network to solve. Arc flows are updated in place.
        source: Vertex where flow originates.
        sink: Vertex where flow terminates.
        options: Solver configuration. If None, uses defaults.

    Returns:
        Net flow leaving ``source``. 0 when ``source == sink``.

    Raises:
        InvalidArgumentError: If source or sink is not a vertex of the network.
        IterationLimitError: If options.max_augmentations is exceeded. The
            network is left holding the partial flow pushed so far; call
            reset_flows() or restore a snapshot before reusing it.

    Examples:
        >>> from traffic_flow import build_network, compute_max_flow
        >>> network = build_network(4, [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3)])
        >>> compute_max_flow(network, 0, 3)
        4
    """
    return EdmondsKarp(network, options=options).run(source, sink)
