"""Visualization utilities for intersection networks and their flows.

This module draws networks and flow assignments using matplotlib and networkx.

Example:
    >>> from traffic_flow import solve_problem, visualize_flows
    >>> from traffic_flow.scenarios import textbook_intersection
    >>>
    >>> problem = textbook_intersection()
    >>> network, baseline, minimized = solve_problem(problem)
    >>> fig = visualize_flows(network, problem.source, problem.sink)
    >>> fig.savefig("flows.png")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .data import EdgeFlow
    from .network import FlowNetwork

logger = logging.getLogger(__name__)

# Check for optional dependencies
try:
    import matplotlib.pyplot as plt
    import networkx as nx  # type: ignore[import-untyped,unused-ignore]
    from matplotlib.figure import Figure

    _HAS_VISUALIZATION_DEPS = True
except ImportError:
    _HAS_VISUALIZATION_DEPS = False
    Figure = Any  # type: ignore[misc, assignment]


def _check_dependencies() -> None:
    """Check if visualization dependencies are installed."""
    if not _HAS_VISUALIZATION_DEPS:
        msg = (
            "Visualization requires optional dependencies. "
            "Install with: pip install 'traffic_flow[visualization]'"
        )
        raise ImportError(msg)


def to_networkx(network: FlowNetwork) -> Any:
    """Return the declared edges as a networkx DiGraph.

    Each edge carries ``capacity`` and ``flow`` attributes. Parallel declared
    edges are merged by summing capacity and flow.
    """
    _check_dependencies()
    G = nx.DiGraph()
    G.add_nodes_from(range(network.num_vertices))
    for edge in network.edge_flows():
        if G.has_edge(edge.source, edge.destination):
            data = G[edge.source][edge.destination]
            data["capacity"] += edge.capacity
            data["flow"] += edge.flow
        else:
            G.add_edge(edge.source, edge.destination, capacity=edge.capacity, flow=edge.flow)
    return G


def _layout(G: Any, layout: str) -> dict[Any, Any]:
    layout_funcs = {
        "spring": nx.spring_layout,
        "circular": nx.circular_layout,
        "kamada_kawai": nx.kamada_kawai_layout,
        "planar": nx.planar_layout,
        "shell": nx.shell_layout,
    }
    if layout not in layout_funcs:
        logger.warning(f"Unknown layout '{layout}', using 'spring'")
        layout = "spring"

    try:
        return layout_funcs[layout](G)
    except Exception as e:
        logger.warning(f"Layout '{layout}' failed: {e}, using 'spring'")
        return nx.spring_layout(G, seed=0)


def visualize_flows(
    network: FlowNetwork,
    source: int,
    sink: int,
    baseline: list[EdgeFlow] | None = None,
    layout: str = "spring",
    figsize: tuple[float, float] = (12, 8),
    node_size: int = 1000,
    font_size: int = 10,
    show_zero_flows: bool = True,
    title: str | None = None,
) -> Figure:
    """Visualize the network's current flow assignment.

    Creates a network visualization showing:
    - Source vertex in green, sink vertex in red, intersections in light blue
    - Edge labels "flow/capacity", or "baseline->flow/capacity" when a
      baseline is given
    - Edge width proportional to flow
    - Saturated edges in red

    Args:
        network: Network carrying a flow
        source: Vertex where traffic enters
        sink: Vertex where traffic leaves
        baseline: Optional per-edge flows before minimization
        layout: Graph layout algorithm ("spring", "circular", "kamada_kawai", "planar", "shell")
        figsize: Figure size (width, height) in inches
        node_size: Size of node markers
        font_size: Font size for labels
        show_zero_flows: Whether to draw edges carrying no flow
        title: Custom title for the plot (default: "Flow Assignment")

    Returns:
        matplotlib Figure object

    Raises:
        ImportError: If matplotlib or networkx are not installed
    """
    _check_dependencies()

    G = to_networkx(network)
    fig, ax = plt.subplots(figsize=figsize)
    pos = _layout(G, layout)

    others = [v for v in G.nodes if v not in (source, sink)]
    nx.draw_networkx_nodes(
        G, pos, nodelist=[source], node_color="lightgreen", node_size=node_size, ax=ax,
        label="Source",
    )
    nx.draw_networkx_nodes(
        G, pos, nodelist=[sink], node_color="lightcoral", node_size=node_size, ax=ax,
        label="Sink",
    )
    if others:
        nx.draw_networkx_nodes(
            G, pos, nodelist=others, node_color="lightblue", node_size=node_size, ax=ax,
            label="Intersection",
        )
    nx.draw_networkx_labels(G, pos, font_size=font_size, ax=ax)

    edges = [
        (u, v) for u, v, d in G.edges(data=True) if show_zero_flows or d["flow"] > 0
    ]
    max_flow = max((G[u][v]["flow"] for u, v in edges), default=0) or 1
    widths = [1.0 + 4.0 * G[u][v]["flow"] / max_flow for u, v in edges]
    colors = [
        "red" if G[u][v]["capacity"] > 0 and G[u][v]["flow"] >= G[u][v]["capacity"] else "gray"
        for u, v in edges
    ]
    nx.draw_networkx_edges(
        G,
        pos,
        edgelist=edges,
        width=widths,
        edge_color=colors,
        arrows=True,
        arrowsize=20,
        ax=ax,
        connectionstyle="arc3,rad=0.1",
        node_size=node_size,
    )

    before: dict[tuple[int, int], int] = {}
    for edge in baseline or []:
        key = (edge.source, edge.destination)
        before[key] = before.get(key, 0) + edge.flow
    edge_labels = {}
    for u, v in edges:
        data = G[u][v]
        label = f"{data['flow']}/{data['capacity']}"
        if (u, v) in before:
            label = f"{before[(u, v)]}->{label}"
        edge_labels[(u, v)] = label
    nx.draw_networkx_edge_labels(
        G, pos, edge_labels=edge_labels, font_size=font_size - 2, ax=ax
    )

    ax.set_title(title or "Flow Assignment", fontsize=14, fontweight="bold")
    ax.legend(loc="upper left", fontsize=font_size)
    ax.axis("off")

    plt.tight_layout()
    return fig
