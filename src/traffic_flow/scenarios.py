"""The two reference intersections used by the examples and tests.

Both are six-vertex networks with traffic entering at vertex 0 and leaving at
vertex 5.
"""

from __future__ import annotations

from .data import FlowProblem

UNIFORM_EDGES: list[tuple[int, int, int]] = [
    (0, 1, 20),
    (0, 2, 20),
    (1, 2, 20),
    (1, 3, 20),
    (2, 1, 20),
    (2, 4, 20),
    (3, 2, 20),
    (3, 5, 20),
    (4, 3, 20),
    (4, 5, 20),
]

TEXTBOOK_EDGES: list[tuple[int, int, int]] = [
    (0, 1, 16),
    (0, 2, 13),
    (1, 2, 10),
    (1, 3, 12),
    (2, 1, 4),
    (2, 4, 14),
    (3, 2, 9),
    (3, 5, 20),
    (4, 3, 7),
    (4, 5, 4),
]


def uniform_intersection() -> FlowProblem:
    """Six roads of capacity 20 each; maximum flow 40."""
    return FlowProblem(
        num_vertices=6,
        source=0,
        sink=5,
        edges=list(UNIFORM_EDGES),
        name="Example of 6 roads of flow 20",
    )


def textbook_intersection() -> FlowProblem:
    """The classic CLRS max-flow network; maximum flow 23."""
    return FlowProblem(
        num_vertices=6,
        source=0,
        sink=5,
        edges=list(TEXTBOOK_EDGES),
        name="Example of 6 roads of different flows",
    )


def all_scenarios() -> list[FlowProblem]:
    return [uniform_intersection(), textbook_intersection()]
