"""Per-edge signal timing report for a minimized flow assignment."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .data import EdgeFlow
from .traffic import DEFAULT_TRAFFIC_MODEL, TrafficModel, green_light_times, time_saved_ratios


@dataclass(frozen=True)
class EdgeReport:
    """Signal timing for one declared edge.

    Attributes:
        source: Tail vertex.
        destination: Head vertex.
        capacity: Declared capacity.
        flow: Flow after minimization.
        green_seconds: Green time needed for ``flow`` cars.
        time_saved: Green seconds freed versus serving the full capacity.
        time_saved_ratio: time_saved as a fraction of the capacity's green time.
        red_seconds: Red time in the signal cycle, when a cycle length is given.
    """

    source: int
    destination: int
    capacity: int
    flow: int
    green_seconds: int
    time_saved: int
    time_saved_ratio: float
    red_seconds: int | None = None


def build_report(
    flows: Sequence[EdgeFlow],
    model: TrafficModel | None = None,
    cycle_seconds: int | None = None,
) -> list[EdgeReport]:
    """Compute signal timings for every edge in ``flows``.

    Args:
        flows: Per-edge flows, usually MinimizationResult.flows.
        model: Kinematic constants. Defaults to DEFAULT_TRAFFIC_MODEL.
        cycle_seconds: Optional signal cycle length; when given, each row also
                       carries the red time left over in the cycle.

    Returns:
        One EdgeReport per edge, in the order given.
    """
    model = model or DEFAULT_TRAFFIC_MODEL
    if not flows:
        return []

    capacities = np.array([edge.capacity for edge in flows], dtype=np.int64)
    counts = np.array([edge.flow for edge in flows], dtype=np.int64)

    green = green_light_times(counts, model)
    saved = green_light_times(capacities, model) - green
    ratios = time_saved_ratios(capacities, counts, model)

    red = cycle_seconds - green if cycle_seconds is not None else None

    return [
        EdgeReport(
            source=edge.source,
            destination=edge.destination,
            capacity=edge.capacity,
            flow=edge.flow,
            green_seconds=int(green[i]),
            time_saved=int(saved[i]),
            time_saved_ratio=float(ratios[i]),
            red_seconds=int(red[i]) if red is not None else None,
        )
        for i, edge in enumerate(flows)
    ]


def format_report(
    max_flow: int,
    rows: Sequence[EdgeReport],
    title: str | None = None,
) -> str:
    """Render a report as the plain-text table printed by the example scripts."""
    lines: list[str] = []
    if title:
        lines.append(title)
    lines.append(f"Maximum flow: {max_flow}")
    lines.append("")
    lines.append("Given edges after minimizing the flow without affecting the maximum flow:")
    for k, row in enumerate(rows, start=1):
        line = (
            f"{k}\tSRC: {row.source}, DEST: {row.destination}, Flow: {row.flow}, "
            f"Req Green Light Time: {row.green_seconds} sec, "
            f"Time saved for Pedestrians: {row.time_saved}, "
            f"Ratio of Time Saved: {row.time_saved_ratio:.3f}"
        )
        if row.red_seconds is not None:
            line += f", Red Light Time: {row.red_seconds} sec"
        lines.append(line)
    return "\n".join(lines)
