"""File I/O helpers for intersection flow problems."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from .data import FlowProblem, MinimizationResult, build_problem
from .exceptions import InvalidArgumentError
from .report import build_report
from .traffic import TrafficModel


def _normalize_edges(raw: Iterable[Any]) -> Sequence[dict[str, Any]]:
    # Accept either {"source", "destination", "capacity"} objects or [s, d, c] triples.
    edges = []
    for edge in raw:
        if isinstance(edge, Mapping):
            missing = [key for key in ("source", "destination", "capacity") if key not in edge]
            if missing:
                raise InvalidArgumentError(
                    f"Invalid edge specification: {edge}. Each edge must have 'source', "
                    f"'destination' and 'capacity' fields; missing {', '.join(missing)}."
                )
            edges.append(
                {
                    "source": edge["source"],
                    "destination": edge["destination"],
                    "capacity": edge["capacity"],
                }
            )
        elif isinstance(edge, list) and len(edge) == 3:
            edges.append({"source": edge[0], "destination": edge[1], "capacity": edge[2]})
        else:
            raise InvalidArgumentError(
                f"Invalid edge specification: {edge!r}. Expected an object or a "
                f"[source, destination, capacity] triple."
            )
    return edges


def load_problem(path: str | Path) -> FlowProblem:
    """Load an intersection network from a JSON file."""
    with Path(path).open("r", encoding="utf-8") as fh:
        payload = json.load(fh)
    if not isinstance(payload, Mapping):
        raise InvalidArgumentError(
            "Invalid problem format: JSON top level must be an object. "
            f"Got {type(payload).__name__}"
        )
    edges = payload.get("edges")
    if not isinstance(edges, list):
        raise InvalidArgumentError(
            "Invalid problem format: JSON must include an 'edges' array. "
            f"Got edges type: {type(edges).__name__}"
        )
    for key in ("vertices", "source", "sink"):
        if key not in payload:
            raise InvalidArgumentError(f"Invalid problem format: missing '{key}' field.")
    return build_problem(
        num_vertices=payload["vertices"],
        edges=_normalize_edges(edges),
        source=payload["source"],
        sink=payload["sink"],
        name=str(payload.get("name", Path(path).stem)),
    )


def save_result(
    path: str | Path,
    result: MinimizationResult,
    model: TrafficModel | None = None,
    name: str | None = None,
) -> None:
    """Persist a minimization result and its signal timings to JSON."""
    rows = build_report(result.flows, model=model)
    # Edges stay in declaration order so output lines up with the input file.
    data = {
        "name": name,
        "max_flow": result.max_flow,
        "probes": result.probes,
        "total_reduction": result.total_reduction,
        "edges": [
            {
                "source": row.source,
                "destination": row.destination,
                "capacity": row.capacity,
                "baseline_flow": before.flow,
                "flow": row.flow,
                "green_seconds": row.green_seconds,
                "time_saved": row.time_saved,
                "time_saved_ratio": round(row.time_saved_ratio, 6),
            }
            for before, row in zip(result.baseline, rows)
        ],
    }
    with Path(path).open("w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2, sort_keys=False)
