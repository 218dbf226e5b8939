"""Solve both reference intersections and print their signal timing reports."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from traffic_flow import build_report, format_report, solve_problem  # noqa: E402
from traffic_flow.scenarios import all_scenarios  # noqa: E402


def main(verbose: bool = False) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    for problem in all_scenarios():
        _, _, minimized = solve_problem(problem)
        rows = build_report(minimized.flows)
        print()
        print(format_report(minimized.max_flow, rows, title=f"{problem.name}:"))
        print()


if __name__ == "__main__":
    main(verbose="-v" in sys.argv[1:])
