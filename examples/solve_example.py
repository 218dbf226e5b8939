"""Example script demonstrating usage of the intersection flow solver."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from traffic_flow import load_problem, save_result, solve_problem  # noqa: E402


def main() -> None:
    base_dir = Path(__file__).resolve().parent
    problem_path = base_dir / "sample_network.json"
    output_path = base_dir / "sample_solution.json"

    problem = load_problem(problem_path)
    _, baseline, minimized = solve_problem(problem)
    save_result(output_path, minimized, name=problem.name)

    print(
        f"Solved {problem_path.name}: max_flow={minimized.max_flow}, "
        f"augmentations={baseline.augmentations}, reduced={len(minimized.accepted)} edge(s)"
    )

    # Show which edges gave up flow during minimization
    for before, after in zip(minimized.baseline, minimized.flows):
        if after.flow != before.flow:
            print(f"  {before.source} -> {before.destination}: {before.flow} -> {after.flow}")


if __name__ == "__main__":
    main()
