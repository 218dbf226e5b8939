"""Draw the textbook intersection before and after flow minimization.

Requires optional visualization dependencies:
    pip install 'traffic_flow[visualization]'
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

try:
    import matplotlib.pyplot as plt

    from traffic_flow import solve_problem, visualize_flows
    from traffic_flow.scenarios import textbook_intersection
except ImportError as e:
    print("Error: Visualization dependencies not installed")
    print("Install with: pip install 'traffic_flow[visualization]'")
    print(f"Details: {e}")
    sys.exit(1)


def main() -> None:
    problem = textbook_intersection()
    network, _, minimized = solve_problem(problem)

    fig = visualize_flows(
        network,
        problem.source,
        problem.sink,
        baseline=minimized.baseline,
        layout="shell",
        title=f"{problem.name} (max flow {minimized.max_flow})",
    )
    output = Path(__file__).resolve().parent / "textbook_flows.png"
    fig.savefig(output)
    plt.close(fig)
    print(f"Saved {output.name}")


if __name__ == "__main__":
    main()
