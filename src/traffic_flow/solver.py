"""Public solver entrypoints."""

from __future__ import annotations

from pathlib import Path

from .data import FlowProblem, FlowResult, MinimizationResult, SolverOptions
from .io import load_problem as load_problem_file
from .io import save_result as save_result_file
from .maxflow import EdmondsKarp
from .minimize import minimize_flows
from .network import FlowNetwork
from .traffic import TrafficModel


def solve_max_flow(
    network: FlowNetwork,
    source: int,
    sink: int,
    options: SolverOptions | None = None,
) -> FlowResult:
    """Compute a maximum flow and report it per declared edge.

    This is the main entry point for a single max-flow solve. The network's arc
    flows are updated in place, so the result can be followed by
    minimize_flows() on the same network.

    Args:
        network: Network to solve.
        source: Vertex where traffic enters.
        sink: Vertex where traffic leaves.
        options: Solver configuration options. If None, uses defaults.

    Returns:
        FlowResult containing:
        - max_flow: Net flow leaving the source
        - flows: Flow on each declared edge
        - augmentations: Number of augmenting paths pushed
        - status: 'optimal', or 'degenerate' when source == sink

    Raises:
        InvalidArgumentError: If source or sink is not a vertex of the network.
        IterationLimitError: If options.max_augmentations is exceeded. The
            network is left holding the partial flow pushed so far; call
            reset_flows() or restore a snapshot before reusing it.

    Time Complexity:
        O(V * E^2) for Edmonds-Karp.

    Examples:
        >>> from traffic_flow import build_network, solve_max_flow
        >>> network = build_network(4, [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3)])
        >>> result = solve_max_flow(network, source=0, sink=3)
        >>> result.max_flow, result.augmentations
        (4, 2)

    See Also:
        - compute_max_flow(): Same computation returning only the value
        - minimize_flows(): Trim per-edge flows afterwards
    """
    # Instantiate a fresh solver each call to avoid cross-run state sharing.
    solver = EdmondsKarp(network, options=options)
    max_flow = solver.run(source, sink)
    return FlowResult(
        max_flow=max_flow,
        flows=network.edge_flows(),
        augmentations=solver.augmentations,
        status="degenerate" if source == sink else "optimal",
    )


def solve_problem(
    problem: FlowProblem,
    options: SolverOptions | None = None,
) -> tuple[FlowNetwork, FlowResult, MinimizationResult]:
    """Build ``problem``, solve it, then minimize the per-edge flows.

    Returns:
        The solved network, the baseline FlowResult, and the MinimizationResult.
    """
    network = problem.to_network()
    baseline = solve_max_flow(network, problem.source, problem.sink, options=options)
    minimized = minimize_flows(network, problem.source, problem.sink, options=options)
    return network, baseline, minimized


def load_problem(path: str | Path) -> FlowProblem:
    """Load an intersection network from a JSON file.

    Args:
        path: Path to JSON file containing the network definition.

    Returns:
        FlowProblem instance ready to solve.

    Raises:
        FileNotFoundError: If file does not exist.
        InvalidArgumentError: If JSON is malformed or the network is invalid.

    Examples:
        >>> from traffic_flow import load_problem, solve_problem
        >>> problem = load_problem("examples/sample_network.json")
        >>> network, baseline, minimized = solve_problem(problem)
    """
    # Reuse the IO helpers so callers interact with a single parsing implementation.
    return load_problem_file(path)


def save_result(
    path: str | Path,
    result: MinimizationResult,
    model: TrafficModel | None = None,
    name: str | None = None,
) -> None:
    """Save a minimization result and its signal timings to a JSON file.

    Args:
        path: Path where JSON file will be written.
        result: MinimizationResult from minimize_flows().
        model: Traffic model used for the green light times.
        name: Optional label stored alongside the result.

    Raises:
        OSError: If file cannot be written.
    """
    # Mirror load_problem to keep round-trip logic encapsulated in the IO layer.
    save_result_file(path, result, model=model, name=name)
