"""High-level entrypoints for the intersection traffic flow library."""

from .data import (
    EdgeFlow,
    FlowProblem,
    FlowResult,
    MinimizationResult,
    OriginalEdge,
    ResidualArc,
    SolverOptions,
    build_problem,
)
from .exceptions import (
    InvalidArgumentError,
    IterationLimitError,
    SolverConfigurationError,
    TrafficFlowError,
)
from .maxflow import EdmondsKarp, compute_max_flow
from .minimize import FlowMinimizer, minimize_flows
from .network import FlowNetwork, build_network
from .report import EdgeReport, build_report, format_report
from .solver import load_problem, save_result, solve_max_flow, solve_problem
from .traffic import (
    DEFAULT_TRAFFIC_MODEL,
    TrafficModel,
    green_light_seconds,
    green_light_times,
    red_light_seconds,
    time_saved_ratio,
    time_saved_ratios,
    time_saved_seconds,
)
from .utils import (
    BottleneckEdge,
    MinCut,
    ValidationResult,
    compute_bottleneck_edges,
    minimum_cut,
    validate_flow,
)
from .visualization import to_networkx, visualize_flows

__version__ = "0.1.0"

__all__ = [
    # Main API
    "FlowNetwork",
    "build_network",
    "build_problem",
    "compute_max_flow",
    "minimize_flows",
    "solve_max_flow",
    "solve_problem",
    "load_problem",
    "save_result",
    # Solvers
    "EdmondsKarp",
    "FlowMinimizer",
    # Data
    "FlowProblem",
    "FlowResult",
    "MinimizationResult",
    "EdgeFlow",
    "OriginalEdge",
    "ResidualArc",
    # Configuration
    "SolverOptions",
    "TrafficModel",
    "DEFAULT_TRAFFIC_MODEL",
    # Traffic timing
    "green_light_seconds",
    "red_light_seconds",
    "time_saved_seconds",
    "time_saved_ratio",
    "green_light_times",
    "time_saved_ratios",
    # Reporting
    "EdgeReport",
    "build_report",
    "format_report",
    # Utilities
    "validate_flow",
    "minimum_cut",
    "compute_bottleneck_edges",
    "ValidationResult",
    "MinCut",
    "BottleneckEdge",
    # Visualization
    "to_networkx",
    "visualize_flows",
    # Exceptions
    "TrafficFlowError",
    "InvalidArgumentError",
    "IterationLimitError",
    "SolverConfigurationError",
    # Version
    "__version__",
]
