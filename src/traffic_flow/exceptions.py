"""Custom exceptions for the traffic flow library."""

from __future__ import annotations


class TrafficFlowError(Exception):
    """Base exception for all traffic flow errors.

    All custom exceptions in the traffic_flow package inherit from this class,
    allowing users to catch all solver-related errors with a single except clause.

    Example:
        try:
            value = compute_max_flow(network, source=0, sink=5)
        except TrafficFlowError as e:
            print(f"Solver error: {e}")
    """


class InvalidArgumentError(TrafficFlowError):
    """Raised when a network or solve request is malformed.

    This includes:
    - Vertex index outside [0, num_vertices)
    - Negative or non-integer edge capacity
    - Source or sink vertex out of range
    - Malformed JSON problem input

    Example:
        # Edge endpoint outside the network
        InvalidArgumentError("Edge destination 7 is out of range for a network with 6 vertices")

        # Negative capacity
        InvalidArgumentError("Edge 0 -> 1 has negative capacity -3")
    """


class IterationLimitError(TrafficFlowError):
    """Raised when the max-flow solver exceeds its augmentation limit.

    Edmonds-Karp always terminates on integer capacities, so this is only raised
    when SolverOptions.max_augmentations is set and the limit is reached before
    the residual graph runs out of augmenting paths.

    Example:
        IterationLimitError(
            "Augmentation limit reached: 10 augmenting paths pushed",
            augmentations=10,
            flow=17,
        )
    """

    def __init__(self, message: str, augmentations: int = 0, flow: int = 0):
        """Initialize with message and the solver state at the limit."""
        super().__init__(message)
        self.augmentations = augmentations
        self.flow = flow


class SolverConfigurationError(TrafficFlowError):
    """Raised when solver or traffic model configuration is invalid.

    Example:
        SolverConfigurationError("max_augmentations must be positive, got 0")
    """
