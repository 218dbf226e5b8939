"""Traffic-light timing derived from car counts.

Green light time is the time needed for a queue of cars to cross an
intersection at a steady speed, with the yellow phase folded in:

    green = ceil(|cars| * (car_length + car_gap) / average_speed)

With the default model (4.5 m cars, 2 m gaps, 30 km/h = 8.333 m/s) twenty cars
need ceil(20 * 6.5 / 8.333) = 16 seconds.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .exceptions import SolverConfigurationError


@dataclass(frozen=True)
class TrafficModel:
    """Kinematic constants used to turn car counts into seconds.

    Attributes:
        car_length: Average car body length in meters.
        car_gap: Average gap between consecutive cars in meters.
        average_speed: Average crossing speed in meters per second.
    """

    car_length: float = 4.5
    car_gap: float = 2.0
    average_speed: float = 8.333

    def __post_init__(self) -> None:
        if self.car_length < 0 or self.car_gap < 0:
            raise SolverConfigurationError(
                f"Car length and gap must be non-negative, got length={self.car_length}, "
                f"gap={self.car_gap}."
            )
        if self.average_speed <= 0:
            raise SolverConfigurationError(
                f"Average speed must be positive, got {self.average_speed}."
            )

    @property
    def spacing(self) -> float:
        """Road length occupied by one car, in meters."""
        return self.car_length + self.car_gap


DEFAULT_TRAFFIC_MODEL = TrafficModel()


def green_light_times(
    car_counts: ArrayLike, model: TrafficModel | None = None
) -> NDArray[np.int64]:
    """Vectorized green light seconds for an array of car counts."""
    model = model or DEFAULT_TRAFFIC_MODEL
    counts = np.abs(np.asarray(car_counts, dtype=np.int64))
    return np.ceil(counts * model.spacing / model.average_speed).astype(np.int64)


def time_saved_ratios(
    capacities: ArrayLike,
    flows: ArrayLike,
    model: TrafficModel | None = None,
) -> NDArray[np.float64]:
    """Vectorized fraction of each capacity's green time freed for pedestrians.

    Ratios outside [0, 1] are reported as 1. An edge whose capacity needs no
    green time saves nothing.
    """
    full = green_light_times(capacities, model)
    saved = full - green_light_times(flows, model)
    ratios = np.where(full > 0, saved / np.maximum(full, 1), 0.0)
    return np.where((ratios > 1) | (ratios < 0), 1.0, ratios)


def green_light_seconds(car_count: int, model: TrafficModel | None = None) -> int:
    """Seconds of green light needed for ``car_count`` cars to cross."""
    return int(green_light_times([car_count], model)[0])


def red_light_seconds(
    car_count: int,
    cycle_seconds: int,
    model: TrafficModel | None = None,
) -> int:
    """Remainder of a signal cycle once ``car_count`` cars have had their green."""
    return cycle_seconds - green_light_seconds(car_count, model)


def time_saved_seconds(capacity: int, flow: int, model: TrafficModel | None = None) -> int:
    """Green time freed for pedestrians by serving ``flow`` instead of ``capacity``."""
    return green_light_seconds(capacity, model) - green_light_seconds(flow, model)


def time_saved_ratio(capacity: int, flow: int, model: TrafficModel | None = None) -> float:
    """Fraction of the capacity's green time freed for pedestrians."""
    return float(time_saved_ratios([capacity], [flow], model)[0])
