"""Unit tests for green light timing."""

import math
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from traffic_flow.exceptions import SolverConfigurationError  # noqa: E402
from traffic_flow.traffic import (  # noqa: E402
    DEFAULT_TRAFFIC_MODEL,
    TrafficModel,
    green_light_seconds,
    green_light_times,
    red_light_seconds,
    time_saved_ratio,
    time_saved_seconds,
    time_saved_ratios,
)


@pytest.mark.parametrize(
    "cars, seconds",
    [(0, 0), (1, 1), (4, 4), (7, 6), (12, 10), (16, 13), (19, 15), (20, 16)],
)
def test_green_light_seconds(cars, seconds):
    assert green_light_seconds(cars) == seconds


def test_green_light_matches_ceiling_rule():
    assert green_light_seconds(20) == math.ceil(20 * 6.5 / 8.333)


def test_green_light_uses_absolute_count():
    assert green_light_seconds(-20) == green_light_seconds(20)


def test_custom_model():
    # 10 m per car at 10 m/s is exactly one second per car.
    model = TrafficModel(car_length=8.0, car_gap=2.0, average_speed=10.0)
    assert green_light_seconds(7, model) == 7


def test_default_model_constants():
    assert DEFAULT_TRAFFIC_MODEL.car_length == 4.5
    assert DEFAULT_TRAFFIC_MODEL.car_gap == 2.0
    assert DEFAULT_TRAFFIC_MODEL.average_speed == 8.333
    assert DEFAULT_TRAFFIC_MODEL.spacing == 6.5


@pytest.mark.parametrize(
    "kwargs",
    [{"average_speed": 0.0}, {"average_speed": -1.0}, {"car_length": -0.1}, {"car_gap": -2.0}],
)
def test_invalid_model(kwargs):
    with pytest.raises(SolverConfigurationError):
        TrafficModel(**kwargs)


def test_red_light_is_remainder_of_cycle():
    assert red_light_seconds(20, 60) == 44
    assert red_light_seconds(0, 60) == 60


def test_time_saved():
    assert time_saved_seconds(16, 12) == 3
    assert time_saved_ratio(16, 12) == pytest.approx(3 / 13)


def test_time_saved_ratio_bounds():
    assert time_saved_ratio(20, 0) == 1.0
    assert time_saved_ratio(20, 20) == 0.0
    # Flow above capacity would give a negative ratio; it is reported as 1.
    assert time_saved_ratio(4, 20) == 1.0


def test_time_saved_ratio_zero_capacity():
    assert time_saved_ratio(0, 0) == 0.0


def test_green_light_times_matches_scalar():
    counts = [0, 1, 4, 7, -12, 20]
    times = green_light_times(counts)

    assert times.tolist() == [green_light_seconds(n) for n in counts]


def test_time_saved_ratios_matches_scalar():
    capacities = [16, 20, 4, 0, 10]
    flows = [12, 0, 20, 0, 10]
    ratios = time_saved_ratios(capacities, flows)

    assert ratios.tolist() == pytest.approx(
        [time_saved_ratio(c, f) for c, f in zip(capacities, flows)]
    )
    assert ratios.tolist() == pytest.approx([3 / 13, 1.0, 1.0, 0.0, 0.0])
