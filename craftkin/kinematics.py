"""Kinematics calculator for a single constant-acceleration interval.

Velocities are carried in km/h, distances in km, fuel in kg and time in
seconds. Every cross-unit step goes through a named conversion
(``seconds_to_hours``, ``acceleration_to_kmh2``).
"""

import math
import numbers
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

from loguru import logger

from .config import CalculatorConfig, config as default_config
from .errors import FuelExhausted, InvalidArgument
from .parameters import ParameterSet

SECONDS_PER_HOUR = 3600.0
METERS_PER_KILOMETER = 1000.0
MS2_TO_KMH2 = SECONDS_PER_HOUR**2 / METERS_PER_KILOMETER  # 12960


def _require_finite(value, name: str) -> float:
    """Return ``value`` as a float, rejecting text, bools, NaN and inf."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(
            f"{name} must be a number, got {type(value).__name__} {value!r}",
            field=name,
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value}", field=name)
    return value


def _require_non_negative(value, name: str) -> float:
    value = _require_finite(value, name)
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}", field=name)
    return value


def seconds_to_hours(seconds) -> float:
    """Convert a duration in seconds to hours."""
    seconds = _require_finite(seconds, "seconds")
    return seconds / SECONDS_PER_HOUR


def acceleration_to_kmh2(acceleration) -> float:
    """Convert an acceleration from m/s² to km/h²."""
    acceleration = _require_finite(acceleration, "acceleration")
    return acceleration * MS2_TO_KMH2


def compute_new_velocity(velocity, acceleration, time_sec) -> float:
    """Velocity in km/h after accelerating for ``time_sec`` seconds."""
    velocity = _require_finite(velocity, "velocity")
    time_sec = _require_non_negative(time_sec, "time_sec")
    new_velocity = velocity + acceleration_to_kmh2(acceleration) * seconds_to_hours(
        time_sec
    )
    return _require_finite(new_velocity, "new_velocity")


def compute_new_distance(initial_distance, velocity, time_sec) -> float:
    """Distance in km after travelling for ``time_sec`` seconds.

    Assumes the craft holds ``velocity`` over the whole interval. The
    contribution of acceleration (the ½at² term) is not modeled.
    """
    initial_distance = _require_finite(initial_distance, "initial_distance")
    velocity = _require_finite(velocity, "velocity")
    time_sec = _require_non_negative(time_sec, "time_sec")
    new_distance = initial_distance + velocity * seconds_to_hours(time_sec)
    return _require_finite(new_distance, "new_distance")


def compute_fuel_consumed(burn_rate, time_sec) -> float:
    """Fuel in kg burnt at ``burn_rate`` kg/s over ``time_sec`` seconds."""
    burn_rate = _require_non_negative(burn_rate, "fuel_burn_rate")
    time_sec = _require_non_negative(time_sec, "time_sec")
    return _require_finite(burn_rate * time_sec, "fuel_consumed")


def compute_remaining_fuel(remaining_fuel, fuel_consumed) -> float:
    """Fuel left after the burn; raises FuelExhausted instead of going negative."""
    remaining_fuel = _require_non_negative(remaining_fuel, "remaining_fuel")
    fuel_consumed = _require_non_negative(fuel_consumed, "fuel_consumed")
    left = remaining_fuel - fuel_consumed
    if left < 0:
        raise FuelExhausted(remaining_fuel, fuel_consumed)
    return left


@dataclass(frozen=True)
class ResultSet:
    """State of the craft at the end of the interval."""

    new_velocity: float  # km/h
    new_distance: float  # km
    remaining_fuel: float  # kg
    fuel_consumed: float  # kg

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def format_report(
    result: ResultSet, decimals: int = 2, prefix: str = "Corrected"
) -> List[str]:
    """Render the three-line console report."""
    return [
        f"{prefix} New Velocity: {result.new_velocity:.{decimals}f} km/h",
        f"{prefix} New Distance: {result.new_distance:.{decimals}f} km",
        f"{prefix} Remaining Fuel: {result.remaining_fuel:.{decimals}f} kg",
    ]


class KinematicsCalculator:
    """Computes velocity, distance and fuel for one kinematic interval."""

    def __init__(self, settings: Optional[CalculatorConfig] = None):
        self._solver_name = "KinematicsCalculator"
        self._solver_version = "1.0.0"
        self.settings = settings or default_config

    def evaluate(self, params: ParameterSet) -> ResultSet:
        """Run the full calculation, raising before any result exists."""
        logger.debug(f"Evaluating {self.solver_name} v{self.solver_version}: {params}")

        new_velocity = compute_new_velocity(
            params.velocity, params.acceleration, params.time_sec
        )
        new_distance = compute_new_distance(
            params.initial_distance, params.velocity, params.time_sec
        )
        fuel_consumed = compute_fuel_consumed(params.fuel_burn_rate, params.time_sec)
        remaining_fuel = compute_remaining_fuel(params.remaining_fuel, fuel_consumed)

        low_fuel = params.remaining_fuel * self.settings.fuel.LOW_FUEL_FRACTION
        if remaining_fuel < low_fuel:
            logger.warning(
                f"Low fuel: {remaining_fuel:.2f} kg left of {params.remaining_fuel:.2f} kg"
            )

        result = ResultSet(
            new_velocity=new_velocity,
            new_distance=new_distance,
            remaining_fuel=remaining_fuel,
            fuel_consumed=fuel_consumed,
        )
        logger.debug(f"Result: {result.to_dict()}")
        return result

    def report(self, params: ParameterSet) -> List[str]:
        """Evaluate and format in one step."""
        result = self.evaluate(params)
        return format_report(
            result,
            decimals=self.settings.report.DECIMALS,
            prefix=self.settings.report.LABEL_PREFIX,
        )

    @property
    def solver_name(self) -> str:
        return self._solver_name

    @property
    def solver_version(self) -> str:
        return self._solver_version
