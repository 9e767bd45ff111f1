"""craftkin: spacecraft kinematics over a single time interval."""

from .errors import CraftkinError, InvalidArgument, FuelExhausted
from .parameters import ParameterSet
from .kinematics import (
    KinematicsCalculator,
    ResultSet,
    seconds_to_hours,
    acceleration_to_kmh2,
    compute_new_velocity,
    compute_new_distance,
    compute_fuel_consumed,
    compute_remaining_fuel,
    format_report,
)

__version__ = "0.1.0"

__all__ = [
    "CraftkinError",
    "InvalidArgument",
    "FuelExhausted",
    "ParameterSet",
    "KinematicsCalculator",
    "ResultSet",
    "seconds_to_hours",
    "acceleration_to_kmh2",
    "compute_new_velocity",
    "compute_new_distance",
    "compute_fuel_consumed",
    "compute_remaining_fuel",
    "format_report",
]
