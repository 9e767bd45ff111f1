"""Exceptions raised by the kinematics calculation."""

from typing import Optional


class CraftkinError(Exception):
    """Base exception for craftkin operations."""

    pass


class InvalidArgument(CraftkinError, ValueError):
    """Raised when an input is non-numeric, non-finite or out of range."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class FuelExhausted(CraftkinError):
    """Raised when the craft runs out of fuel before the interval elapses."""

    def __init__(self, remaining_fuel: float, fuel_consumed: float):
        self.remaining_fuel = remaining_fuel
        self.fuel_consumed = fuel_consumed
        self.deficit = fuel_consumed - remaining_fuel
        super().__init__(
            f"Fuel exhausted: burn of {fuel_consumed:.2f} kg exceeds "
            f"remaining {remaining_fuel:.2f} kg (short by {self.deficit:.2f} kg)"
        )
