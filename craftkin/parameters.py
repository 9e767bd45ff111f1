"""Input parameter record for a single kinematic interval."""

from typing import Any, Dict, Mapping

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from .errors import InvalidArgument


class ParameterSet(BaseModel):
    """Immutable set of initial conditions for one calculation pass.

    Values must be real, finite numbers. Text and booleans are rejected
    rather than coerced. Fields accept either snake_case names or their
    camelCase aliases (``timeSec``, ``fuelBurnRate``...).
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    velocity: float = Field(ge=0, description="Initial velocity in km/h")
    acceleration: float = Field(description="Constant acceleration in m/s²")
    time_sec: float = Field(ge=0, description="Elapsed interval in seconds")
    initial_distance: float = Field(
        0.0, ge=0, description="Distance already travelled in km"
    )
    remaining_fuel: float = Field(ge=0, description="Fuel on board in kg")
    fuel_burn_rate: float = Field(ge=0, description="Fuel burn rate in kg/s")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParameterSet":
        """Validate a plain mapping, raising InvalidArgument on bad input."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or None
            logger.debug(f"Parameter validation failed: {e}")
            raise InvalidArgument(
                f"{field}: {error['msg']} (got {error['input']!r})", field=field
            ) from e

    @classmethod
    def canonical(cls) -> "ParameterSet":
        """Reference parameter set: one hour of flight at 10000 km/h."""
        return cls(
            velocity=10000,
            acceleration=3,
            time_sec=3600,
            initial_distance=0,
            remaining_fuel=5000,
            fuel_burn_rate=0.5,
        )

    def with_overrides(self, **changes: Any) -> "ParameterSet":
        """Return a new validated record with some fields replaced."""
        data: Dict[str, Any] = self.model_dump()
        data.update(changes)
        return type(self).from_mapping(data)
