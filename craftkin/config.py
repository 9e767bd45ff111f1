"""
Configuration settings for the kinematics report.

This module holds the display settings for the console report and the
thresholds used when checking the fuel budget.
"""

from dataclasses import asdict, dataclass, fields
from typing import Dict, Any


@dataclass
class ReportSettings:
    """Formatting of the console report."""

    DECIMALS: int = 2
    LABEL_PREFIX: str = "Corrected"

    def __post_init__(self):
        """Validate report settings."""
        if self.DECIMALS < 0:
            raise ValueError("DECIMALS must be non-negative")
        if not self.LABEL_PREFIX:
            raise ValueError("LABEL_PREFIX must not be empty")


@dataclass
class FuelThresholds:
    """Thresholds for the fuel budget check."""

    LOW_FUEL_FRACTION: float = 0.1  # Warn below this share of starting fuel

    def __post_init__(self):
        """Validate thresholds."""
        if not 0 <= self.LOW_FUEL_FRACTION <= 1:
            raise ValueError("LOW_FUEL_FRACTION must be between 0 and 1")


class CalculatorConfig:
    """Global configuration for the calculator and its report."""

    # Serialized section name -> (attribute, settings class)
    SECTIONS = {
        "report_settings": ("report", ReportSettings),
        "fuel_thresholds": ("fuel", FuelThresholds),
    }

    def __init__(self):
        self.report = ReportSettings()
        self.fuel = FuelThresholds()

    def to_dict(self) -> Dict[str, Any]:
        return {
            section: asdict(getattr(self, attr))
            for section, (attr, _) in self.SECTIONS.items()
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "CalculatorConfig":
        """Build a configuration, keeping only known keys of known sections.

        Each section is rebuilt through its dataclass constructor, so a bad
        value raises ValueError from ``__post_init__``.
        """
        instance = cls()
        for section, (attr, settings_cls) in cls.SECTIONS.items():
            values = config_dict.get(section)
            if values is None:
                continue
            known = {f.name for f in fields(settings_cls)}
            setattr(
                instance,
                attr,
                settings_cls(**{k: v for k, v in values.items() if k in known}),
            )
        return instance

    def validate(self):
        """Re-run the checks on every section."""
        for attr, _ in self.SECTIONS.values():
            getattr(self, attr).__post_init__()


# Default configuration instance
config = CalculatorConfig()
config.validate()
