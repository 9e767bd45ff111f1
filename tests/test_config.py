"""Tests for calculator configuration."""

import pytest

from craftkin.config import (
    CalculatorConfig,
    FuelThresholds,
    ReportSettings,
    config,
)


def test_default_config():
    assert config.report.DECIMALS == 2
    assert config.report.LABEL_PREFIX == "Corrected"
    assert config.fuel.LOW_FUEL_FRACTION == 0.1


def test_round_trip_through_dict():
    original = CalculatorConfig()
    original.fuel.LOW_FUEL_FRACTION = 0.25

    restored = CalculatorConfig.from_dict(original.to_dict())
    assert restored.fuel.LOW_FUEL_FRACTION == 0.25
    assert restored.report.DECIMALS == 2


def test_from_dict_ignores_unknown_keys():
    loaded = CalculatorConfig.from_dict({"report_settings": {"COLOR": "red"}})
    assert not hasattr(loaded.report, "COLOR")


def test_invalid_settings_rejected():
    with pytest.raises(ValueError):
        ReportSettings(DECIMALS=-1)
    with pytest.raises(ValueError):
        ReportSettings(LABEL_PREFIX="")
    with pytest.raises(ValueError):
        FuelThresholds(LOW_FUEL_FRACTION=1.5)
    with pytest.raises(ValueError):
        CalculatorConfig.from_dict({"fuel_thresholds": {"LOW_FUEL_FRACTION": -0.1}})
