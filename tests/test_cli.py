"""Tests for the craftkin command-line interface."""

import pytest
from typer.testing import CliRunner

from craftkin.cli import app


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


def test_run_canonical(runner):
    """Default parameters print the three corrected values."""
    result = runner.invoke(app, ["run"])

    assert result.exit_code == 0
    assert result.stdout == (
        "Corrected New Velocity: 48880.00 km/h\n"
        "Corrected New Distance: 10000.00 km\n"
        "Corrected Remaining Fuel: 3200.00 kg\n"
    )


def test_run_with_overrides(runner):
    result = runner.invoke(
        app, ["run", "--velocity", "500", "--acceleration=-0.1", "--time-sec", "1800"]
    )

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Corrected New Velocity: -148.00 km/h"
    assert lines[1] == "Corrected New Distance: 250.00 km"
    assert lines[2] == "Corrected Remaining Fuel: 4100.00 kg"


def test_fuel_exhausted_reports_error(runner):
    result = runner.invoke(
        app, ["run", "--remaining-fuel", "100", "--fuel-burn-rate", "1"]
    )

    assert result.exit_code == 1
    assert result.stdout.startswith("Error: Fuel exhausted")
    assert len(result.stdout.strip().splitlines()) == 1
    assert "Corrected" not in result.stdout


@pytest.mark.parametrize(
    "args",
    [
        ["--velocity", "abc"],
        ["--time-sec=-1"],
        ["--fuel-burn-rate=-0.5"],
        ["--acceleration", "nan"],
    ],
)
def test_invalid_input_reports_error(runner, args):
    result = runner.invoke(app, ["run", *args])

    assert result.exit_code == 1
    assert result.stdout.startswith("Error: ")
    assert "Corrected" not in result.stdout


def test_overflowing_result_reports_error(runner):
    """Huge but finite inputs must not print inf as a result."""
    result = runner.invoke(
        app, ["run", "--velocity", "1e308", "--acceleration", "1e308"]
    )

    assert result.exit_code == 1
    assert result.stdout.strip() == "Error: new_velocity must be finite, got inf"
    assert "Corrected" not in result.stdout


def test_text_velocity_message(runner):
    result = runner.invoke(app, ["run", "--velocity", "abc"])
    assert result.stdout.strip() == "Error: velocity must be a number, got 'abc'"


def test_defaults_table(runner):
    result = runner.invoke(app, ["defaults"])

    assert result.exit_code == 0
    assert "Canonical Parameters" in result.stdout
    assert "fuel_burn_rate" in result.stdout
    assert "10000" in result.stdout
