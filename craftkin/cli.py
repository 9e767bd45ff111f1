"""Command-line interface for craftkin."""

import sys
from typing import Dict, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import CraftkinError, InvalidArgument
from .kinematics import KinematicsCalculator
from .parameters import ParameterSet

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | {level} | {message}"

# Configure logger
logger.remove()  # Remove default handler
logger.add(sys.stderr, format=LOG_FORMAT, level="INFO")

app = typer.Typer(
    help="craftkin: spacecraft velocity, distance and fuel over one interval",
    rich_markup_mode="rich",
)
console = Console()


def _parse_number(text: str, field: str) -> float:
    """Parse a CLI option value, reporting bad text as InvalidArgument."""
    try:
        return float(text)
    except ValueError:
        raise InvalidArgument(
            f"{field} must be a number, got {text!r}", field=field
        ) from None


@app.command(name="run")
def run(
    velocity: Optional[str] = typer.Option(
        None, "--velocity", help="Initial velocity in km/h"
    ),
    acceleration: Optional[str] = typer.Option(
        None, "--acceleration", help="Acceleration in m/s²"
    ),
    time_sec: Optional[str] = typer.Option(
        None, "--time-sec", help="Elapsed interval in seconds"
    ),
    initial_distance: Optional[str] = typer.Option(
        None, "--initial-distance", help="Initial distance in km"
    ),
    remaining_fuel: Optional[str] = typer.Option(
        None, "--remaining-fuel", help="Fuel on board in kg"
    ),
    fuel_burn_rate: Optional[str] = typer.Option(
        None, "--fuel-burn-rate", help="Fuel burn rate in kg/s"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
):
    """Compute velocity, distance and remaining fuel after one interval.

    Any parameter left out takes its value from the canonical set
    (see [cyan]craftkin defaults[/]).
    """
    if verbose:
        logger.remove()
        logger.add(sys.stderr, format=LOG_FORMAT, level="DEBUG")

    raw: Dict[str, Optional[str]] = {
        "velocity": velocity,
        "acceleration": acceleration,
        "time_sec": time_sec,
        "initial_distance": initial_distance,
        "remaining_fuel": remaining_fuel,
        "fuel_burn_rate": fuel_burn_rate,
    }

    # Validate and compute everything before printing anything
    try:
        overrides = {
            field: _parse_number(text, field)
            for field, text in raw.items()
            if text is not None
        }
        params = ParameterSet.canonical().with_overrides(**overrides)
        lines = KinematicsCalculator().report(params)
    except CraftkinError as e:
        logger.debug(f"Calculation aborted: {type(e).__name__}")
        console.print(f"[red]Error:[/] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    for line in lines:
        typer.echo(line)


@app.command()
def defaults():
    """List the canonical parameter set and its units."""
    params = ParameterSet.canonical()
    units = {
        "velocity": "km/h",
        "acceleration": "m/s²",
        "time_sec": "s",
        "initial_distance": "km",
        "remaining_fuel": "kg",
        "fuel_burn_rate": "kg/s",
    }

    table = Table(title="Canonical Parameters")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Unit")

    for field, value in params.model_dump().items():
        table.add_row(field, f"{value:g}", units[field])

    console.print(table)
