"""CLI interface using Typer."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from bodytrend.config import get_settings
from bodytrend.progression.models import BodyMeasurement

app = typer.Typer(
    help="Trend lines, plateaus and goal projections for body measurements",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Show or create the configuration file")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def use_json(json_flag: bool) -> bool:
    """JSON output if requested on the command line or set as default in config."""
    return json_flag or get_settings().display.output_format == "json"


def fail(command: str, message: str, json_output: bool, style: str = "red") -> NoReturn:
    """Report an error and exit with status 1."""
    if json_output:
        output_json({"success": False, "command": command, "errors": [message]})
    else:
        console.print(message, style=style, markup=False)
    raise typer.Exit(1)


def read_measurements(csv_path: Path, command: str, json_output: bool) -> list[BodyMeasurement]:
    """Load a measurement CSV, exiting with a message on bad input."""
    from bodytrend.data import load_measurements

    try:
        return load_measurements(csv_path)
    except (FileNotFoundError, ValueError) as e:
        fail(command, str(e), json_output)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Progression analysis for weight and body-fat measurements."""
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("bodytrend")


# ============================================================================
# Analysis Commands
# ============================================================================


@app.command()
def analyze(
    csv_path: Path = typer.Argument(..., help="CSV with date, weight_kg, body_fat_pct"),
    target_weight: Optional[float] = typer.Option(
        None, "--target-weight", "-w", help="Goal weight in kg"
    ),
    target_body_fat: Optional[float] = typer.Option(
        None, "--target-body-fat", "-b", help="Goal body fat in %"
    ),
    language: Optional[str] = typer.Option(
        None, "--lang", "-l", help="Duration labels: de or en (default from config)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Full progression report with trend, plateau and goal dates."""
    from bodytrend.export import format_progression_report, report_to_dict
    from bodytrend.progression.summary import compute_progression

    settings = get_settings()
    json_output = use_json(json_output)
    measurements = read_measurements(csv_path, "analyze", json_output)

    report = compute_progression(
        measurements,
        target_weight=target_weight,
        target_body_fat=target_body_fat,
        config=settings.analysis,
    )
    if report is None:
        fail(
            "analyze",
            f"Not enough data for trend analysis (need {settings.analysis.min_points} measurements)",
            json_output,
            style="yellow",
        )

    if json_output:
        output_json({"success": True, "command": "analyze", "data": report_to_dict(report)})
    else:
        console.print(format_progression_report(report, language or settings.display.language))


@app.command()
def plateau(
    csv_path: Path = typer.Argument(..., help="CSV with date and weight_kg"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", help="Max |slope| per day counted as flat"
    ),
    min_days: Optional[int] = typer.Option(
        None, "--min-days", "-d", help="Minimum plateau length in days"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Detect a weight plateau at the end of the series."""
    from bodytrend.export.formatters import plateau_to_dict
    from bodytrend.progression.plateau import detect_plateau
    from bodytrend.progression.summary import weight_points

    settings = get_settings()
    if threshold is None:
        threshold = settings.analysis.plateau_threshold_per_day
    if min_days is None:
        min_days = settings.analysis.plateau_min_days
    json_output = use_json(json_output)

    points = weight_points(read_measurements(csv_path, "plateau", json_output))
    result = detect_plateau(points, threshold_per_day=threshold, min_days=min_days)

    if json_output:
        output_json({"success": True, "command": "plateau", "data": plateau_to_dict(result)})
    elif result.is_plateau:
        console.print(
            f"[yellow]Plateau:[/yellow] {result.duration_days} days "
            f"around {result.average_value:.1f} kg"
        )
    else:
        console.print("[green]No plateau detected[/green]")


@app.command()
def smooth(
    csv_path: Path = typer.Argument(..., help="CSV with date and weight_kg"),
    window: Optional[int] = typer.Option(None, "--window", "-n", help="Moving average window"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Weight history with its moving average."""
    from bodytrend.progression.summary import chart_series, weight_points

    if window is None:
        window = get_settings().analysis.moving_average_window
    json_output = use_json(json_output)

    points = weight_points(read_measurements(csv_path, "smooth", json_output))
    chart = chart_series(points, window)

    if json_output:
        output_json({
            "success": True,
            "command": "smooth",
            "data": {
                "window": window,
                "entries": [
                    {
                        "date": p.date.isoformat(),
                        "weight_kg": p.value,
                        "moving_average": p.moving_average,
                    }
                    for p in chart
                ],
            },
        })
        return

    if not chart:
        console.print("No weight entries found")
        return

    table = Table(title=f"Weight ({window}-point moving average)")
    table.add_column("Date", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Avg", justify="right", style="blue")

    for p in chart:
        avg = f"{p.moving_average:.1f}" if p.moving_average is not None else "-"
        table.add_row(p.date.isoformat(), f"{p.value:.1f}", avg)

    console.print(table)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the active settings."""
    settings = get_settings()
    analysis = settings.analysis
    display = settings.display
    json_output = use_json(json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "config show",
            "data": {
                "analysis": {
                    "plateau_threshold_per_day": analysis.plateau_threshold_per_day,
                    "plateau_min_days": analysis.plateau_min_days,
                    "moving_average_window": analysis.moving_average_window,
                    "min_points": analysis.min_points,
                    "prediction_horizon_days": analysis.prediction_horizon_days,
                },
                "display": {
                    "language": display.language,
                    "output_format": display.output_format,
                },
            },
        })
        return

    table = Table(title="Settings")
    table.add_column("Key", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("plateau_threshold_per_day", str(analysis.plateau_threshold_per_day))
    table.add_row("plateau_min_days", str(analysis.plateau_min_days))
    table.add_row("moving_average_window", str(analysis.moving_average_window))
    table.add_row("min_points", str(analysis.min_points))
    table.add_row("prediction_horizon_days", str(analysis.prediction_horizon_days))
    table.add_row("language", display.language)
    table.add_row("output_format", display.output_format)
    console.print(table)


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Config file to write"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default settings to a YAML file."""
    from bodytrend.config.settings import Settings, default_config_path

    target = path or default_config_path()
    if target.exists() and not force:
        console.print(f"[yellow]{target} already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    written = Settings().save(target)
    console.print(f"[green]Wrote default settings to[/green] {written}")


if __name__ == "__main__":
    app()
