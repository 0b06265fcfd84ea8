"""Output formatters for progression reports."""

from __future__ import annotations

from typing import Any, Optional

from bodytrend.progression.models import PlateauResult, RegressionResult
from bodytrend.progression.rates import DEFAULT_LANGUAGE, format_duration
from bodytrend.progression.summary import ProgressionReport, SeriesAnalysis


def _regression_dict(regression: Optional[RegressionResult]) -> Optional[dict[str, float]]:
    if regression is None:
        return None
    return {
        "slope_per_day": regression.slope,
        "intercept": regression.intercept,
        "r_squared": regression.r_squared,
    }


def plateau_to_dict(plateau: PlateauResult) -> dict[str, Any]:
    """Convert a plateau result to a JSON-friendly dict."""
    return {
        "is_plateau": plateau.is_plateau,
        "duration_days": plateau.duration_days,
        "average_value": plateau.average_value,
    }


def _series_dict(series: SeriesAnalysis) -> dict[str, Any]:
    return {
        "regression": _regression_dict(series.regression),
        "prediction": series.prediction,
        "weekly_rate": series.weekly_rate,
        "plateau": plateau_to_dict(series.plateau),
        "time_to_target_days": series.time_to_target,
        "goal_date": series.goal_date.isoformat() if series.goal_date else None,
        "chart": [
            {
                "date": p.date.isoformat(),
                "value": p.value,
                "moving_average": p.moving_average,
            }
            for p in series.chart
        ],
    }


def report_to_dict(report: ProgressionReport) -> dict[str, Any]:
    """Convert a progression report to a JSON-serialisable dict."""
    return {
        "weight": _series_dict(report.weight),
        "body_fat": _series_dict(report.body_fat),
        "target_weight": report.target_weight,
        "target_body_fat": report.target_body_fat,
        "prediction_horizon_days": report.prediction_horizon_days,
    }


def _goal_lines(series: SeriesAnalysis, target: Optional[float], unit: str, language: str) -> list[str]:
    if not target:
        return []
    if series.time_to_target is None:
        return [f"  Goal {target:.1f} {unit}: not reachable at current trend"]
    if series.time_to_target == 0:
        return [f"  Goal {target:.1f} {unit}: reached"]
    duration = format_duration(series.time_to_target, language)
    line = f"  Goal {target:.1f} {unit}: {duration}"
    if series.goal_date is not None:
        line += f" ({series.goal_date.isoformat()})"
    return [line]


def _series_lines(
    title: str,
    series: SeriesAnalysis,
    unit: str,
    horizon_days: int,
    target: Optional[float],
    language: str,
) -> list[str]:
    lines = [title, "-" * 45]

    if series.regression is None:
        lines.append("  Not enough data for trend analysis")
        return lines

    latest = series.chart[-1]
    lines.append(f"  Latest:        {latest.value:.1f} {unit} ({latest.date.isoformat()})")
    if latest.moving_average is not None:
        lines.append(f"  Moving avg:    {latest.moving_average:.1f} {unit}")
    lines.append(
        f"  Trend:         {series.regression.slope:+.3f} {unit}/day "
        f"(R² {series.regression.r_squared:.2f})"
    )
    if series.weekly_rate is not None:
        lines.append(f"  Weekly rate:   {series.weekly_rate:+.2f} {unit}/week")
    if series.prediction is not None:
        lines.append(f"  In {horizon_days} days:    {series.prediction:.1f} {unit}")
    if series.plateau.is_plateau:
        lines.append(
            f"  Plateau:       {series.plateau.duration_days} days "
            f"around {series.plateau.average_value:.1f} {unit}"
        )
    lines.extend(_goal_lines(series, target, unit, language))
    return lines


def format_progression_report(report: ProgressionReport, language: str = DEFAULT_LANGUAGE) -> str:
    """Format a progression report as text."""
    parts = [
        "Progression Report",
        "=" * 45,
    ]
    parts.extend(
        _series_lines(
            "Weight",
            report.weight,
            "kg",
            report.prediction_horizon_days,
            report.target_weight,
            language,
        )
    )
    parts.append("")
    parts.extend(
        _series_lines(
            "Body fat",
            report.body_fat,
            "%",
            report.prediction_horizon_days,
            report.target_body_fat,
            language,
        )
    )
    return "\n".join(parts)
