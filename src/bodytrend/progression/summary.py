"""Combined progression analysis for weight and body-fat series."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from loguru import logger

from bodytrend.config.settings import AnalysisConfig
from bodytrend.progression.models import (
    NO_PLATEAU,
    BodyMeasurement,
    DatedPoint,
    PlateauResult,
    RegressionResult,
)
from bodytrend.progression.plateau import detect_plateau
from bodytrend.progression.rates import goal_date, time_to_target, weekly_rate
from bodytrend.progression.regression import fit_linear, predict
from bodytrend.progression.rounding import round_half_up
from bodytrend.progression.series import to_numeric_points
from bodytrend.progression.smoothing import moving_average


@dataclass
class ChartPoint:
    """A measured value with its moving average, for trend charts."""

    date: date
    value: float
    moving_average: Optional[float]


@dataclass
class SeriesAnalysis:
    """Trend analysis of a single measurement series."""

    regression: Optional[RegressionResult] = None
    prediction: Optional[float] = None  # value at horizon past the last point
    weekly_rate: Optional[float] = None
    plateau: PlateauResult = NO_PLATEAU
    time_to_target: Optional[int] = None  # days
    goal_date: Optional[date] = None
    chart: list[ChartPoint] = field(default_factory=list)


@dataclass
class ProgressionReport:
    """Weight and body-fat progression with goal projections."""

    weight: SeriesAnalysis
    body_fat: SeriesAnalysis
    target_weight: Optional[float]
    target_body_fat: Optional[float]
    prediction_horizon_days: int


def weight_points(measurements: Sequence[BodyMeasurement]) -> list[DatedPoint]:
    """Dated weight values, skipping rows without a weight."""
    return [DatedPoint(m.date, m.weight_kg) for m in measurements if m.weight_kg is not None]


def body_fat_points(measurements: Sequence[BodyMeasurement]) -> list[DatedPoint]:
    """Dated body-fat values, skipping rows without a body-fat reading."""
    return [
        DatedPoint(m.date, m.body_fat_pct) for m in measurements if m.body_fat_pct is not None
    ]


def chart_series(points: Sequence[DatedPoint], window: int) -> list[ChartPoint]:
    """Pair each point with its moving average rounded to one decimal."""
    averages = moving_average([p.value for p in points], window)
    return [
        ChartPoint(
            date=p.date,
            value=p.value,
            moving_average=None if avg is None else round_half_up(avg, 1),
        )
        for p, avg in zip(points, averages)
    ]


def _analyze_series(
    points: Sequence[DatedPoint],
    target: Optional[float],
    config: AnalysisConfig,
    include_rate: bool,
    today: Optional[date],
) -> SeriesAnalysis:
    analysis = SeriesAnalysis(chart=chart_series(points, config.moving_average_window))

    if len(points) < config.min_points:
        logger.debug("Skipping trend: {} points, need {}", len(points), config.min_points)
        return analysis

    numeric = to_numeric_points(points)
    analysis.regression = fit_linear(numeric)
    if analysis.regression is not None:
        horizon_x = numeric[-1].x + config.prediction_horizon_days
        analysis.prediction = round_half_up(predict(analysis.regression, horizon_x), 1)

    if include_rate:
        analysis.weekly_rate = weekly_rate(points)
        analysis.plateau = detect_plateau(
            points,
            threshold_per_day=config.plateau_threshold_per_day,
            min_days=config.plateau_min_days,
        )

    if target and analysis.regression is not None:
        analysis.time_to_target = time_to_target(
            points[-1].value, target, analysis.regression.slope
        )
        analysis.goal_date = goal_date(analysis.time_to_target, today)

    return analysis


def compute_progression(
    measurements: Sequence[BodyMeasurement],
    target_weight: Optional[float] = None,
    target_body_fat: Optional[float] = None,
    config: Optional[AnalysisConfig] = None,
    today: Optional[date] = None,
) -> Optional[ProgressionReport]:
    """
    Analyse weight and body-fat trends and project goal dates.

    Weight gets regression, prediction, weekly rate, plateau detection and a
    goal projection; body fat gets regression, prediction and a goal
    projection. Each series needs at least ``config.min_points`` values to be
    analysed; its chart data is returned either way.

    Args:
        measurements: Rows in non-decreasing date order
        target_weight: Goal weight in kg (unset or zero disables projection)
        target_body_fat: Goal body fat in % (unset or zero disables projection)
        config: Analysis thresholds, defaults if None
        today: Reference date for goal dates, defaults to the current date

    Returns:
        ProgressionReport, or None if there are fewer than ``min_points`` rows
    """
    if config is None:
        config = AnalysisConfig()

    if len(measurements) < config.min_points:
        logger.debug("Not enough measurements: {} < {}", len(measurements), config.min_points)
        return None

    weight = _analyze_series(
        weight_points(measurements), target_weight, config, include_rate=True, today=today
    )
    body_fat = _analyze_series(
        body_fat_points(measurements), target_body_fat, config, include_rate=False, today=today
    )

    return ProgressionReport(
        weight=weight,
        body_fat=body_fat,
        target_weight=target_weight,
        target_body_fat=target_body_fat,
        prediction_horizon_days=config.prediction_horizon_days,
    )
