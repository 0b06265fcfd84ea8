"""Plateau detection on the most recent part of a dated series.

A plateau is a trailing run of measurements whose least-squares slope stays
within a small per-day threshold for at least a minimum number of days.

The search starts from a window of the last three points and grows it one
point at a time towards the start of the series, refitting each time. The
first window whose slope exceeds the threshold marks the boundary: the
plateau candidate is everything after that window's first point. If the
whole series is flat, the whole series is the candidate.
"""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from bodytrend.progression.models import NO_PLATEAU, DatedPoint, PlateauResult, Point
from bodytrend.progression.regression import fit_linear
from bodytrend.progression.rounding import round_days, round_half_up
from bodytrend.progression.series import to_numeric_points

# kg (or %) per day; 0.02 kg/day is 0.14 kg/week
DEFAULT_THRESHOLD_PER_DAY = 0.02
DEFAULT_MIN_DAYS = 14

# Smallest window that gets a regression fit
MIN_WINDOW = 3


def _span_days(points: Sequence[Point]) -> float:
    return points[-1].x - points[0].x


def _plateau_over(points: Sequence[Point], span: float) -> PlateauResult:
    average = sum(p.y for p in points) / len(points)
    return PlateauResult(
        is_plateau=True,
        duration_days=round_days(span),
        average_value=round_half_up(average, 1),
    )


def detect_plateau(
    points: Sequence[DatedPoint],
    threshold_per_day: float = DEFAULT_THRESHOLD_PER_DAY,
    min_days: int = DEFAULT_MIN_DAYS,
) -> PlateauResult:
    """
    Find the longest trailing flat run of a series.

    Args:
        points: Measurements in non-decreasing date order
        threshold_per_day: Largest absolute slope (units/day) still
            considered flat
        min_days: Minimum calendar span of the flat run

    Returns:
        PlateauResult with the run's span in whole days and its mean value
        rounded to one decimal, or ``NO_PLATEAU``
    """
    if len(points) < MIN_WINDOW:
        return NO_PLATEAU

    numeric = to_numeric_points(points)

    for window_start in range(len(numeric) - MIN_WINDOW, -1, -1):
        window = numeric[window_start:]
        regression = fit_linear(window)
        if regression is None:
            continue

        if abs(regression.slope) > threshold_per_day:
            # Plateau can only start after this window's first point
            plateau_points = numeric[window_start + 1 :]
            if len(plateau_points) < 2:
                break
            span = _span_days(plateau_points)
            if span >= min_days:
                logger.debug(
                    "Plateau after day {}: slope {:.4f}/day exceeded threshold {}",
                    numeric[window_start].x,
                    regression.slope,
                    threshold_per_day,
                )
                return _plateau_over(plateau_points, span)
            logger.debug("Flat run of {} days is shorter than {} days", span, min_days)
            break

        span = _span_days(window)
        if window_start == 0 and span >= min_days:
            logger.debug("Entire {}-day series is flat", span)
            return _plateau_over(window, span)

    return NO_PLATEAU
