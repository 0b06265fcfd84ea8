"""Rate of change and goal projections."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Sequence

from bodytrend.progression.dates import DateLike, to_date
from bodytrend.progression.models import DatedPoint
from bodytrend.progression.regression import fit_linear
from bodytrend.progression.rounding import round_days, round_half_up
from bodytrend.progression.series import to_numeric_points

DEFAULT_LANGUAGE = "de"

# Unit labels per language: (days, weeks, months)
DURATION_UNITS = {
    "de": ("Tage", "Wochen", "Monate"),
    "en": ("days", "weeks", "months"),
}

WEEKS_THRESHOLD_DAYS = 14
MONTHS_THRESHOLD_DAYS = 90


def weekly_rate(points: Sequence[DatedPoint]) -> Optional[float]:
    """
    Trend-line rate of change per week.

    Args:
        points: Measurements in non-decreasing date order

    Returns:
        Regression slope × 7 rounded to 2 decimals (negative = decreasing),
        or None with fewer than two points or a degenerate fit
    """
    if len(points) < 2:
        return None

    regression = fit_linear(to_numeric_points(points))
    if regression is None:
        return None

    return round_half_up(regression.slope * 7, 2)


def time_to_target(current: float, target: float, daily_rate: float) -> Optional[int]:
    """
    Days until ``target`` is reached at ``daily_rate``.

    Returns None when the rate is zero or points away from the target;
    a trend moving away from a goal is never projected as reaching it.

    Example:
        >>> time_to_target(90, 80, -0.5)
        20
        >>> time_to_target(90, 80, 0.1) is None
        True
    """
    if daily_rate == 0:
        return None

    diff = target - current
    if (diff > 0 and daily_rate <= 0) or (diff < 0 and daily_rate >= 0):
        return None

    return round_days(abs(diff / daily_rate))


def goal_date(days: Optional[int], from_date: Optional[DateLike] = None) -> Optional[date]:
    """
    Calendar date ``days`` after ``from_date`` (default: today).

    Returns None when ``days`` is None or not positive.
    """
    if days is None or days <= 0:
        return None
    base = to_date(from_date) if from_date is not None else date.today()
    return base + timedelta(days=days)


def format_duration(days: Optional[int], language: str = DEFAULT_LANGUAGE) -> Optional[str]:
    """
    Short approximate duration label.

    Under 14 days the label is in days, under 90 days in weeks
    (``round(days / 7)``), otherwise in months (``round(days / 30)``).
    Unknown languages fall back to German.

    Example:
        >>> format_duration(56, "en")
        '~8 weeks'
        >>> format_duration(100)
        '~3 Monate'
    """
    if days is None or days <= 0:
        return None
    day_unit, week_unit, month_unit = DURATION_UNITS.get(
        language, DURATION_UNITS[DEFAULT_LANGUAGE]
    )

    if days < WEEKS_THRESHOLD_DAYS:
        return f"~{days} {day_unit}"
    if days < MONTHS_THRESHOLD_DAYS:
        return f"~{round_days(days / 7)} {week_unit}"
    return f"~{round_days(days / 30)} {month_unit}"
