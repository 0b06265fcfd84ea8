"""Conversion between dated measurements and regression-ready points.

This is the one place where calendar time becomes the numeric x axis used by
the regression engine: x is the number of whole days since the first point.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from bodytrend.progression.dates import DateLike, day_offset
from bodytrend.progression.models import DatedPoint, Point


def to_numeric_points(points: Sequence[DatedPoint]) -> list[Point]:
    """
    Convert dated points to day-offset points.

    Args:
        points: Measurements; the first one defines day 0

    Returns:
        One ``Point`` per input with x = days since the first date and
        y = the measured value. Empty input gives an empty list.

    Example:
        >>> pts = dated_points([("2026-01-01", 90), ("2026-01-08", 89)])
        >>> [p.x for p in to_numeric_points(pts)]
        [0.0, 7.0]
    """
    if not points:
        return []
    origin = points[0].date
    return [Point(x=day_offset(p.date, origin), y=p.value) for p in points]


def dated_points(pairs: Iterable[tuple[DateLike, float]]) -> list[DatedPoint]:
    """Build ``DatedPoint`` objects from ``(date, value)`` tuples."""
    return [DatedPoint(date=d, value=v) for d, v in pairs]
