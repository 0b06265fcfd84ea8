"""Ordinary least squares linear regression over (x, y) points.

The fit uses the closed-form normal equations:

    slope     = (n·Σxy − Σx·Σy) / (n·Σx² − (Σx)²)
    intercept = (Σy − slope·Σx) / n

R² is 1 − SS_res / SS_tot. A constant series (SS_tot = 0) is a perfect fit
and gets R² = 1 rather than a division by zero.
"""

from __future__ import annotations

from typing import Optional, Sequence

from loguru import logger

from bodytrend.progression.models import Point, RegressionResult


def fit_linear(points: Sequence[Point]) -> Optional[RegressionResult]:
    """
    Fit a straight line to the points by ordinary least squares.

    Args:
        points: Regression input; duplicate x values are allowed

    Returns:
        Slope, intercept and R², or None when there are fewer than two
        points or every x is identical (vertical line, no unique fit)

    Example:
        >>> fit = fit_linear([Point(0, 1), Point(1, 3), Point(2, 5)])
        >>> fit.slope, fit.intercept, fit.r_squared
        (2.0, 1.0, 1.0)
    """
    n = len(points)
    if n < 2:
        return None

    sum_x = sum_y = sum_xy = sum_x2 = 0.0
    for p in points:
        sum_x += p.x
        sum_y += p.y
        sum_xy += p.x * p.y
        sum_x2 += p.x * p.x

    denom = n * sum_x2 - sum_x * sum_x
    if denom == 0:
        logger.debug("Degenerate fit: all {} points share x={}", n, points[0].x)
        return None

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n

    ss_res = sum((p.y - (slope * p.x + intercept)) ** 2 for p in points)
    mean_y = sum_y / n
    ss_tot = sum((p.y - mean_y) ** 2 for p in points)
    r_squared = 1.0 if ss_tot == 0 else 1 - ss_res / ss_tot

    return RegressionResult(slope=slope, intercept=intercept, r_squared=r_squared)


def predict(regression: RegressionResult, x: float) -> float:
    """Value of the fitted line at ``x``."""
    return regression.slope * x + regression.intercept
