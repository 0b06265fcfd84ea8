"""Progression analysis for body measurements.

Pure functions over in-memory series of (date, value) measurements:

- OLS regression and prediction
- Simple moving average
- Trailing plateau detection
- Weekly rate, time to target and goal dates
- Day-offset conversion between calendar dates and regression input
"""

from __future__ import annotations

from bodytrend.progression.models import (
    NO_PLATEAU,
    BodyMeasurement,
    DatedPoint,
    PlateauResult,
    Point,
    RegressionResult,
)
from bodytrend.progression.plateau import detect_plateau
from bodytrend.progression.rates import (
    format_duration,
    goal_date,
    time_to_target,
    weekly_rate,
)
from bodytrend.progression.regression import fit_linear, predict
from bodytrend.progression.series import dated_points, to_numeric_points
from bodytrend.progression.smoothing import moving_average
from bodytrend.progression.summary import ProgressionReport, compute_progression

__all__ = [
    "NO_PLATEAU",
    "BodyMeasurement",
    "DatedPoint",
    "PlateauResult",
    "Point",
    "ProgressionReport",
    "RegressionResult",
    "compute_progression",
    "dated_points",
    "detect_plateau",
    "fit_linear",
    "format_duration",
    "goal_date",
    "moving_average",
    "predict",
    "time_to_target",
    "to_numeric_points",
    "weekly_rate",
]
