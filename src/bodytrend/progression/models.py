"""Value objects for progression analysis."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from bodytrend.progression.dates import to_date


@dataclass(frozen=True)
class Point:
    """Regression input: x is a day offset, y a measured value."""

    x: float
    y: float


@dataclass(frozen=True)
class DatedPoint:
    """A single measurement on a calendar date.

    ``date`` may be given as a ``date``, ``datetime`` or ISO string; it is
    stored as a ``date``.
    """

    date: date
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", to_date(self.date))
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class RegressionResult:
    """Ordinary least squares fit of y on x."""

    slope: float  # change in y per unit x (per day for dated series)
    intercept: float
    r_squared: float


@dataclass(frozen=True)
class PlateauResult:
    """Trailing flat region of a series, if any."""

    is_plateau: bool
    duration_days: int
    average_value: float


NO_PLATEAU = PlateauResult(is_plateau=False, duration_days=0, average_value=0.0)


@dataclass(frozen=True)
class BodyMeasurement:
    """One day of body measurements; either value may be missing."""

    date: date
    weight_kg: Optional[float] = None
    body_fat_pct: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", to_date(self.date))
        if self.weight_kg is not None:
            object.__setattr__(self, "weight_kg", float(self.weight_kg))
        if self.body_fat_pct is not None:
            object.__setattr__(self, "body_fat_pct", float(self.body_fat_pct))
