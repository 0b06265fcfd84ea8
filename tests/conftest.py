"""Pytest fixtures for bodytrend tests."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from bodytrend.config import settings as settings_module
from bodytrend.config.settings import Settings
from bodytrend.progression.models import BodyMeasurement, DatedPoint

START = date(2026, 1, 1)


def daily_points(values: list[float], start: date = START) -> list[DatedPoint]:
    """One point per day starting at ``start``."""
    return [DatedPoint(start + timedelta(days=i), v) for i, v in enumerate(values)]


@pytest.fixture
def flat_series() -> list[DatedPoint]:
    """20 daily weights alternating 85.01 / 84.99."""
    return daily_points([85 + (0.01 if i % 2 == 0 else -0.01) for i in range(20)])


@pytest.fixture
def declining_series() -> list[DatedPoint]:
    """20 daily weights losing 0.3 per day."""
    return daily_points([90 - i * 0.3 for i in range(20)])


@pytest.fixture
def stalled_series() -> list[DatedPoint]:
    """10 days losing 0.5/day from 90, then 20 days flat at 85."""
    losing = [90 - 0.5 * i for i in range(10)]
    return daily_points(losing + [85.0] * 20)


@pytest.fixture
def body_measurements() -> list[BodyMeasurement]:
    """30 days of weight (-0.1 kg/day from 90); body fat every other day (-0.02 %/day from 25)."""
    rows = []
    for i in range(30):
        rows.append(
            BodyMeasurement(
                date=START + timedelta(days=i),
                weight_kg=90 - 0.1 * i,
                body_fat_pct=25 - 0.02 * i if i % 2 == 0 else None,
            )
        )
    return rows


@pytest.fixture
def default_settings(monkeypatch) -> Settings:
    """Use default settings instead of the user's config file."""
    settings = Settings()
    monkeypatch.setattr(settings_module, "_settings", settings)
    return settings
