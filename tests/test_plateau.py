"""Tests for trailing plateau detection."""

from __future__ import annotations

from datetime import date

import pytest
from conftest import daily_points

from bodytrend.progression.models import NO_PLATEAU, DatedPoint
from bodytrend.progression.plateau import detect_plateau


class TestDetectPlateau:
    """Tests for detect_plateau function."""

    def test_insufficient_data(self) -> None:
        """Fewer than three points never form a plateau."""
        points = [DatedPoint("2026-01-01", 90), DatedPoint("2026-01-02", 89)]
        assert detect_plateau(points) == NO_PLATEAU
        assert detect_plateau([]) == NO_PLATEAU

    def test_flat_series(self, flat_series) -> None:
        """Near-constant values over 19 days are one long plateau."""
        result = detect_plateau(flat_series, 0.02, 14)

        assert result.is_plateau is True
        assert result.duration_days == 19
        assert result.average_value == pytest.approx(85)

    def test_declining_series(self, declining_series) -> None:
        """A steady decline is not a plateau."""
        result = detect_plateau(declining_series, 0.02, 14)

        assert result.is_plateau is False
        assert result == NO_PLATEAU

    def test_stall_after_loss(self, stalled_series) -> None:
        """The flat run starts after the last window with significant slope."""
        result = detect_plateau(stalled_series)

        # Boundary window starts at day 7; plateau covers days 8..29
        assert result.is_plateau is True
        assert result.duration_days == 21
        assert result.average_value == pytest.approx(85.1)

    def test_flat_but_too_short(self) -> None:
        """Ten flat days do not meet the default 14-day minimum."""
        points = daily_points([85.0] * 10)
        assert detect_plateau(points) == NO_PLATEAU

    def test_custom_min_days(self) -> None:
        points = daily_points([85.0] * 10)
        result = detect_plateau(points, min_days=7)

        assert result.is_plateau is True
        assert result.duration_days == 9
        assert result.average_value == 85.0

    def test_looser_threshold_accepts_slow_decline(self, declining_series) -> None:
        """With a threshold above the slope the whole series counts as flat."""
        result = detect_plateau(declining_series, threshold_per_day=0.5)

        assert result.is_plateau is True
        assert result.duration_days == 19

    def test_same_day_points(self) -> None:
        """Points sharing one date cannot be fitted and give no plateau."""
        points = [DatedPoint(date(2026, 1, 1), v) for v in (85.0, 85.2, 84.9)]
        assert detect_plateau(points) == NO_PLATEAU

    def test_sparse_weekly_plateau(self) -> None:
        """Weekly weigh-ins that stall for four weeks."""
        points = [
            DatedPoint("2026-01-01", 92.0),
            DatedPoint("2026-01-08", 90.5),
            DatedPoint("2026-01-15", 89.5),
            DatedPoint("2026-01-22", 88.4),
            DatedPoint("2026-01-29", 88.6),
            DatedPoint("2026-02-05", 88.4),
            DatedPoint("2026-02-12", 88.6),
        ]
        result = detect_plateau(points)

        assert result.is_plateau is True
        assert result.duration_days == 21
        assert result.average_value == pytest.approx(88.5)

    def test_repeatable(self, stalled_series) -> None:
        assert detect_plateau(stalled_series) == detect_plateau(stalled_series)
