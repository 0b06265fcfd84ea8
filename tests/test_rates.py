"""Tests for weekly rate, time to target and goal dates."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from bodytrend.progression.models import DatedPoint
from bodytrend.progression.rates import (
    format_duration,
    goal_date,
    time_to_target,
    weekly_rate,
)
from bodytrend.progression.series import dated_points


class TestWeeklyRate:
    """Tests for weekly_rate function."""

    def test_insufficient_data(self) -> None:
        assert weekly_rate([]) is None
        assert weekly_rate([DatedPoint("2026-01-01", 90)]) is None

    def test_weight_loss(self) -> None:
        """Weekly samples losing 1 kg per week."""
        points = dated_points([
            ("2026-01-01", 90),
            ("2026-01-08", 89),
            ("2026-01-15", 88),
            ("2026-01-22", 87),
        ])
        assert weekly_rate(points) == pytest.approx(-1)

    def test_weight_gain_fortnightly(self) -> None:
        """Two-weekly samples gaining 0.5 kg per week."""
        points = dated_points([
            ("2026-01-01", 80),
            ("2026-01-15", 81),
            ("2026-01-29", 82),
        ])
        assert weekly_rate(points) == pytest.approx(0.5)

    def test_rounded_to_two_decimals(self) -> None:
        """-1 kg over 3 days is -2.333... kg/week, shown as -2.33."""
        points = dated_points([("2026-01-01", 90), ("2026-01-04", 89)])
        assert weekly_rate(points) == pytest.approx(-2.33)

    def test_same_day_points(self) -> None:
        points = dated_points([("2026-01-01", 90), ("2026-01-01", 89)])
        assert weekly_rate(points) is None


class TestTimeToTarget:
    """Tests for time_to_target function."""

    def test_zero_rate(self) -> None:
        assert time_to_target(90, 80, 0) is None

    def test_gaining_when_need_to_lose(self) -> None:
        assert time_to_target(90, 80, 0.1) is None

    def test_losing_when_need_to_gain(self) -> None:
        assert time_to_target(70, 80, -0.1) is None

    def test_weight_loss(self) -> None:
        """90 -> 80 at -0.5/day is 20 days."""
        assert time_to_target(90, 80, -0.5) == 20

    def test_weight_gain(self) -> None:
        """70 -> 80 at +0.2/day is 50 days."""
        assert time_to_target(70, 80, 0.2) == 50

    def test_half_day_rounds_up(self) -> None:
        """2.5 days rounds to 3, not to the even 2."""
        assert time_to_target(0, 5, 2) == 3

    def test_already_at_target(self) -> None:
        assert time_to_target(80, 80, -0.1) == 0

    def test_returns_int(self) -> None:
        assert isinstance(time_to_target(90, 80, -0.3), int)


class TestGoalDate:
    """Tests for goal_date function."""

    def test_none_days(self) -> None:
        assert goal_date(None) is None
        assert goal_date(None, "2026-01-01") is None

    @pytest.mark.parametrize("days", [0, -5])
    def test_non_positive_days(self, days: int) -> None:
        assert goal_date(days, "2026-01-01") is None

    def test_from_iso_string(self) -> None:
        assert goal_date(20, "2026-01-01") == date(2026, 1, 21)

    def test_from_date(self) -> None:
        assert goal_date(59, date(2026, 1, 1)) == date(2026, 3, 1)

    def test_defaults_to_today(self) -> None:
        assert goal_date(10) == date.today() + timedelta(days=10)


class TestFormatDuration:
    """Tests for format_duration function."""

    @pytest.mark.parametrize("days", [None, 0, -3])
    def test_no_duration(self, days) -> None:
        assert format_duration(days) is None
        assert format_duration(days, "en") is None

    def test_days_bucket(self) -> None:
        assert format_duration(10, "en") == "~10 days"
        assert format_duration(13) == "~13 Tage"

    def test_weeks_bucket(self) -> None:
        assert format_duration(14, "en") == "~2 weeks"
        assert format_duration(56, "en") == "~8 weeks"
        assert format_duration(89, "de") == "~13 Wochen"

    def test_months_bucket(self) -> None:
        assert format_duration(90, "en") == "~3 months"
        assert format_duration(100) == "~3 Monate"

    def test_half_month_rounds_up(self) -> None:
        """105 / 30 = 3.5 months, shown as 4."""
        assert format_duration(105, "en") == "~4 months"

    def test_unknown_language_falls_back(self) -> None:
        assert format_duration(56, "fr") == "~8 Wochen"
