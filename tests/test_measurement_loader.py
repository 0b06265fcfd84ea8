"""Tests for loading measurement CSV files."""

from __future__ import annotations

from datetime import date

import pytest

from bodytrend.data import load_measurements


def write_csv(tmp_path, content: str):
    path = tmp_path / "measurements.csv"
    path.write_text(content)
    return path


class TestLoadMeasurements:
    """Tests for load_measurements function."""

    def test_loads_and_sorts(self, tmp_path) -> None:
        path = write_csv(
            tmp_path,
            "date,weight_kg,body_fat_pct\n"
            "2026-01-08,89.5,24.0\n"
            "2026-01-01,90.2,24.5\n"
            "2026-01-03,89.9,\n",
        )
        rows = load_measurements(path)

        assert [r.date for r in rows] == [
            date(2026, 1, 1),
            date(2026, 1, 3),
            date(2026, 1, 8),
        ]
        assert rows[0].weight_kg == pytest.approx(90.2)
        assert rows[1].body_fat_pct is None
        assert rows[2].body_fat_pct == pytest.approx(24.0)

    def test_weight_only(self, tmp_path) -> None:
        path = write_csv(tmp_path, "date,weight_kg\n2026-01-01,90\n2026-01-02,89.8\n")
        rows = load_measurements(path)

        assert len(rows) == 2
        assert all(r.body_fat_pct is None for r in rows)

    def test_skips_empty_rows(self, tmp_path) -> None:
        path = write_csv(
            tmp_path,
            "date,weight_kg,body_fat_pct\n2026-01-01,90,\n2026-01-02,,\n2026-01-03,,23.9\n",
        )
        rows = load_measurements(path)

        assert [r.date.day for r in rows] == [1, 3]

    def test_missing_date_column(self, tmp_path) -> None:
        path = write_csv(tmp_path, "day,weight_kg\n2026-01-01,90\n")
        with pytest.raises(ValueError, match="Missing required columns"):
            load_measurements(path)

    def test_missing_value_columns(self, tmp_path) -> None:
        path = write_csv(tmp_path, "date,steps\n2026-01-01,9000\n")
        with pytest.raises(ValueError, match="at least one"):
            load_measurements(path)

    def test_invalid_date(self, tmp_path) -> None:
        path = write_csv(tmp_path, "date,weight_kg\nnot-a-date,90\n")
        with pytest.raises(ValueError):
            load_measurements(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_measurements(tmp_path / "nope.csv")
