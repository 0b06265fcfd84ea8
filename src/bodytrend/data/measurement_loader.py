"""Load body measurements from CSV files."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from loguru import logger

from bodytrend.progression.models import BodyMeasurement


class MeasurementLoader:
    """Reads a measurement CSV into chronologically sorted rows.

    CSV format:
        date,weight_kg,body_fat_pct
        2026-01-01,90.2,24.1
        2026-01-03,89.8,
    """

    REQUIRED_COLUMNS = ["date"]
    VALUE_COLUMNS = ["weight_kg", "body_fat_pct"]

    def load_from_csv(self, csv_path: Path) -> list[BodyMeasurement]:
        """Load measurements from a CSV file.

        Args:
            csv_path: Path to the CSV file

        Returns:
            Measurements sorted by date; rows without any value are dropped

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If required columns are missing or a date is invalid
        """
        if not csv_path.exists():
            raise FileNotFoundError(f"Measurement file not found: {csv_path}")

        df = pd.read_csv(csv_path)

        missing = set(self.REQUIRED_COLUMNS) - set(df.columns)
        if missing:
            raise ValueError(
                f"Missing required columns: {sorted(missing)}. "
                f"Required columns are: {self.REQUIRED_COLUMNS}"
            )
        value_columns = [c for c in self.VALUE_COLUMNS if c in df.columns]
        if not value_columns:
            raise ValueError(f"CSV needs at least one of the columns {self.VALUE_COLUMNS}")

        measurements: list[BodyMeasurement] = []
        skipped = 0
        for _, row in df.iterrows():
            weight = self._optional_float(row, "weight_kg")
            body_fat = self._optional_float(row, "body_fat_pct")
            if weight is None and body_fat is None:
                skipped += 1
                continue
            measurements.append(
                BodyMeasurement(date=str(row["date"]), weight_kg=weight, body_fat_pct=body_fat)
            )

        measurements.sort(key=lambda m: m.date)
        logger.debug(
            "Loaded {} measurements from {} ({} empty rows skipped)",
            len(measurements),
            csv_path,
            skipped,
        )
        return measurements

    @staticmethod
    def _optional_float(row: pd.Series, column: str) -> float | None:
        if column not in row.index:
            return None
        value = row[column]
        if pd.isna(value):
            return None
        return float(value)


def load_measurements(csv_path: Path) -> list[BodyMeasurement]:
    """Load measurements from ``csv_path`` sorted by date."""
    return MeasurementLoader().load_from_csv(Path(csv_path))
