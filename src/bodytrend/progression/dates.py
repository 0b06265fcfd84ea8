"""Calendar-date coercion and day-offset arithmetic."""

from __future__ import annotations

from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, str]


def to_date(value: DateLike) -> date:
    """
    Coerce a date-like value to a calendar date.

    Accepts ``datetime.date``, ``datetime.datetime`` (the time part is
    dropped) and ISO-8601 strings such as ``"2026-01-15"`` or
    ``"2026-01-15T07:30:00"``.

    Raises:
        ValueError: If the value does not describe a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            raise ValueError(f"Not a valid calendar date: {value!r}") from None
    raise ValueError(f"Expected a date or ISO date string, got {type(value).__name__}")


def day_offset(day: date, origin: date) -> float:
    """Whole days elapsed from ``origin`` to ``day`` (negative if before)."""
    return float((day - origin).days)
