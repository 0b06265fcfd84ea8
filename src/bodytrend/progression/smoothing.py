"""Simple moving average for chart smoothing."""

from __future__ import annotations

from typing import Optional, Sequence

# One week of daily measurements
DEFAULT_WINDOW = 7


def moving_average(values: Sequence[float], window: int = DEFAULT_WINDOW) -> list[Optional[float]]:
    """
    Trailing simple moving average.

    Positions before the first full window are None; there is no
    partial-window averaging at the start of a series. A window below 1
    yields all None instead of raising.

    Args:
        values: Measurements in chronological order
        window: Number of values per average

    Returns:
        List the same length as ``values``

    Example:
        >>> moving_average([1, 2, 3, 4, 5], 3)
        [None, None, 2.0, 3.0, 4.0]
    """
    if window < 1:
        return [None] * len(values)

    averages: list[Optional[float]] = []
    for i in range(len(values)):
        if i < window - 1:
            averages.append(None)
            continue
        total = 0.0
        for j in range(i - window + 1, i + 1):
            total += values[j]
        averages.append(total / window)
    return averages
