"""Half-up rounding for values shown to users.

Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``).
Displayed health figures round halves up instead, towards positive infinity,
so ``2.5 -> 3`` and ``-2.5 -> -2``.
"""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round ``value`` to ``ndigits`` decimals, halves towards +infinity.

    Example:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-0.125, 2)
        -0.12
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_days(value: float) -> int:
    """Round a day count to a whole number of days."""
    return int(round_half_up(value))
