"""Rounding helpers for plan arithmetic.

Plan distances and paces round half away from zero on positive values
(2.5 -> 3), never banker's rounding.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round a value to the nearest integer, ties going up.

    Args:
        value: Value to round

    Returns:
        Rounded integer (e.g. 2.5 -> 3, 7.5 -> 8, -0.5 -> 0)
    """
    return math.floor(value + 0.5)


def round_half_up_to(value: float, digits: int) -> float:
    """Round to a number of decimals, ties going up (20.25 -> 20.3)."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale
