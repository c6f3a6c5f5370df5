"""Rounding rules shared by the engine and the display boundary.

Both helpers round halves up (away from zero for the positive values the
engine works with), matching the behaviour of JavaScript's Math.round.
Python's built-in round() uses banker's rounding and is not used here.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def round_display(value: float, decimals: int = 1) -> float:
    """Round a length for display, e.g. 33.866 -> 33.9 with one decimal."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor
