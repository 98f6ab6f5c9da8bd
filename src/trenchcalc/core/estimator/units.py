"""
Unit conversions and display rounding.

Rounding is half-up (2.5 -> 3) to match hand-calculated estimates, and is
only applied when a result record is built.
"""

import math

CF_PER_CY = 27


def to_ft(inches: float) -> float:
    """Convert inches to feet."""
    return inches / 12


def to_in(feet: float) -> float:
    """Convert feet to inches."""
    return feet * 12


def cf_to_cy(cf: float) -> float:
    """Convert cubic feet to cubic yards."""
    return cf / CF_PER_CY


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves rounded up."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def round1(value: float) -> float:
    """Round to 1 decimal (hours, areas, lengths)."""
    return round_half_up(value, 1)


def round2(value: float) -> float:
    """Round to 2 decimals (volumes, ratios, depths)."""
    return round_half_up(value, 2)
