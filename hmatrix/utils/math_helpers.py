"""Math helpers: rounding and number formatting. No engine imports."""

from __future__ import annotations

import math


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties towards +inf (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(x + 0.5)


def round_decimals(value: float, decimals: int = 2) -> float:
    """Round half up to ``decimals`` places: 0.125 -> 0.13."""
    scale = 10**decimals
    return round_half_up(scale * value) / scale


def format_number(value: float) -> str:
    """Shortest round-trip text for a number; integral values lose the ".0".

    3.0 -> "3", 0.5 -> "0.5", -0.0 -> "0".
    """
    if math.isfinite(value) and value == int(value) and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))
