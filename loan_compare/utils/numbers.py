"""Numeric coercion and rounding utilities"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any


def coerce_number(value: Any) -> float:
    """Convert a possibly missing or malformed value to a finite float (0 otherwise)"""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_percentage(value: Any) -> float:
    """Parse a fee such as "2.5%" into 2.5; malformed values become 0"""
    if isinstance(value, str):
        return coerce_number(value.strip().rstrip("%").strip())
    return coerce_number(value)


def round_half_up(value: float, places: int) -> float:
    """Round to a fixed number of decimals with halves going up, e.g. 4.125 -> 4.13"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def ratio(numerator: float, denominator: float) -> float:
    """Divide, treating a zero denominator as no contribution"""
    return numerator / denominator if denominator else 0.0
