"""Numeric guards shared by the engine stages."""

from __future__ import annotations

import math
from typing import Any, Optional


def finite_float(value: Any) -> Optional[float]:
    """``value`` as a finite float, or None.

    Bools, non-numbers, NaN, infinities and ints too large for a float all
    give None.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


def sanitize(value: Any) -> float:
    """Return ``value`` as a float if it is a finite number, else 0.0.

    Cleared form fields arrive as NaN; the stored input is left untouched.
    """
    result = finite_float(value)
    return 0.0 if result is None else result


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or +inf when the denominator is not positive."""
    if denominator > 0:
        return numerator / denominator
    return math.inf
