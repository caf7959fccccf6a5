"""Display helpers shared by the API, exports and logs.

Amounts use the Indian numbering system: lakh = 1,00,000 and
crore = 1,00,00,000.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

CRORE = 10_000_000
LAKH = 100_000
CURRENCY_SYMBOL = "₹"
PLACEHOLDER = "—"

# Wide enough for any finite float.
_DECIMAL_CONTEXT = Context(prec=400)


def _round(value: float, places: int) -> str:
    # Half away from zero on the exact binary value, like Number.toFixed.
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(
        quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
    )
    return str(rounded)


def _group_indian(digits: str) -> str:
    """'1234567' -> '12,34,567'"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def _grouped(value: float, places: int) -> str:
    text = _round(value, places)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    whole, _, fraction = text.partition(".")
    grouped = _group_indian(whole)
    if fraction:
        grouped = f"{grouped}.{fraction}"
    if sign and grouped.strip("0,.") == "":
        sign = ""
    return sign + grouped


def format_currency(value: float) -> str:
    if not math.isfinite(value):
        return PLACEHOLDER
    if abs(value) >= CRORE:
        return f"{CURRENCY_SYMBOL} {_round(value / CRORE, 2)} Cr"
    if abs(value) >= LAKH:
        return f"{CURRENCY_SYMBOL} {_round(value / LAKH, 2)} L"
    return f"{CURRENCY_SYMBOL} {_grouped(value, 2)}"


def format_optional_currency(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return format_currency(value)


def format_number(value: float) -> str:
    if not math.isfinite(value):
        return PLACEHOLDER
    return _grouped(value, 0)


def format_percent(value: float, places: int = 1) -> str:
    if not math.isfinite(value):
        return "N/A"
    return f"{_round(value, places)}%"


def format_months(value: float) -> str:
    """Payback period for display; the +inf sentinel reads as 'Never'."""
    if not math.isfinite(value):
        return "Never"
    return f"{_round(value, 1)} months"
