"""
Display formatting helpers shared by the view-model builders and the page template.
"""

from __future__ import annotations

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional, Union

UNKNOWN_DATE = "Unknown date"

# Fixed English abbreviations so output never depends on the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_ONE_DECIMAL = Decimal("0.1")


# -----------------------------
# Numbers
# -----------------------------
def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        return Decimal(0)
    try:
        d = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(0)
    if not d.is_finite():
        return Decimal(0)
    return d


def format_number(value: Any) -> str:
    """
    999 -> "999", 1500 -> "1.5K", 2_300_000 -> "2.3M".
    Non-numeric input is treated as 0.
    """
    d = _to_decimal(value)
    if d >= 1_000_000:
        return f"{(d / 1_000_000).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)}M"
    if d >= 1_000:
        return f"{(d / 1_000).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)}K"
    return str(int(d))


def percentage(part: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return float((Decimal(str(part)) * 100 / Decimal(str(total))).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


# -----------------------------
# Dates
# -----------------------------
def parse_timestamp(value: Union[str, dt.datetime, None]) -> Optional[dt.datetime]:
    if isinstance(value, dt.datetime):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(value: Union[str, dt.datetime, None]) -> str:
    """Render a timestamp as "Jan 5, 2024"; anything unparseable yields "Unknown date"."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return UNKNOWN_DATE
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"
