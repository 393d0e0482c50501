"""Display formatting for calculator results.

Rounding lives here, not in the calculators: currency to cents, discount
rates as percentages, discounted weeks to six places.
"""
from __future__ import annotations

import math
import re
from typing import Optional

from app.models.commuted import CommutedValueDisplay, CommutedValueResult

_NON_NUMERIC = re.compile(r"[^0-9.\-]+")


def format_currency(value: Optional[float]) -> str:
    """US dollars with two decimals ("$1,234.50"); empty for None/NaN."""
    if value is None or math.isnan(value):
        return ""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def parse_currency(value: Optional[str]) -> Optional[float]:
    """Number in a currency or percent string ("$1,234.50", "4.38%"); None if nothing numeric is left."""
    if not isinstance(value, str):
        return None
    cleaned = _NON_NUMERIC.sub("", value)
    try:
        return float(cleaned)
    except ValueError:
        return None


def format_rate_percent(rate: Optional[float], decimals: int = 2) -> str:
    if rate is None or math.isnan(rate):
        return ""
    return f"{rate * 100:.{decimals}f}%"


def format_weeks(weeks: float, decimals: int = 6) -> str:
    if float(weeks).is_integer():
        return str(int(weeks))
    return f"{weeks:.{decimals}f}".rstrip("0").rstrip(".")


def commuted_value_display(result: CommutedValueResult) -> CommutedValueDisplay:
    return CommutedValueDisplay(
        weeks_remaining=format_weeks(result.weeks_remaining),
        discount_rate=format_rate_percent(result.applicable_annual_discount_rate),
        discounted_weeks=f"{result.discounted_weeks_factor:.6f}",
        commuted_value=format_currency(result.commuted_value),
        commuted_value_95=format_currency(result.commuted_value_95),
        commuted_value_90=format_currency(result.commuted_value_90),
        ttd_paid_to_date_value=format_currency(result.ttd_paid_to_date_value),
        max_compensation_rate=format_currency(result.max_compensation_rate),
    )
