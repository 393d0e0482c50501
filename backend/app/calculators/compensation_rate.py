"""Average weekly wage and compensation rate.

AWW from four quarters of gross pay is total pay / 52. The weekly
compensation rate is 66.67% of the AWW, capped at the maximum rate for the
year of injury. Decimal arithmetic keeps cents exact.
"""
from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from app.calculators.errors import InputValidationError, ValidationErrorKind

COMPENSATION_RATE_PERCENTAGE = Decimal("0.6667")
WEEKS_IN_YEAR = 52
CENTS = Decimal("0.01")

Number = Union[Decimal, float, int, str]


def _to_decimal(field: str, value: Number) -> Decimal:
    try:
        # str() so 0.1 maps to Decimal("0.1")
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InputValidationError(
            ValidationErrorKind.out_of_range, field, f"{field} is not a number: {value!r}"
        )
    if not amount.is_finite():
        raise InputValidationError(
            ValidationErrorKind.out_of_range, field, f"{field} must be finite"
        )
    return amount


def average_weekly_wage_four_quarters(
    q1_pay: Number,
    q2_pay: Number,
    q3_pay: Number,
    q4_pay: Number,
) -> Decimal:
    """AWW from the four quarters preceding the injury (unrounded)."""
    quarters = [
        _to_decimal(name, value)
        for name, value in (
            ("q1_pay", q1_pay),
            ("q2_pay", q2_pay),
            ("q3_pay", q3_pay),
            ("q4_pay", q4_pay),
        )
    ]
    for name, amount in zip(("q1_pay", "q2_pay", "q3_pay", "q4_pay"), quarters):
        if amount < 0:
            raise InputValidationError(
                ValidationErrorKind.out_of_range, name, "Quarterly pay cannot be negative."
            )
    return sum(quarters, Decimal(0)) / WEEKS_IN_YEAR


def compensation_rate_from_aww(
    average_weekly_wage: Number,
    year_of_injury: int,
    rate_table: Mapping[int, float],
) -> tuple[Decimal, Decimal, bool]:
    """Compensation rate for an AWW, capped at the year's maximum.

    A year missing from the table uses the latest year that has a rate.

    Returns:
        (compensation_rate, max_rate_for_year, capped), both amounts in cents.
    """
    aww = _to_decimal("average_weekly_wage", average_weekly_wage)
    if aww < 0:
        raise InputValidationError(
            ValidationErrorKind.out_of_range,
            "average_weekly_wage",
            "Average weekly wage cannot be negative.",
        )
    if not rate_table:
        raise InputValidationError(
            ValidationErrorKind.missing_field,
            "max_compensation_rates",
            "No maximum compensation rates available",
        )

    effective_year = year_of_injury if year_of_injury in rate_table else max(rate_table)
    max_rate = _to_decimal("max_compensation_rate", rate_table[effective_year])

    rate = aww * COMPENSATION_RATE_PERCENTAGE
    capped = rate > max_rate
    if capped:
        rate = max_rate
    return (
        rate.quantize(CENTS, rounding=ROUND_HALF_UP),
        max_rate.quantize(CENTS, rounding=ROUND_HALF_UP),
        capped,
    )
