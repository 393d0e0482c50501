"""Commuted value engine for South Carolina workers' compensation claims.

Converts the remaining stream of weekly compensation payments into a present
value lump sum using the Workers' Compensation Commission's discount tiers:

    weeks_remaining = 500 - (weeks_already_paid + other_credit_weeks)

    > 100 weeks remaining:  Commission discount rate for the current year,
                            factor = (1 - (1 + i)^-(n + 1)) / i
    <= 100 weeks remaining: fixed 2% annual rate,
                            factor = (1 - (1 + i)^-n) / i

where i is the annual rate divided by 52. The extra week in the exponent of
the 101-500 week tier reproduces the Commission's published NPV factors and
is not the textbook annuity formula.

All arithmetic is double precision with no intermediate rounding. The
Commission rounds its published factors to four decimal places, so results
can differ from the official tables in the last cents.

The engine is pure: rate data comes in as arguments, nothing is logged, and
inputs are never mutated.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date
from typing import Optional

from app.calculators.errors import (
    InputValidationError,
    InvalidStateError,
    ValidationErrorKind,
)
from app.models.commuted import (
    EARLIEST_INJURY_YEAR,
    TOTAL_STATUTORY_WEEKS,
    CommutedValueInput,
    CommutedValueResult,
)

SHORT_TERM_WEEKS_THRESHOLD = 100
SHORT_TERM_DISCOUNT_RATE = 0.02
WEEKS_PER_YEAR = 52

# Last Commission rate on file (2025), used when no rate exists for the year.
FALLBACK_DISCOUNT_RATE = 0.0438
# 2025 ceiling, used only to validate rates for years missing from the table.
FALLBACK_MAX_COMPENSATION_RATE = 1134.43

SETTLEMENT_PERCENT_95 = 0.95
SETTLEMENT_PERCENT_90 = 0.90


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


def select_discount_rate(
    weeks_remaining: float,
    current_discount_rate: Optional[float],
) -> tuple[float, bool]:
    """Pick the annual discount rate tier.

    Returns (annual_rate, used_fallback).
    """
    if weeks_remaining > SHORT_TERM_WEEKS_THRESHOLD:
        if current_discount_rate is None:
            return FALLBACK_DISCOUNT_RATE, True
        return current_discount_rate, False
    return SHORT_TERM_DISCOUNT_RATE, False


def discounted_weeks_factor(weeks_remaining: float, annual_discount_rate: float) -> float:
    """Present-value annuity factor for the remaining weeks.

    Applies the Commission's extra exponent week above 100 weeks remaining.
    A zero rate degenerates to the undiscounted week count.
    """
    if weeks_remaining <= 0:
        return 0.0
    weekly_rate = annual_discount_rate / WEEKS_PER_YEAR
    if weekly_rate == 0:
        return float(weeks_remaining)

    periods = weeks_remaining
    if weeks_remaining > SHORT_TERM_WEEKS_THRESHOLD:
        periods = weeks_remaining + 1
    return (1.0 - (1.0 + weekly_rate) ** -periods) / weekly_rate


def max_rate_for_year(year: int, rate_table: Mapping[int, float]) -> tuple[float, bool]:
    """Return (ceiling, used_fallback) for the year of injury."""
    ceiling = rate_table.get(year)
    if ceiling is None:
        return FALLBACK_MAX_COMPENSATION_RATE, True
    return float(ceiling), False


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _check_weeks(field: str, value: float) -> None:
    if not math.isfinite(value) or value < 0 or value > TOTAL_STATUTORY_WEEKS:
        raise InputValidationError(
            ValidationErrorKind.out_of_range,
            field,
            f"{field} must be between 0 and {TOTAL_STATUTORY_WEEKS} weeks, got {value}",
        )


def validate_input(
    calc_input: CommutedValueInput,
    rate_table: Mapping[int, float],
    current_discount_rate: Optional[float],
    current_year: int,
) -> tuple[float, bool]:
    """Check every input constraint; return the year's (ceiling, used_fallback)."""
    if calc_input.year_of_injury is None:
        raise InputValidationError(
            ValidationErrorKind.missing_field, "year_of_injury", "Year of injury is required"
        )
    if calc_input.compensation_rate is None:
        raise InputValidationError(
            ValidationErrorKind.missing_field, "compensation_rate", "Compensation rate is required"
        )

    year = calc_input.year_of_injury
    if year < EARLIEST_INJURY_YEAR or year > current_year:
        raise InputValidationError(
            ValidationErrorKind.out_of_range,
            "year_of_injury",
            f"Year must be between {EARLIEST_INJURY_YEAR} and {current_year}",
        )

    rate = calc_input.compensation_rate
    if not math.isfinite(rate) or rate <= 0:
        raise InputValidationError(
            ValidationErrorKind.out_of_range,
            "compensation_rate",
            "Rate must be greater than 0.",
        )

    _check_weeks("weeks_already_paid", calc_input.weeks_already_paid)
    _check_weeks("other_credit_weeks", calc_input.other_credit_weeks)
    if calc_input.weeks_already_paid + calc_input.other_credit_weeks > TOTAL_STATUTORY_WEEKS:
        raise InputValidationError(
            ValidationErrorKind.exceeds_max,
            "weeks_already_paid",
            "Total weeks (TTD Paid + Other Credit) cannot exceed 500.",
        )

    ceiling, used_fallback_max = max_rate_for_year(year, rate_table)
    if rate > ceiling:
        raise InputValidationError(
            ValidationErrorKind.exceeds_max,
            "compensation_rate",
            f"Rate cannot exceed max ${ceiling:,.2f} for {year}.",
        )

    if current_discount_rate is not None and (
        not math.isfinite(current_discount_rate) or current_discount_rate <= 0
    ):
        raise InputValidationError(
            ValidationErrorKind.out_of_range,
            "current_discount_rate",
            f"Discount rate must be greater than 0, got {current_discount_rate}",
        )

    return ceiling, used_fallback_max


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_commuted_value(
    calc_input: CommutedValueInput,
    rate_table: Mapping[int, float],
    current_discount_rate: Optional[float],
    *,
    current_year: Optional[int] = None,
) -> CommutedValueResult:
    """Compute the commuted value breakdown for a claim.

    Args:
        calc_input: Year of injury, weekly compensation rate, and weeks
            already paid / otherwise credited.
        rate_table: Max weekly compensation rate by injury year. Only used to
            validate compensation_rate.
        current_discount_rate: Commission rate for claims with more than 100
            weeks remaining, or None when no rate is on file. None selects
            FALLBACK_DISCOUNT_RATE and sets used_fallback_discount_rate.
        current_year: Upper bound for year_of_injury. Defaults to today's year.

    Raises:
        InputValidationError: an input is missing, out of range, or over a cap.
        InvalidStateError: weeks remaining came out negative.
    """
    year_cap = current_year if current_year is not None else date.today().year
    ceiling, used_fallback_max = validate_input(
        calc_input, rate_table, current_discount_rate, year_cap
    )

    weeks_paid = calc_input.weeks_already_paid
    weeks_remaining = TOTAL_STATUTORY_WEEKS - (weeks_paid + calc_input.other_credit_weeks)
    if weeks_remaining < 0:
        raise InvalidStateError(f"Weeks remaining is negative: {weeks_remaining}")

    annual_rate, used_fallback_rate = select_discount_rate(weeks_remaining, current_discount_rate)
    factor = discounted_weeks_factor(weeks_remaining, annual_rate)

    rate = calc_input.compensation_rate
    commuted_value = factor * rate

    return CommutedValueResult(
        weeks_remaining=weeks_remaining,
        applicable_annual_discount_rate=annual_rate,
        discounted_weeks_factor=factor,
        commuted_value=commuted_value,
        commuted_value_95=commuted_value * SETTLEMENT_PERCENT_95,
        commuted_value_90=commuted_value * SETTLEMENT_PERCENT_90,
        ttd_paid_to_date_value=weeks_paid * rate,
        used_fallback_discount_rate=used_fallback_rate,
        max_compensation_rate=ceiling,
        used_fallback_max_rate=used_fallback_max,
    )
