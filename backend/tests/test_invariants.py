"""Invariant tests: properties that must hold regardless of parameters.

Covers the weeks-remaining identity, settlement percentage ratios,
monotonicity in rate and weeks paid, the 100-week tier boundary, and
the zero-weeks edge case.
"""
import math

import pytest

from app.calculators import compute_commuted_value, discounted_weeks_factor
from app.models.commuted import CommutedValueInput

_YEAR = 2025
_WIDE_TABLE = {2025: 10_000.0}


def _run(rate: float = 500.0, paid: float = 0.0, credit: float = 0.0, discount: float | None = 0.0438):
    calc_input = CommutedValueInput(
        year_of_injury=2025,
        compensation_rate=rate,
        weeks_already_paid=paid,
        other_credit_weeks=credit,
    )
    return compute_commuted_value(calc_input, _WIDE_TABLE, discount, current_year=_YEAR)


# ---------------------------------------------------------------------------
# Identities
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("paid, credit", [(0, 0), (12.5, 3), (100, 299), (250, 250), (0, 500)])
def test_weeks_remaining_identity(paid, credit):
    result = _run(paid=paid, credit=credit)
    assert result.weeks_remaining == 500 - paid - credit


@pytest.mark.parametrize("paid", [0, 150, 399, 400, 455.5, 499])
def test_settlement_percentages(paid):
    result = _run(rate=733.21, paid=paid)
    assert abs(result.commuted_value_95 - 0.95 * result.commuted_value) < 1e-9
    assert abs(result.commuted_value_90 - 0.90 * result.commuted_value) < 1e-9


def test_commuted_value_is_factor_times_rate():
    result = _run(rate=812.34, paid=77)
    assert math.isclose(result.commuted_value, result.discounted_weeks_factor * 812.34, rel_tol=1e-12)


# ---------------------------------------------------------------------------
# Monotonicity
# ---------------------------------------------------------------------------


def test_commuted_value_increases_with_rate():
    values = [_run(rate=r, paid=120).commuted_value for r in (100.0, 250.0, 500.0, 999.99)]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_commuted_value_scales_linearly_with_rate():
    one = _run(rate=300.0, paid=60).commuted_value
    two = _run(rate=600.0, paid=60).commuted_value
    assert math.isclose(two, 2 * one, rel_tol=1e-12)


@pytest.mark.parametrize("discount", [0.0438, 0.05, 0.0225])
def test_commuted_value_decreases_with_weeks_paid_within_each_tier(discount):
    long_tier = [_run(paid=p, discount=discount).commuted_value for p in range(0, 400)]
    short_tier = [_run(paid=p, discount=discount).commuted_value for p in range(400, 501)]
    assert all(a > b for a, b in zip(long_tier, long_tier[1:]))
    assert all(a > b for a, b in zip(short_tier, short_tier[1:]))
    assert short_tier[-1] == 0.0


def test_commuted_value_decreases_with_weeks_paid_at_two_percent():
    values = [_run(paid=p, discount=0.02).commuted_value for p in range(0, 501)]
    assert all(a > b for a, b in zip(values, values[1:]))
    assert values[-1] == 0.0


# ---------------------------------------------------------------------------
# Tier boundary
# ---------------------------------------------------------------------------


def test_101_weeks_uses_extra_exponent_week():
    result = _run(paid=399, discount=0.0438)
    weekly = 0.0438 / 52
    assert result.weeks_remaining == 101
    assert result.applicable_annual_discount_rate == 0.0438
    assert math.isclose(
        result.discounted_weeks_factor,
        (1 - (1 + weekly) ** -102) / weekly,
        rel_tol=1e-12,
    )


def test_100_weeks_uses_standard_formula_at_two_percent():
    result = _run(paid=400, discount=0.0438)
    weekly = 0.02 / 52
    assert result.weeks_remaining == 100
    assert result.applicable_annual_discount_rate == 0.02
    assert math.isclose(
        result.discounted_weeks_factor,
        (1 - (1 + weekly) ** -100) / weekly,
        rel_tol=1e-12,
    )


def test_boundary_formulas_differ_at_same_rate():
    """At an identical 2% rate the two tiers are two exponent weeks apart, not one."""
    at_101 = discounted_weeks_factor(101, 0.02)
    at_100 = discounted_weeks_factor(100, 0.02)
    at_99 = discounted_weeks_factor(99, 0.02)
    assert (at_100 - at_99) < 1.0
    assert (at_101 - at_100) > 1.5


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("paid, credit", [(500, 0), (0, 500), (123.25, 376.75)])
def test_zero_weeks_remaining(paid, credit):
    result = _run(paid=paid, credit=credit)
    assert result.weeks_remaining == 0
    assert result.discounted_weeks_factor == 0.0
    assert result.commuted_value == 0.0
    assert not math.isnan(result.commuted_value_90)


def test_fallback_flag_only_when_rate_missing_above_100_weeks():
    assert _run(paid=0, discount=None).used_fallback_discount_rate is True
    assert _run(paid=0, discount=0.05).used_fallback_discount_rate is False
    assert _run(paid=450, discount=None).used_fallback_discount_rate is False
