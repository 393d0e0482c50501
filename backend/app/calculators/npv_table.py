"""Commission-style NPV factor table.

One row per week count, using the same tier rules as the commuted value
engine: weeks above 100 are discounted at the supplied annual rate with the
extra exponent week, weeks at or below 100 at the fixed 2% rate. The
Commission publishes factors rounded to four decimals; both values are kept.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from app.calculators.commuted_value import (
    discounted_weeks_factor,
    select_discount_rate,
)
from app.models.commuted import TOTAL_STATUTORY_WEEKS

PUBLISHED_FACTOR_DECIMALS = 4


@dataclass(frozen=True)
class NpvFactorRow:
    weeks: int
    annual_discount_rate: float
    factor: float
    rounded_factor: float


def npv_factor_table(
    annual_discount_rate: float,
    weeks: Iterable[int] | None = None,
) -> list[NpvFactorRow]:
    """Build factor rows for each week count (default 1..500)."""
    if annual_discount_rate <= 0:
        raise ValueError(f"annual_discount_rate must be positive, got {annual_discount_rate}")
    week_counts = weeks if weeks is not None else range(1, TOTAL_STATUTORY_WEEKS + 1)

    rows: list[NpvFactorRow] = []
    for n in week_counts:
        if n < 0 or n > TOTAL_STATUTORY_WEEKS:
            raise ValueError(f"week count {n} outside 0..{TOTAL_STATUTORY_WEEKS}")
        rate, _ = select_discount_rate(n, annual_discount_rate)
        factor = discounted_weeks_factor(n, rate)
        rows.append(NpvFactorRow(
            weeks=n,
            annual_discount_rate=rate,
            factor=factor,
            rounded_factor=round(factor, PUBLISHED_FACTOR_DECIMALS),
        ))
    return rows
