"""Rate repository facade.

Builds the immutable RateSnapshot the calculators consume: from the
rate_settings table when a connection is supplied, otherwise from the
built-in Commission rate history.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from app.db.queries.rates import get_discount_rate, get_max_compensation_rates
from app.models.rates import RateSnapshot, RateSource
from app.rates.seed_data import DISCOUNT_RATES_101_PLUS, MAX_COMPENSATION_RATES

logger = logging.getLogger(__name__)


def builtin_snapshot(year: Optional[int] = None) -> RateSnapshot:
    """Snapshot of the built-in rates for a calculation year."""
    year = year or date.today().year
    return RateSnapshot(
        year=year,
        max_compensation_rates=dict(MAX_COMPENSATION_RATES),
        discount_rate_101_plus=DISCOUNT_RATES_101_PLUS.get(year),
        source=RateSource.builtin,
    )


def database_snapshot(conn, year: Optional[int] = None) -> RateSnapshot:
    """Snapshot read from rate_settings."""
    year = year or date.today().year
    return RateSnapshot(
        year=year,
        max_compensation_rates=get_max_compensation_rates(conn),
        discount_rate_101_plus=get_discount_rate(conn, year),
        source=RateSource.database,
    )


def load_rate_snapshot(conn=None, year: Optional[int] = None) -> RateSnapshot:
    """Return the rate snapshot for a calculation year.

    Args:
        conn: Open DB connection, or None to use the built-in rates.
        year: Calculation year for the discount rate. Defaults to this year.
    """
    if conn is None:
        snapshot = builtin_snapshot(year)
    else:
        snapshot = database_snapshot(conn, year)

    logger.info(
        "Loaded %d max compensation rates for %d from %s",
        len(snapshot.max_compensation_rates), snapshot.year, snapshot.source.value,
    )
    if snapshot.discount_rate_101_plus is None:
        logger.warning(
            "No >100-week discount rate on file for %d; calculations will use the fallback rate",
            snapshot.year,
        )
    return snapshot


def apply_overrides(
    snapshot: RateSnapshot,
    max_compensation_rates: Optional[dict[int, float]] = None,
    discount_rate_101_plus: Optional[float] = None,
) -> RateSnapshot:
    """Copy of the snapshot with caller-supplied rates swapped in."""
    updates: dict = {}
    if max_compensation_rates is not None:
        updates["max_compensation_rates"] = max_compensation_rates
    if discount_rate_101_plus is not None:
        updates["discount_rate_101_plus"] = discount_rate_101_plus
    if not updates:
        return snapshot
    # model_copy skips validation, so rebuild
    return RateSnapshot.model_validate({**snapshot.model_dump(), **updates})
