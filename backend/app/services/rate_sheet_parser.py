"""Parse an uploaded Excel rate sheet into rate_settings rows.

Expects one row per year with a year column and a max compensation rate
and/or discount rate column. Header matching is partial and
case-insensitive. Discount rates entered as percentages (4.38) are converted
to decimals (0.0438).
"""
from __future__ import annotations

import logging
import math
from io import BytesIO
from typing import BinaryIO

import pandas as pd
from pydantic import ValidationError

from app.models.rates import RateSetting, RateType
from app.services.formatting import parse_currency

logger = logging.getLogger(__name__)


_COLUMN_PATTERNS: dict[str, list[str]] = {
    "year": ["year of injury", "injury year", "year"],
    "max_rate": ["max compensation", "maximum compensation", "max comp", "max rate", "maximum rate"],
    "discount_rate": ["discount rate", "101", "discount"],
}


def _find_column(columns: list[str], key: str) -> str | None:
    """Find a column by partial case-insensitive match, most specific pattern first."""
    col_lower = {c: c.lower().strip() for c in columns}
    for pattern in _COLUMN_PATTERNS.get(key, [key]):
        for orig, low in col_lower.items():
            if pattern in low:
                return orig
    return None


def _cell_number(value) -> float | None:
    if isinstance(value, str):
        return parse_currency(value)
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if math.isnan(number):
        return None
    return number


def parse_rate_sheet(file: BinaryIO, filename: str) -> list[RateSetting]:
    """Parse an Excel rate sheet.

    Raises ValueError on empty or unusable sheets.
    """
    data = file.read()
    if not data:
        raise ValueError("Uploaded file is empty")

    df = pd.read_excel(BytesIO(data))
    df.columns = [str(c).strip() for c in df.columns]
    if df.empty:
        raise ValueError("Spreadsheet contains no data rows")

    columns = list(df.columns)
    year_col = _find_column(columns, "year")
    max_col = _find_column(columns, "max_rate")
    discount_col = _find_column(columns, "discount_rate")
    logger.info("Rate sheet %s columns: %s", filename, columns)
    logger.info("Column mapping: year=%s max=%s discount=%s", year_col, max_col, discount_col)

    if not year_col:
        raise ValueError(f"Cannot find a year column. Available columns: {columns}")
    if not max_col and not discount_col:
        raise ValueError(
            f"Cannot find a max compensation or discount rate column. Available columns: {columns}"
        )

    settings: list[RateSetting] = []
    skipped = 0
    for record in df.to_dict(orient="records"):
        year = _cell_number(record.get(year_col))
        if year is None:
            skipped += 1
            continue

        candidates: list[tuple[RateType, float | None]] = []
        if max_col:
            candidates.append((RateType.max_compensation, _cell_number(record.get(max_col))))
        if discount_col:
            rate = _cell_number(record.get(discount_col))
            if rate is not None and rate >= 1:
                rate = rate / 100.0
            candidates.append((RateType.discount_rate_101_plus, rate))

        for rate_type, value in candidates:
            if value is None:
                continue
            try:
                settings.append(RateSetting(year=int(year), rate_type=rate_type, value=value))
            except ValidationError as e:
                logger.warning("Skipping %s for %s: %s", rate_type.value, year, e.errors()[0]["msg"])
                skipped += 1

    if not settings:
        raise ValueError("No valid rate rows could be parsed from the file")

    logger.info("Parsed %d rate settings from %s (%d skipped)", len(settings), filename, skipped)
    return settings
