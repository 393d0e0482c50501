from __future__ import annotations

from typing import Optional

from app.models.rates import RateSetting, RateType


def list_rate_settings(conn, rate_type: Optional[RateType] = None) -> list[RateSetting]:
    """List rate_settings rows, optionally filtered by type."""
    query = """
        SELECT year, rate_type, value
        FROM rate_settings
    """
    params: list = []
    if rate_type is not None:
        query += " WHERE rate_type = ?"
        params.append(rate_type.value)
    query += " ORDER BY rate_type, year"

    cursor = conn.cursor()
    cursor.execute(query, *params)
    rows = cursor.fetchall()

    return [
        RateSetting(year=row.year, rate_type=row.rate_type, value=float(row.value))
        for row in rows
    ]


def get_max_compensation_rates(conn) -> dict[int, float]:
    """Max weekly compensation rate keyed by injury year."""
    return {
        setting.year: setting.value
        for setting in list_rate_settings(conn, RateType.max_compensation)
    }


def get_discount_rate(conn, year: int) -> Optional[float]:
    """Discount rate for claims over 100 weeks in a year, or None if not on file."""
    query = """
        SELECT value
        FROM rate_settings
        WHERE year = ? AND rate_type = ?
    """
    cursor = conn.cursor()
    cursor.execute(query, year, RateType.discount_rate_101_plus.value)
    row = cursor.fetchone()

    if not row:
        return None
    return float(row.value)


def upsert_rate_settings(conn, settings: list[RateSetting]) -> int:
    """Insert or update rows on the (year, rate_type) key. Returns rows written."""
    query = """
        MERGE rate_settings AS target
        USING (SELECT ? AS year, ? AS rate_type, ? AS value) AS source
        ON target.year = source.year AND target.rate_type = source.rate_type
        WHEN MATCHED THEN
            UPDATE SET value = source.value
        WHEN NOT MATCHED THEN
            INSERT (year, rate_type, value) VALUES (source.year, source.rate_type, source.value);
    """
    cursor = conn.cursor()
    for setting in settings:
        cursor.execute(query, setting.year, setting.rate_type.value, setting.value)
    conn.commit()
    return len(settings)
