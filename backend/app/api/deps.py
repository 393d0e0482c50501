from collections.abc import Generator
from typing import Optional

from fastapi import Depends

from app.db.connection import db_pool
from app.models.rates import RateSnapshot
from app.services.rate_service import load_rate_snapshot


def get_db() -> Generator:
    """FastAPI dependency yielding a DB connection, or None when no database is configured."""
    if not db_pool.is_configured:
        yield None
        return
    conn = db_pool.get_connection()
    try:
        yield conn
    finally:
        conn.close()


def get_rate_snapshot(year: Optional[int] = None, conn=Depends(get_db)) -> RateSnapshot:
    """Rate data for the calculation year (query param `year`, default this year)."""
    return load_rate_snapshot(conn, year)
