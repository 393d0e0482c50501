#!/usr/bin/env python3
"""Load Commission rates into the rate_settings table.

Upserts on (year, rate_type), so re-running is safe.

Usage:
    cd backend && python scripts/seed_rate_settings.py
    cd backend && python scripts/seed_rate_settings.py --sheet rates_2026.xlsx
    cd backend && python scripts/seed_rate_settings.py --dry-run
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND_DIR))

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(message)s", datefmt="%H:%M:%S")
logger = logging.getLogger(__name__)

from app.db.connection import db_pool  # noqa: E402
from app.db.queries.rates import upsert_rate_settings  # noqa: E402
from app.models.rates import RateSetting  # noqa: E402
from app.rates.seed_data import builtin_rate_settings  # noqa: E402
from app.services.rate_sheet_parser import parse_rate_sheet  # noqa: E402


def load_settings(sheet: Path | None) -> list[RateSetting]:
    if sheet is None:
        return builtin_rate_settings()
    with sheet.open("rb") as f:
        return parse_rate_sheet(f, sheet.name)


def main():
    parser = argparse.ArgumentParser(description="Seed the rate_settings table")
    parser.add_argument("--sheet", help="Excel rate sheet (default: built-in Commission rates)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Parse and list the rows without writing to the database")
    args = parser.parse_args()

    sheet = Path(args.sheet) if args.sheet else None
    if sheet is not None and not sheet.exists():
        logger.error("Rate sheet not found: %s", sheet)
        sys.exit(1)

    settings = load_settings(sheet)
    logger.info("Prepared %d rate settings", len(settings))

    if args.dry_run:
        for s in settings:
            print(f"{s.year}  {s.rate_type.value:<24} {s.value}")
        return

    db_pool.initialize()
    if not db_pool.is_configured:
        logger.error("SQLSERVER_CONN_STRING is not set (or pyodbc is missing)")
        sys.exit(1)

    with db_pool.connection() as conn:
        written = upsert_rate_settings(conn, settings)
    logger.info("Upserted %d rows into rate_settings", written)


if __name__ == "__main__":
    main()
