#!/usr/bin/env python3
"""Write the commuted value NPV factor table (weeks 1-500) to Excel or CSV.

Mirrors the layout of the Commission's published tables so factors can be
checked side by side. Defaults to the discount rate on file for this year.

Usage:
    cd backend && python scripts/npv_factor_table.py
    cd backend && python scripts/npv_factor_table.py --rate 0.0438 --out npv_2025.xlsx
    cd backend && python scripts/npv_factor_table.py --year 2024 --out npv_2024.csv
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

import pandas as pd

BACKEND_DIR = Path(__file__).resolve().parent.parent
PROJECT_DIR = BACKEND_DIR.parent
REPORTS_DIR = PROJECT_DIR / "reports"

sys.path.insert(0, str(BACKEND_DIR))

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(message)s", datefmt="%H:%M:%S")
logger = logging.getLogger(__name__)

from app.calculators import FALLBACK_DISCOUNT_RATE, npv_factor_table  # noqa: E402
from app.services.rate_service import builtin_snapshot  # noqa: E402


def build_frame(annual_rate: float) -> pd.DataFrame:
    rows = npv_factor_table(annual_rate)
    return pd.DataFrame({
        "Weeks": [r.weeks for r in rows],
        "Annual Discount Rate": [r.annual_discount_rate for r in rows],
        "Factor": [r.factor for r in rows],
        "Published Factor (4dp)": [r.rounded_factor for r in rows],
    })


def main():
    parser = argparse.ArgumentParser(description="Generate the NPV factor table")
    parser.add_argument("--rate", type=float, help="Annual discount rate for >100 weeks (e.g. 0.0438)")
    parser.add_argument("--year", type=int, help="Use the built-in discount rate for this year")
    parser.add_argument("--out", help="Output file, .xlsx or .csv (default: reports/npv_factors_<year>.xlsx)")
    args = parser.parse_args()

    year = args.year or date.today().year
    rate = args.rate
    if rate is None:
        rate = builtin_snapshot(year).discount_rate_101_plus
        if rate is None:
            logger.warning("No discount rate on file for %d; using fallback %.4f", year, FALLBACK_DISCOUNT_RATE)
            rate = FALLBACK_DISCOUNT_RATE

    df = build_frame(rate)

    if args.out:
        out = Path(args.out)
    else:
        REPORTS_DIR.mkdir(exist_ok=True)
        out = REPORTS_DIR / f"npv_factors_{year}.xlsx"

    if out.suffix.lower() == ".csv":
        df.to_csv(out, index=False)
    else:
        df.to_excel(out, index=False, sheet_name="npv_factors")
    logger.info("Wrote %d rows at %.4f to %s", len(df), rate, out)


if __name__ == "__main__":
    main()
