"""Commission rate history.

MAX_COMPENSATION_RATES: SC WCC maximum weekly compensation rate by year.
DISCOUNT_RATES_101_PLUS: discount rate for claims with more than 100 weeks
remaining (T-note yield capped 2%-6% from 2015; flat 5% before).
"""
from __future__ import annotations

from app.models.rates import RateSetting, RateType

MAX_COMPENSATION_RATES: dict[int, float] = {
    1979: 185.00, 1980: 197.00, 1981: 216.00, 1982: 235.00, 1983: 254.38,
    1984: 268.99, 1985: 287.02, 1986: 294.95, 1987: 308.24, 1988: 319.20,
    1989: 334.87, 1990: 350.19, 1991: 364.37, 1992: 379.82, 1993: 393.06,
    1994: 410.26, 1995: 422.48, 1996: 437.79, 1997: 450.62, 1998: 465.18,
    1999: 483.47, 2000: 507.34, 2001: 532.77, 2002: 549.42, 2003: 563.55,
    2004: 577.73, 2005: 592.56, 2006: 616.48, 2007: 645.94, 2008: 661.29,
    2009: 681.36, 2010: 689.71, 2011: 704.92, 2012: 725.47, 2013: 743.72,
    2014: 752.16, 2015: 766.05, 2016: 784.03, 2017: 806.92, 2018: 838.21,
    2019: 845.74, 2020: 866.67, 2021: 903.40, 2022: 963.37, 2023: 1035.78,
    2024: 1093.67, 2025: 1134.43,
}

DISCOUNT_RATES_101_PLUS: dict[int, float] = {
    2005: 0.0500, 2006: 0.0500, 2007: 0.0500, 2008: 0.0500, 2009: 0.0500,
    2010: 0.0500, 2011: 0.0500, 2012: 0.0500, 2013: 0.0500, 2014: 0.0500,
    2015: 0.0200, 2016: 0.0200, 2017: 0.0200, 2018: 0.0225, 2019: 0.0249,
    2020: 0.0200, 2021: 0.0200, 2022: 0.0200, 2023: 0.0394, 2024: 0.0393,
    2025: 0.0438,
}


def builtin_rate_settings() -> list[RateSetting]:
    """All built-in rates as rate_settings rows."""
    rows = [
        RateSetting(year=year, rate_type=RateType.max_compensation, value=value)
        for year, value in MAX_COMPENSATION_RATES.items()
    ]
    rows.extend(
        RateSetting(year=year, rate_type=RateType.discount_rate_101_plus, value=value)
        for year, value in DISCOUNT_RATES_101_PLUS.items()
    )
    return rows
