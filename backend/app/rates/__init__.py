"""Built-in Commission rate data used when no database is configured."""
from app.rates.seed_data import (
    DISCOUNT_RATES_101_PLUS,
    MAX_COMPENSATION_RATES,
    builtin_rate_settings,
)

__all__ = ["DISCOUNT_RATES_101_PLUS", "MAX_COMPENSATION_RATES", "builtin_rate_settings"]
