from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

MIN_RATE_YEAR = 1979
MAX_RATE_YEAR = 2100


class RateType(str, Enum):
    """Kinds of rows stored in rate_settings."""
    max_compensation = "MAX_COMPENSATION"
    discount_rate_101_plus = "DISCOUNT_RATE_101_PLUS"


class RateSource(str, Enum):
    database = "database"
    builtin = "builtin"


def _check_year(year: int) -> int:
    if year < MIN_RATE_YEAR or year > MAX_RATE_YEAR:
        raise ValueError(f"year {year} outside {MIN_RATE_YEAR}..{MAX_RATE_YEAR}")
    return year


class RateSetting(BaseModel):
    """One row of the rate_settings table."""
    year: int
    rate_type: RateType
    value: float

    @field_validator("year")
    @classmethod
    def year_in_range(cls, v: int) -> int:
        return _check_year(v)

    @field_validator("value")
    @classmethod
    def value_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("rate value must be greater than 0")
        return v


class RateSnapshot(BaseModel):
    """Rate data handed to the calculators for one request.

    Frozen against attribute reassignment only; max_compensation_rates is a
    plain dict. Snapshots are built per request from a copy of the source
    rates, so nothing outside the request sees an in-place edit.
    """
    model_config = ConfigDict(frozen=True)

    year: int
    max_compensation_rates: dict[int, float]
    discount_rate_101_plus: Optional[float] = None
    source: RateSource = RateSource.builtin

    @field_validator("max_compensation_rates")
    @classmethod
    def rates_valid(cls, v: dict[int, float]) -> dict[int, float]:
        for year, rate in v.items():
            _check_year(year)
            if rate <= 0:
                raise ValueError(f"max compensation rate for {year} must be greater than 0")
        return v

    @field_validator("discount_rate_101_plus")
    @classmethod
    def discount_positive(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("discount rate must be greater than 0")
        return v


class MaxCompensationRate(BaseModel):
    year: int
    max_compensation_rate: float
