from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Statutory cap shared by the request schema and the engine.
TOTAL_STATUTORY_WEEKS = 500
EARLIEST_INJURY_YEAR = 1979


class CommutedValueInput(BaseModel):
    """Inputs to the commuted value engine. Range checks happen in the engine."""
    model_config = ConfigDict(frozen=True)

    year_of_injury: Optional[int] = None
    compensation_rate: Optional[float] = None
    weeks_already_paid: float = 0.0
    other_credit_weeks: float = 0.0


class CommutedValueResult(BaseModel):
    """Full present-value breakdown. Values are unrounded."""
    model_config = ConfigDict(frozen=True)

    weeks_remaining: float
    applicable_annual_discount_rate: float
    discounted_weeks_factor: float
    commuted_value: float
    commuted_value_95: float
    commuted_value_90: float
    ttd_paid_to_date_value: float
    used_fallback_discount_rate: bool
    max_compensation_rate: float
    used_fallback_max_rate: bool


class CommutedValueDisplay(BaseModel):
    """Rounded strings for the presentation layer."""
    weeks_remaining: str
    discount_rate: str
    discounted_weeks: str
    commuted_value: str
    commuted_value_95: str
    commuted_value_90: str
    ttd_paid_to_date_value: str
    max_compensation_rate: str


class CommutedValueRequest(BaseModel):
    """Request body for the commuted value endpoint.

    Field limits follow the calculator's form rules. The per-year ceiling on
    compensation_rate needs rate data and is enforced by the engine.
    Optional rate overrides let a caller run without the rate repository.
    """
    year_of_injury: int = Field(ge=EARLIEST_INJURY_YEAR)
    compensation_rate: float = Field(gt=0)
    weeks_already_paid: Optional[float] = Field(default=None, ge=0, le=TOTAL_STATUTORY_WEEKS)
    other_credit_weeks: Optional[float] = Field(default=None, ge=0, le=TOTAL_STATUTORY_WEEKS)
    max_compensation_rates: Optional[dict[int, float]] = None
    current_discount_rate: Optional[float] = Field(default=None, gt=0, lt=1)

    @model_validator(mode="after")
    def check_year_and_total_weeks(self) -> "CommutedValueRequest":
        current_year = date.today().year
        if self.year_of_injury > current_year:
            raise ValueError(
                f"Year must be between {EARLIEST_INJURY_YEAR} and {current_year}"
            )
        total = (self.weeks_already_paid or 0.0) + (self.other_credit_weeks or 0.0)
        if total > TOTAL_STATUTORY_WEEKS:
            raise ValueError(
                "Total weeks (TTD Paid + Other Credit) cannot exceed 500."
            )
        return self

    def to_input(self) -> CommutedValueInput:
        return CommutedValueInput(
            year_of_injury=self.year_of_injury,
            compensation_rate=self.compensation_rate,
            weeks_already_paid=self.weeks_already_paid or 0.0,
            other_credit_weeks=self.other_credit_weeks or 0.0,
        )


class CommutedValueResponse(BaseModel):
    """Engine result plus display strings and rate provenance."""
    result: CommutedValueResult
    display: CommutedValueDisplay
    rate_source: str
    discount_rate_year: int
