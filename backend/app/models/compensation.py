from typing import Optional

from pydantic import BaseModel, Field


class CompensationRateRequest(BaseModel):
    """Four quarters of gross pay before the injury."""
    year_of_injury: int = Field(ge=1979)
    q1_pay: float = Field(ge=0)
    q2_pay: float = Field(ge=0)
    q3_pay: float = Field(ge=0)
    q4_pay: float = Field(ge=0)
    max_compensation_rates: Optional[dict[int, float]] = None


class CompensationRateResponse(BaseModel):
    average_weekly_wage: float
    compensation_rate: float
    max_compensation_rate: float
    capped_at_max: bool
    display_average_weekly_wage: str
    display_compensation_rate: str
