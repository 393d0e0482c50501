from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from app.api.deps import get_rate_snapshot
from app.calculators import (
    InputValidationError,
    average_weekly_wage_four_quarters,
    compensation_rate_from_aww,
)
from app.models.compensation import CompensationRateRequest, CompensationRateResponse
from app.models.rates import RateSnapshot
from app.services.formatting import format_currency
from app.services.rate_service import apply_overrides

router = APIRouter(tags=["calculators"])


@router.post("/calculators/compensation-rate", response_model=CompensationRateResponse)
def compensation_rate_endpoint(
    request: CompensationRateRequest,
    snapshot: RateSnapshot = Depends(get_rate_snapshot),
):
    """AWW from four quarters of pay and the resulting capped compensation rate."""
    try:
        rates = apply_overrides(snapshot, max_compensation_rates=request.max_compensation_rates)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"Invalid rate override: {e.errors()[0]['msg']}")

    try:
        aww = average_weekly_wage_four_quarters(
            request.q1_pay, request.q2_pay, request.q3_pay, request.q4_pay
        )
        rate, max_rate, capped = compensation_rate_from_aww(
            aww, request.year_of_injury, rates.max_compensation_rates
        )
    except InputValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())

    return CompensationRateResponse(
        average_weekly_wage=float(aww),
        compensation_rate=float(rate),
        max_compensation_rate=float(max_rate),
        capped_at_max=capped,
        display_average_weekly_wage=format_currency(float(aww)),
        display_compensation_rate=format_currency(float(rate)),
    )
