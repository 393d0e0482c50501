from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from app.api.deps import get_rate_snapshot
from app.calculators import InputValidationError, InvalidStateError, compute_commuted_value
from app.models.commuted import CommutedValueRequest, CommutedValueResponse
from app.models.rates import RateSnapshot
from app.services.formatting import commuted_value_display
from app.services.rate_service import apply_overrides

router = APIRouter(tags=["calculators"])


@router.post("/calculators/commuted-value", response_model=CommutedValueResponse)
def commuted_value_endpoint(
    request: CommutedValueRequest,
    snapshot: RateSnapshot = Depends(get_rate_snapshot),
):
    """Present value of the remaining weeks of compensation.

    Uses the rate repository unless the body carries its own
    max_compensation_rates / current_discount_rate.
    """
    try:
        rates = apply_overrides(
            snapshot,
            max_compensation_rates=request.max_compensation_rates,
            discount_rate_101_plus=request.current_discount_rate,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"Invalid rate override: {e.errors()[0]['msg']}")

    try:
        result = compute_commuted_value(
            request.to_input(),
            rates.max_compensation_rates,
            rates.discount_rate_101_plus,
        )
    except InputValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())
    except InvalidStateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return CommutedValueResponse(
        result=result,
        display=commuted_value_display(result),
        rate_source=rates.source.value,
        discount_rate_year=rates.year,
    )
