from fastapi import APIRouter, Depends, HTTPException, UploadFile

from app.api.deps import get_rate_snapshot
from app.models.rates import MaxCompensationRate, RateSetting, RateSnapshot
from app.services.rate_sheet_parser import parse_rate_sheet

router = APIRouter(tags=["rates"])


@router.get("/rates", response_model=RateSnapshot)
def get_rates(snapshot: RateSnapshot = Depends(get_rate_snapshot)):
    """Max compensation rates and the >100-week discount rate for a year."""
    return snapshot


@router.get("/rates/max-compensation/{injury_year}", response_model=MaxCompensationRate)
def get_max_compensation_rate(
    injury_year: int,
    snapshot: RateSnapshot = Depends(get_rate_snapshot),
):
    rate = snapshot.max_compensation_rates.get(injury_year)
    if rate is None:
        raise HTTPException(
            status_code=404,
            detail=f"No max compensation rate on file for {injury_year}",
        )
    return MaxCompensationRate(year=injury_year, max_compensation_rate=rate)


@router.post("/rates/upload", response_model=list[RateSetting])
async def upload_rate_sheet(file: UploadFile):
    """Parse an Excel rate sheet and return the rows it would load."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No filename provided")

    ext = file.filename.rsplit(".", 1)[-1].lower() if "." in file.filename else ""
    if ext not in ("xlsx", "xls"):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file type '.{ext}'. Please upload .xlsx or .xls",
        )

    try:
        settings = parse_rate_sheet(file.file, file.filename)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return settings
