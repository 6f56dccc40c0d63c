from datetime import date

from fastapi import APIRouter, HTTPException

from casaluna.models.schemas import AccommodationOut, DayTypeResponse, QuoteRequest, QuoteResponse
from casaluna.services.calendar import classify_date
from casaluna.services.catalog import AccommodationNotFound, get_accommodation, list_accommodations
from casaluna.services.quote_service import build_quote
from casaluna.services.seasons import SeasonConfigError, get_high_season_periods

router = APIRouter(prefix="/api", tags=["pricing"])


@router.get("/accommodations")
def get_accommodations() -> list[AccommodationOut]:
    return [AccommodationOut.from_accommodation(a) for a in list_accommodations()]


@router.get("/accommodations/{accommodation_id}")
def get_accommodation_detail(accommodation_id: str) -> AccommodationOut:
    try:
        accommodation = get_accommodation(accommodation_id)
    except AccommodationNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return AccommodationOut.from_accommodation(accommodation)


@router.get("/calendar/{day}")
def get_day_type(day: date) -> DayTypeResponse:
    """Pricing tier of a single date."""
    try:
        periods = get_high_season_periods()
    except SeasonConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return DayTypeResponse(day=day, day_type=classify_date(day, periods))


@router.post("/quote")
def create_quote(payload: QuoteRequest) -> QuoteResponse:
    """Itemized price for a stay. Empty ranges come back with is_valid=false."""
    try:
        quote = build_quote(
            payload.accommodation_id,
            payload.check_in,
            payload.check_out,
            payload.pets,
        )
    except AccommodationNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except SeasonConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return QuoteResponse.from_quote(quote)
