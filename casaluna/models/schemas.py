from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator

from casaluna.models.pricing import (
    Accommodation,
    DayType,
    HighSeasonPeriod,
    NightsBreakdownItem,
    Quote,
    RateCard,
)


class HighSeasonPeriodConfig(BaseModel):
    """One entry of a high season JSON file."""

    name: str
    start_month: int = Field(ge=1, le=12)
    start_day: int = Field(ge=1, le=31)
    end_month: int = Field(ge=1, le=12)
    end_day: int = Field(ge=1, le=31)
    year: int | None = Field(default=None, ge=1)

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, value: object) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError("period name must not be empty")
        return text

    def to_period(self) -> HighSeasonPeriod:
        return HighSeasonPeriod(
            name=self.name,
            start_month=self.start_month,
            start_day=self.start_day,
            end_month=self.end_month,
            end_day=self.end_day,
            year=self.year,
        )


class RateCardOut(BaseModel):
    weekday: int
    weekend: int
    high_season: int
    cleaning: int
    pets: int

    @classmethod
    def from_rate_card(cls, rate_card: RateCard) -> "RateCardOut":
        return cls(
            weekday=rate_card.weekday,
            weekend=rate_card.weekend,
            high_season=rate_card.high_season,
            cleaning=rate_card.cleaning,
            pets=rate_card.pets,
        )


class AccommodationOut(BaseModel):
    id: str
    title: str
    slug: str
    short_description: str
    capacity: int
    size: int
    amenities: list[str]
    featured: bool
    pricing: RateCardOut

    @classmethod
    def from_accommodation(cls, accommodation: Accommodation) -> "AccommodationOut":
        return cls(
            id=accommodation.id,
            title=accommodation.title,
            slug=accommodation.slug,
            short_description=accommodation.short_description,
            capacity=accommodation.capacity,
            size=accommodation.size,
            amenities=list(accommodation.amenities),
            featured=accommodation.featured,
            pricing=RateCardOut.from_rate_card(accommodation.rate_card),
        )


class DayTypeResponse(BaseModel):
    day: date
    day_type: DayType


class QuoteRequest(BaseModel):
    accommodation_id: str
    check_in: date
    check_out: date
    pets: int = Field(default=0, ge=0)


class NightsBreakdownOut(BaseModel):
    count: int
    price_per_night: int
    total: int

    @classmethod
    def from_item(cls, item: NightsBreakdownItem) -> "NightsBreakdownOut":
        return cls(count=item.count, price_per_night=item.price_per_night, total=item.total)


class QuoteResponse(BaseModel):
    accommodation_id: str
    check_in: date
    check_out: date
    pets: int
    nights_breakdown: dict[str, NightsBreakdownOut]
    accommodation_total: int
    pets_total: int
    cleaning_fee: int
    total: int
    total_nights: int
    is_valid: bool

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        breakdown = quote.breakdown
        return cls(
            accommodation_id=quote.accommodation_id,
            check_in=quote.check_in,
            check_out=quote.check_out,
            pets=quote.pets,
            nights_breakdown={
                key: NightsBreakdownOut.from_item(item) for key, item in breakdown.nights_breakdown().items()
            },
            accommodation_total=breakdown.accommodation_total,
            pets_total=breakdown.pets_total,
            cleaning_fee=breakdown.cleaning_fee,
            total=breakdown.total,
            total_nights=breakdown.total_nights,
            is_valid=quote.is_valid,
        )
