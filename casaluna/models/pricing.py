from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class DayType(str, Enum):
    """Pricing tier of a single night. Priority: highSeason > weekend > weekday."""

    WEEKDAY = "weekday"
    WEEKEND = "weekend"
    HIGH_SEASON = "highSeason"


@dataclass(frozen=True)
class HighSeasonPeriod:
    name: str
    start_month: int
    start_day: int
    end_month: int
    end_day: int
    year: int | None = None

    @property
    def wraps_year(self) -> bool:
        # e.g. Dec 24 -> Jan 6
        return self.start_month > self.end_month


@dataclass(frozen=True)
class RateCard:
    weekday: int
    weekend: int
    high_season: int
    cleaning: int
    pets: int = 0

    def price_for(self, day_type: DayType) -> int:
        if day_type is DayType.HIGH_SEASON:
            return self.high_season
        if day_type is DayType.WEEKEND:
            return self.weekend
        return self.weekday


@dataclass(frozen=True)
class Accommodation:
    id: str
    title: str
    slug: str
    short_description: str
    capacity: int
    size: int
    rate_card: RateCard
    amenities: tuple[str, ...] = field(default_factory=tuple)
    featured: bool = False
    order: int = 0


@dataclass(frozen=True)
class NightsBreakdownItem:
    count: int
    price_per_night: int
    total: int


@dataclass(frozen=True)
class PriceBreakdown:
    weekday: NightsBreakdownItem
    weekend: NightsBreakdownItem
    high_season: NightsBreakdownItem
    accommodation_total: int
    pets_total: int
    cleaning_fee: int
    total: int
    total_nights: int

    def nights_breakdown(self) -> dict[str, NightsBreakdownItem]:
        return {
            DayType.WEEKDAY.value: self.weekday,
            DayType.WEEKEND.value: self.weekend,
            DayType.HIGH_SEASON.value: self.high_season,
        }


@dataclass(frozen=True)
class Quote:
    accommodation_id: str
    check_in: date
    check_out: date
    pets: int
    breakdown: PriceBreakdown

    @property
    def is_valid(self) -> bool:
        return self.breakdown.total_nights > 0
