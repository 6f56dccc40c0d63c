from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from casaluna.models.pricing import (
    DayType,
    HighSeasonPeriod,
    NightsBreakdownItem,
    PriceBreakdown,
    RateCard,
)
from casaluna.services.calendar import get_nights_by_type, get_total_nights


def _item(count: int, price_per_night: int) -> NightsBreakdownItem:
    return NightsBreakdownItem(count=count, price_per_night=price_per_night, total=count * price_per_night)


def calculate_price(
    rate_card: RateCard,
    check_in: date | datetime,
    check_out: date | datetime,
    pets: int = 0,
    periods: Sequence[HighSeasonPeriod] | None = None,
) -> PriceBreakdown:
    """
    Itemized price of a stay.

    Nights run from check_in up to, not including, check_out. Cleaning and the
    pet fee are flat per stay and are charged even when the range holds no
    nights.
    """
    if pets < 0:
        raise ValueError(f"pets must be >= 0, got {pets}")

    nights = get_nights_by_type(check_in, check_out, periods)
    weekday = _item(nights[DayType.WEEKDAY], rate_card.price_for(DayType.WEEKDAY))
    weekend = _item(nights[DayType.WEEKEND], rate_card.price_for(DayType.WEEKEND))
    high_season = _item(nights[DayType.HIGH_SEASON], rate_card.price_for(DayType.HIGH_SEASON))

    accommodation_total = weekday.total + weekend.total + high_season.total
    pets_total = pets * rate_card.pets
    cleaning_fee = rate_card.cleaning

    total_nights = get_total_nights(check_in, check_out)
    assert total_nights == weekday.count + weekend.count + high_season.count

    return PriceBreakdown(
        weekday=weekday,
        weekend=weekend,
        high_season=high_season,
        accommodation_total=accommodation_total,
        pets_total=pets_total,
        cleaning_fee=cleaning_fee,
        total=accommodation_total + pets_total + cleaning_fee,
        total_nights=total_nights,
    )
