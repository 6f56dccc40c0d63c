"""
Date classification for pricing.

Every night is priced by the date it starts on: high season periods win over
the weekend rule, and anything else is a weekday.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, Sequence

from casaluna.models.pricing import DayType, HighSeasonPeriod
from casaluna.services.seasons import get_high_season_periods

WEEKEND_DAYS = {4, 5}  # Friday, Saturday


def to_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _periods(periods: Sequence[HighSeasonPeriod] | None) -> Sequence[HighSeasonPeriod]:
    return get_high_season_periods() if periods is None else periods


def is_weekend(day: date | datetime) -> bool:
    return to_date(day).weekday() in WEEKEND_DAYS


def is_date_in_period(day: date | datetime, period: HighSeasonPeriod) -> bool:
    day = to_date(day)
    month = day.month

    if period.year is not None and period.year != day.year:
        return False

    if period.wraps_year:
        return (
            (month == period.start_month and day.day >= period.start_day)
            or month > period.start_month
            or month < period.end_month
            or (month == period.end_month and day.day <= period.end_day)
        )

    if month < period.start_month or month > period.end_month:
        return False
    if month == period.start_month and day.day < period.start_day:
        return False
    if month == period.end_month and day.day > period.end_day:
        return False
    return True


def is_high_season(day: date | datetime, periods: Sequence[HighSeasonPeriod] | None = None) -> bool:
    return any(is_date_in_period(day, period) for period in _periods(periods))


def classify_date(day: date | datetime, periods: Sequence[HighSeasonPeriod] | None = None) -> DayType:
    if is_high_season(day, periods):
        return DayType.HIGH_SEASON
    if is_weekend(day):
        return DayType.WEEKEND
    return DayType.WEEKDAY


def iter_nights(check_in: date | datetime, check_out: date | datetime) -> Iterator[date]:
    """Yield the start date of every night; check-out night is not included."""
    current = to_date(check_in)
    end = to_date(check_out)
    while current < end:
        yield current
        current += timedelta(days=1)


def get_nights_by_type(
    check_in: date | datetime,
    check_out: date | datetime,
    periods: Sequence[HighSeasonPeriod] | None = None,
) -> dict[DayType, int]:
    periods = _periods(periods)
    nights = {day_type: 0 for day_type in DayType}
    for night in iter_nights(check_in, check_out):
        nights[classify_date(night, periods)] += 1
    return nights


def get_total_nights(check_in: date | datetime, check_out: date | datetime) -> int:
    diff = (to_date(check_out) - to_date(check_in)).days
    return diff if diff > 0 else 0
