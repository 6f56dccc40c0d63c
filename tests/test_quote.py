from datetime import date

import pytest

from casaluna.services.catalog import AccommodationNotFound, get_accommodation, list_accommodations
from casaluna.services.quote_service import build_quote, format_quote_lines


def test_catalog_order_and_rates():
    accommodations = list_accommodations()
    assert [a.id for a in accommodations] == ["la-casita", "la-olivita", "casa-luna"]

    casa_luna = get_accommodation("casa-luna")
    assert casa_luna.capacity == 4
    assert casa_luna.rate_card.weekday == 95
    assert casa_luna.rate_card.weekend == 110
    assert casa_luna.rate_card.high_season == 120
    assert casa_luna.rate_card.cleaning == 35
    assert casa_luna.rate_card.pets == 0


def test_lookup_is_case_insensitive():
    assert get_accommodation(" La-Casita ").id == "la-casita"


def test_unknown_accommodation():
    with pytest.raises(AccommodationNotFound):
        get_accommodation("the-yurt")


def test_build_quote_for_weekend_stay():
    # Friday -> Monday
    quote = build_quote("casa-luna", date(2025, 10, 17), date(2025, 10, 20), pets=1)

    assert quote.is_valid
    assert quote.accommodation_id == "casa-luna"
    assert quote.breakdown.weekend.count == 2
    assert quote.breakdown.weekday.count == 1
    assert quote.breakdown.pets_total == 0
    assert quote.breakdown.total == 2 * 110 + 95 + 35


def test_empty_range_is_not_a_valid_quote():
    quote = build_quote("la-olivita", date(2025, 10, 17), date(2025, 10, 17))

    assert not quote.is_valid
    assert quote.breakdown.total == 35


def test_format_quote_lines():
    quote = build_quote("la-casita", date(2025, 7, 31), date(2025, 8, 3))
    lines = format_quote_lines(quote)

    assert lines == [
        "3 high season nights × 90 € = 270 €",
        "Cleaning fee: 35 €",
        "Total (3 nights): 305 €",
    ]
