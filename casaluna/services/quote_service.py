from __future__ import annotations

import json
import logging
import os
from datetime import date, datetime
from logging.handlers import RotatingFileHandler

from casaluna.core.config import Settings
from casaluna.models.pricing import Quote
from casaluna.services.calendar import to_date
from casaluna.services.catalog import get_accommodation
from casaluna.services.pricing_service import calculate_price
from casaluna.services.seasons import get_high_season_periods

TIER_LABELS = {
    "weekday": "weekday nights",
    "weekend": "weekend nights",
    "highSeason": "high season nights",
}
CURRENCY = "€"


# --- Logging setup ---
_settings = Settings()
_quote_logger = logging.getLogger("quotes")
if not _quote_logger.handlers:
    _quote_logger.setLevel(_settings.log_level.upper())
    log_dir = os.path.dirname(_settings.quote_log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(_settings.quote_log_path, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
    _quote_logger.addHandler(handler)


def build_quote(
    accommodation_id: str,
    check_in: date | datetime,
    check_out: date | datetime,
    pets: int = 0,
) -> Quote:
    """Price a stay for a catalog accommodation with the configured high season."""
    accommodation = get_accommodation(accommodation_id)
    breakdown = calculate_price(
        accommodation.rate_card,
        check_in,
        check_out,
        pets,
        periods=get_high_season_periods(),
    )
    quote = Quote(
        accommodation_id=accommodation.id,
        check_in=to_date(check_in),
        check_out=to_date(check_out),
        pets=pets,
        breakdown=breakdown,
    )
    _quote_logger.info(
        json.dumps(
            {
                "accommodation": quote.accommodation_id,
                "check_in": quote.check_in.isoformat(),
                "check_out": quote.check_out.isoformat(),
                "pets": pets,
                "nights": breakdown.total_nights,
                "total": breakdown.total,
                "valid": quote.is_valid,
            },
            ensure_ascii=False,
        )
    )
    return quote


def format_quote_lines(quote: Quote) -> list[str]:
    breakdown = quote.breakdown
    lines = []
    for key, item in breakdown.nights_breakdown().items():
        if not item.count:
            continue
        lines.append(
            f"{item.count} {TIER_LABELS[key]} × {item.price_per_night} {CURRENCY} = {item.total} {CURRENCY}"
        )
    if breakdown.pets_total:
        lines.append(f"Pets ({quote.pets}): {breakdown.pets_total} {CURRENCY}")
    lines.append(f"Cleaning fee: {breakdown.cleaning_fee} {CURRENCY}")
    lines.append(f"Total ({breakdown.total_nights} nights): {breakdown.total} {CURRENCY}")
    return lines
