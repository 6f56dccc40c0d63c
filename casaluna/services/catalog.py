from __future__ import annotations

from typing import Any

from casaluna.brand.config import ACCOMMODATIONS
from casaluna.models.pricing import Accommodation, RateCard


class AccommodationNotFound(LookupError):
    def __init__(self, accommodation_id: str) -> None:
        super().__init__(f"Unknown accommodation: {accommodation_id}")
        self.accommodation_id = accommodation_id


def _to_accommodation(entry: dict[str, Any]) -> Accommodation:
    pricing = entry["pricing"]
    return Accommodation(
        id=entry["id"],
        title=entry["title"],
        slug=entry["slug"],
        short_description=entry.get("short_description", ""),
        capacity=int(entry["capacity"]),
        size=int(entry.get("size") or 0),
        amenities=tuple(entry.get("amenities") or ()),
        featured=bool(entry.get("featured", False)),
        order=int(entry.get("order", 0)),
        rate_card=RateCard(
            weekday=int(pricing["weekday"]),
            weekend=int(pricing["weekend"]),
            high_season=int(pricing["high_season"]),
            cleaning=int(pricing["cleaning"]),
            pets=int(pricing.get("pets") or 0),
        ),
    )


_CATALOG: tuple[Accommodation, ...] = tuple(
    sorted((_to_accommodation(entry) for entry in ACCOMMODATIONS), key=lambda a: a.order)
)


def list_accommodations() -> list[Accommodation]:
    return list(_CATALOG)


def get_accommodation(accommodation_id: str) -> Accommodation:
    """Look up by id or slug, case-insensitive."""
    key = (accommodation_id or "").strip().lower()
    for accommodation in _CATALOG:
        if key in {accommodation.id, accommodation.slug}:
            return accommodation
    raise AccommodationNotFound(accommodation_id)
