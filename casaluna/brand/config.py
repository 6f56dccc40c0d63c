# Brand-specific configuration constants (Casa Luna, El Perelló)
# NOTE: Keep this file free of business logic.

HOUSE_INFO = {
    "name": "Casa Luna",
    "location_description": "Between valleys and mountains, 10 min from El Perelló and 20 min from the sea",
    "access": "Scenic dirt road, signposted from El Perelló",
    "whatsapp": "+34 681 315 149",
    "languages": ["es", "ca", "en", "fr"],
}

ACCOMMODATION_NOTES = {
    "cleaning_fee": 35,
    "discount_7_nights": 10,  # % off for 7+ nights, not in high season
    "check_in": "15:00",
    "check_out": "11:00",
    "pets_policy": "Pets travel for free",
    "high_season_months": "July, August, Christmas and Easter",
}

# weekday: Sunday to Thursday, weekend: Friday and Saturday
ACCOMMODATIONS = [
    {
        "id": "la-casita",
        "title": "La Casita",
        "slug": "la-casita",
        "short_description": (
            "Newly built log cabin with well-equipped kitchen, living room with sofa bed, and private terrace."
        ),
        "capacity": 2,
        "size": 40,
        "amenities": [
            "Well-equipped kitchen",
            "Living room with sofa bed",
            "Pellet stove",
            "Separated double bedroom",
            "Large shower",
            "Private terrace",
            "Sunloungers",
            "Free WiFi",
            "Pets allowed (free)",
        ],
        "pricing": {
            "weekday": 75,
            "weekend": 80,
            "high_season": 90,
            "cleaning": ACCOMMODATION_NOTES["cleaning_fee"],
            "pets": 0,
        },
        "featured": True,
        "order": 1,
    },
    {
        "id": "la-olivita",
        "title": "La Olivita",
        "slug": "la-olivita",
        "short_description": "Newly renovated with mezzanine sleeping loft, wood burner, and terrace with BBQ.",
        "capacity": 2,
        "size": 35,
        "amenities": [
            "Well-equipped kitchen",
            "Living room with sofa bed",
            "Wood burner",
            "Mezzanine sleeping loft (double bed)",
            "Composting toilet",
            "Private terrace",
            "BBQ / Plancha",
            "Free WiFi",
            "Pets allowed (free)",
        ],
        "pricing": {
            "weekday": 75,
            "weekend": 80,
            "high_season": 90,
            "cleaning": ACCOMMODATION_NOTES["cleaning_fee"],
            "pets": 0,
        },
        "featured": True,
        "order": 2,
    },
    {
        "id": "casa-luna",
        "title": "Casa Luna",
        "slug": "casa-luna",
        "short_description": (
            "Eco-friendly wooden house with 2 bedrooms, 2 bathrooms, shared pool, and stunning valley views."
        ),
        "capacity": 4,
        "size": 65,
        "amenities": [
            "2 bedrooms",
            "2 bathrooms (one with composting toilet)",
            "Well-equipped kitchen",
            "Fireplace",
            "Outdoor terrace",
            "Grill",
            "Shared pool (June-September)",
            "High-speed WiFi",
            "Child-friendly (mini-crib available)",
            "Pets allowed (free)",
        ],
        "pricing": {
            "weekday": 95,
            "weekend": 110,
            "high_season": 120,
            "cleaning": ACCOMMODATION_NOTES["cleaning_fee"],
            "pets": 0,
        },
        "featured": True,
        "order": 3,
    },
]

# Month/day ranges, end inclusive. "year" pins moving holidays.
DEFAULT_HIGH_SEASON_PERIODS = [
    {"name": "July", "start_month": 7, "start_day": 1, "end_month": 7, "end_day": 31},
    {"name": "August", "start_month": 8, "start_day": 1, "end_month": 8, "end_day": 31},
    {"name": "San Juan", "start_month": 6, "start_day": 23, "end_month": 6, "end_day": 24},
    {"name": "Christmas", "start_month": 12, "start_day": 24, "end_month": 1, "end_day": 6},
    {"name": "Easter 2025", "start_month": 4, "start_day": 18, "end_month": 4, "end_day": 21, "year": 2025},
    {"name": "Easter 2026", "start_month": 3, "start_day": 29, "end_month": 4, "end_day": 5, "year": 2026},
]
