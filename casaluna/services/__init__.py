from .calendar import classify_date, get_nights_by_type, is_date_in_period
from .pricing_service import calculate_price

__all__ = [
    "classify_date",
    "get_nights_by_type",
    "is_date_in_period",
    "calculate_price",
]
