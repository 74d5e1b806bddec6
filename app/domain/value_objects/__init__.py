"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    FEES_NOT_AVAILABLE,
    Course,
    Trade,
    parse_courses,
    resolve_trade_fees,
)

__all__ = [
    "FEES_NOT_AVAILABLE",
    "Course",
    "Trade",
    "parse_courses",
    "resolve_trade_fees",
]
