"""
Helper utilities for the Travel Bucket List planner.

This module provides the coercion helpers used to turn user-entered form
values into numbers without ever raising, plus small formatting helpers.
"""

import calendar
import math
import time
from datetime import date
from typing import Any, TypeVar

T = TypeVar("T")

MONTH_LABELS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def generate_trip_id(existing_ids: set[int] | None = None) -> int:
    """
    Generate a new integer trip id.

    Uses the current time in milliseconds, bumped past any id already in
    use so two trips added within the same millisecond never collide.

    Args:
        existing_ids: Ids already present in the collection

    Returns:
        A unique integer id
    """
    candidate = int(time.time() * 1000)
    if existing_ids:
        candidate = max(candidate, max(existing_ids) + 1)
    return candidate


def _to_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return None if math.isnan(value) or math.isinf(value) else float(value)
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return None if math.isnan(number) or math.isinf(number) else number
    return None


def coerce_int(value: Any, default: int = 0) -> int:
    """
    Coerce a user-entered value into an int, truncating toward zero.

    Args:
        value: Raw value (int, float, numeric string, or anything else)
        default: Value returned when the input is not numeric

    Returns:
        The coerced integer or the default
    """
    number = _to_number(value)
    if number is None:
        return default
    return int(number)


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a user-entered value into a float.

    Args:
        value: Raw value
        default: Value returned when the input is not numeric

    Returns:
        The coerced float or the default
    """
    number = _to_number(value)
    if number is None:
        return default
    return number


def coerce_optional_float(value: Any) -> float | None:
    """Coerce to float, mapping blanks and non-numeric values to None."""
    return _to_number(value)


def clamp(value: T, lower: T, upper: T) -> T:
    """Clamp a comparable value into the inclusive range [lower, upper]."""
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up, like Math.round."""
    return math.floor(value + 0.5)


def month_label(month: int | None, missing: str = "TBD") -> str:
    """Short English label for a 1-based month number."""
    if month is None or not 1 <= month <= 12:
        return missing
    return MONTH_LABELS[month - 1]


def add_months(start: date, months: int) -> date:
    """
    Add calendar months to a date, clamping the day to the target month.

    Args:
        start: Starting date
        months: Number of months to add (non-negative)

    Returns:
        The shifted date
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(start.day, last_day))


def format_price(amount: float, currency: str = "£") -> str:
    """
    Format a whole-unit price with thousands separators.

    Args:
        amount: Price amount
        currency: Currency symbol prefix

    Returns:
        Formatted price string, e.g. "£12,000"
    """
    return f"{currency}{round_half_up(amount):,}"

