"""
Date conversion utilities for the capacity planner.

Provides date manipulation functions used throughout the planning engine.
All arithmetic is done on whole calendar days (``date`` objects), never on
floating timestamps.
"""

from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal


def to_date(value: date | datetime | str) -> date:
    """
    Normalize a date-like value to a calendar date.

    Time-of-day is dropped from datetimes; strings must be ISO formatted.

    Args:
        value: date, datetime or ISO date string

    Returns:
        Calendar date

    Raises:
        TypeError: If the value is not date-like
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def days_between(start: date, end: date) -> int:
    """
    Calculate the number of days between two dates.

    Args:
        start: Start date
        end: End date

    Returns:
        Number of days (positive if end > start)
    """
    return (to_date(end) - to_date(start)).days


def add_weeks(d: date, weeks: int) -> date:
    """Add whole weeks to a date (negative to go back)."""
    return d + timedelta(weeks=weeks)


def previous_business_day(d: date) -> date:
    """
    Get the previous business day (Monday to Friday) on or before a date.

    Args:
        d: Starting date

    Returns:
        Business day on or before the given date
    """
    while d.weekday() >= 5:  # Saturday = 5, Sunday = 6
        d = d - timedelta(days=1)
    return d


def years_in_range(start: date, end: date) -> range:
    """Years touched by [start, end]; empty when end precedes start's year."""
    return range(to_date(start).year, to_date(end).year + 1)


def date_range(start: date, end: date) -> list[date]:
    """
    Generate a list of dates from start to end (inclusive).

    Args:
        start: Start date
        end: End date

    Returns:
        List of dates
    """
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    leave and week counts use conventional rounding instead.

    Args:
        value: Number to round

    Returns:
        Rounded integer
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
