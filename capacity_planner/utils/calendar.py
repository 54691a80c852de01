"""
Working-day and hackathon calendar utilities.

Provides functions for counting working days (Monday to Friday) between
milestones, locating weekday-anchored dates within a month, and determining
the annual three-day hackathon.
"""

from datetime import date, timedelta

import numpy as np
from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

from capacity_planner.domain.models import EventDay
from capacity_planner.utils.time_conversion import to_date, years_in_range

_WEEKDAYS = (MO, TU, WE, TH, FR, SA, SU)

HACKATHON_MONTH = 2
HACKATHON_LENGTH_DAYS = 3


def count_working_days(start: date, end: date) -> int:
    """
    Count working days (Monday to Friday) between two dates, inclusive.

    Equivalent to walking every calendar day from start to end and counting
    weekdays; holidays are not excluded here.

    Args:
        start: First day of the range
        end: Last day of the range

    Returns:
        Number of weekdays, 0 if end is before start
    """
    start, end = to_date(start), to_date(end)
    if end < start:
        return 0
    return int(
        np.busday_count(
            np.datetime64(start, "D"),
            np.datetime64(end + timedelta(days=1), "D"),
        )
    )


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    Get the n-th occurrence of a weekday in a month.

    Finds the first such weekday of the month and adds whole weeks.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Python weekday (Monday = 0)
        n: Occurrence, 1-based

    Returns:
        Date of the n-th weekday
    """
    return date(year, month, 1) + relativedelta(weekday=_WEEKDAYS[weekday](+n))


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Get the last occurrence of a weekday in a month."""
    return date(year, month, 1) + relativedelta(day=31, weekday=_WEEKDAYS[weekday](-1))


def recurring_event_dates_for_year(year: int) -> list[date]:
    """
    Get the hackathon dates for a year.

    The hackathon always runs Tuesday to Thursday of the first week of
    February, starting on the first Tuesday of the month.

    Args:
        year: Year

    Returns:
        [tuesday, wednesday, thursday]
    """
    february_1 = date(year, HACKATHON_MONTH, 1)
    day_of_week = february_1.isoweekday() % 7  # Sunday = 0

    if day_of_week <= 2:
        days_to_add = 2 - day_of_week
    else:
        days_to_add = 9 - day_of_week

    first_tuesday = february_1 + timedelta(days=days_to_add)
    return [first_tuesday + timedelta(days=i) for i in range(HACKATHON_LENGTH_DAYS)]


def event_days_for_period(start: date, end: date) -> list[EventDay]:
    """
    Get the hackathon days falling inside [start, end].

    Args:
        start: First day of the range
        end: Last day of the range

    Returns:
        Hackathon days in chronological order, with a display reason
    """
    start, end = to_date(start), to_date(end)
    days = []
    for year in years_in_range(start, end):
        for event_date in recurring_event_dates_for_year(year):
            if start <= event_date <= end:
                days.append(
                    EventDay(
                        date=event_date,
                        reason=f"Hackathon Day ({event_date:%b} {event_date.day})",
                    )
                )
    return days


def event_days_in_range(start: date, end: date) -> int:
    """
    Count hackathon days inside [start, end].

    Args:
        start: First day of the range
        end: Last day of the range

    Returns:
        Number of hackathon days in the range
    """
    return len(event_days_for_period(start, end))
