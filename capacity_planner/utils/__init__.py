"""
Utility modules for the capacity planner.

Provides:
- Date conversion utilities
- Working-day and hackathon calendar
- Structured logging configuration
"""

from capacity_planner.utils.time_conversion import (
    to_date,
    days_between,
    add_weeks,
    previous_business_day,
    round_half_away,
)
from capacity_planner.utils.calendar import (
    count_working_days,
    recurring_event_dates_for_year,
    event_days_in_range,
    event_days_for_period,
    nth_weekday_of_month,
    last_weekday_of_month,
)
from capacity_planner.utils.logging import configure_logging, get_logger

__all__ = [
    # Date conversion
    "to_date",
    "days_between",
    "add_weeks",
    "previous_business_day",
    "round_half_away",
    # Calendar
    "count_working_days",
    "recurring_event_dates_for_year",
    "event_days_in_range",
    "event_days_for_period",
    "nth_weekday_of_month",
    "last_weekday_of_month",
    # Logging
    "configure_logging",
    "get_logger",
]
