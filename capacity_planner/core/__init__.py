"""
Core planning engine.

Contains:
- Holiday provider
- Leave apportionment
- Availability analyzer
- Date-gap validator and milestone planner
- Date-history recorder
"""

from capacity_planner.core.holiday_provider import (
    HolidayProvider,
    count_holidays_in_range,
    holidays_for_year,
    holidays_in_range,
    supported_regions,
)
from capacity_planner.core.leave import apportion_leave, full_period_entitlement
from capacity_planner.core.availability import AvailabilityAnalyzer, analyze_availability
from capacity_planner.core.gap_validator import validate_date_gaps
from capacity_planner.core.milestones import plan_milestones, release_ga_dates
from capacity_planner.core.date_history import DateHistoryRecorder, diff_milestones

__all__ = [
    "HolidayProvider",
    "count_holidays_in_range",
    "holidays_for_year",
    "holidays_in_range",
    "supported_regions",
    "apportion_leave",
    "full_period_entitlement",
    "AvailabilityAnalyzer",
    "analyze_availability",
    "validate_date_gaps",
    "plan_milestones",
    "release_ga_dates",
    "DateHistoryRecorder",
    "diff_milestones",
]
