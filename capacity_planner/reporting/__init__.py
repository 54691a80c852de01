"""
Presentation helpers for planner results.
"""

from capacity_planner.reporting.formatters import (
    analysis_to_json,
    format_availability_analysis,
    format_date_gap_validation,
    format_defaults,
    format_event_days,
    format_holidays,
    format_vacation_days,
)

__all__ = [
    "analysis_to_json",
    "format_availability_analysis",
    "format_date_gap_validation",
    "format_defaults",
    "format_event_days",
    "format_holidays",
    "format_vacation_days",
]
