"""
Domain models for the capacity planner.

Pydantic models representing milestones, holidays and analysis results.
"""

from capacity_planner.domain.enums import (
    AuditBackend,
    HolidayKind,
    Milestone,
)
from capacity_planner.domain.models import (
    MILESTONE_ORDER,
    Availability,
    AvailabilityAnalysis,
    DateChangeEvent,
    Deductions,
    EventDay,
    EventDayDeductions,
    GapValidationResult,
    HolidayDeductions,
    HolidayEntry,
    MilestoneDates,
    PeriodCounts,
    VacationDeductions,
)

__all__ = [
    # Enums
    "AuditBackend",
    "HolidayKind",
    "Milestone",
    # Models
    "MILESTONE_ORDER",
    "Availability",
    "AvailabilityAnalysis",
    "DateChangeEvent",
    "Deductions",
    "EventDay",
    "EventDayDeductions",
    "GapValidationResult",
    "HolidayDeductions",
    "HolidayEntry",
    "MilestoneDates",
    "PeriodCounts",
    "VacationDeductions",
]
