"""
Domain models for the capacity planner.

Pydantic models for milestone dates, holiday entries, availability analysis
results, gap validation results and date-history change events.
"""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from capacity_planner.domain.enums import HolidayKind, Milestone

MILESTONE_ORDER: tuple[str, ...] = tuple(m.value for m in Milestone)


class MilestoneDates(BaseModel):
    """
    Milestone dates for one release, earliest first.

    Each date should precede the next, but ordering is not enforced.
    """

    model_config = ConfigDict(populate_by_name=True)

    pre_cc_complete: Optional[date] = Field(default=None, alias="preCcCompleteDate")
    concept_commit: Optional[date] = Field(default=None, alias="conceptCommitDate")
    execute_commit: Optional[date] = Field(default=None, alias="executeCommitDate")
    soft_code_complete: Optional[date] = Field(default=None, alias="softCodeCompleteDate")
    commit_gate_met: Optional[date] = Field(default=None, alias="commitGateDate")
    promotion_gate_met: Optional[date] = Field(default=None, alias="promotionGateDate")
    ga: Optional[date] = Field(default=None, alias="gaDate")

    def as_dict(self) -> dict[str, Optional[date]]:
        """Milestone name to date, earliest first."""
        return {name: getattr(self, name) for name in MILESTONE_ORDER}


class HolidayEntry(BaseModel):
    """A named holiday for one year and region."""

    model_config = ConfigDict(frozen=True)

    name: str
    date: date
    kind: HolidayKind
    region: str = Field(default="*", description="Region table that produced it ('*' = all)")


class EventDay(BaseModel):
    """A hackathon day with its display reason."""

    model_config = ConfigDict(frozen=True)

    date: date
    reason: str


class PeriodCounts(BaseModel):
    """Day counts split across the two release sub-periods."""

    total: int = 0
    code_complete_period: int = 0
    after_code_complete_period: int = 0


class HolidayDeductions(PeriodCounts):
    """Holiday deductions with the contributing entries."""

    breakdown: list[HolidayEntry] = Field(default_factory=list)


class EventDayDeductions(PeriodCounts):
    """Hackathon deductions with the contributing days."""

    breakdown: list[EventDay] = Field(default_factory=list)


class VacationDeductions(PeriodCounts):
    """Apportioned vacation deductions."""

    policy: str = ""


class Deductions(BaseModel):
    """All deductions applied to raw working days."""

    holidays: HolidayDeductions = Field(default_factory=HolidayDeductions)
    event_days: EventDayDeductions = Field(default_factory=EventDayDeductions)
    vacations: VacationDeductions = Field(default_factory=VacationDeductions)

    @property
    def total(self) -> int:
        return self.holidays.total + self.event_days.total + self.vacations.total


class Availability(BaseModel):
    """Final availability after deductions."""

    days_available_to_code_complete: int = 0
    days_available_after_code_complete: int = 0
    total_available_days: int = 0
    efficiency: float = Field(default=0.0, description="Available days / working days, in percent")


class AvailabilityAnalysis(BaseModel):
    """
    Result of an availability analysis for one release.

    Derived on demand from three milestone dates; the planner never persists
    it. ``to_snapshot`` gives the record a collaborator stores as a frozen
    baseline.
    """

    execute_commit: date
    soft_code_complete: date
    ga: date
    region: str = "US"

    total_working_days: int
    code_complete_working_days: int
    after_code_complete_working_days: int

    deductions: Deductions
    availability: Availability

    insights: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    computed_at: datetime = Field(default_factory=datetime.now)

    @property
    def total_deductions(self) -> int:
        return self.deductions.total

    def to_snapshot(self, release_plan_id: str) -> dict[str, Any]:
        """
        JSON-compatible snapshot keyed by release plan and computation time.

        Args:
            release_plan_id: Release plan the analysis belongs to

        Returns:
            Dictionary ready for storage
        """
        return {
            "release_plan_id": release_plan_id,
            "computed_at": self.computed_at.isoformat(),
            "analysis": self.model_dump(mode="json"),
        }


class GapValidationResult(BaseModel):
    """Result of comparing milestone spacing to the configured gaps."""

    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.warnings and not self.errors


class DateChangeEvent(BaseModel):
    """A single milestone date change on a release plan."""

    model_config = ConfigDict(frozen=True)

    release_plan_id: str
    field_name: str
    old_date: Optional[date] = None
    new_date: Optional[date] = None
    changed_by: str
    change_reason: Optional[str] = None
    changed_at: datetime = Field(default_factory=datetime.now)
