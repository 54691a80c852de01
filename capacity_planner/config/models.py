"""
Pydantic configuration models for the capacity planner.

These models define the structure and validation for planner configuration.
"""

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings

from capacity_planner.domain.enums import AuditBackend


class LeavePolicy(BaseModel):
    """
    Annual leave allowance used for vacation apportionment.

    Defaults: 18 paid leave days a year, taken as 9 days per 6-month release
    cycle, plus 3 company wellness days.
    """

    annual_paid_leave_days: int = Field(default=18, ge=0, description="Paid leave days per year")
    wellness_days: int = Field(default=3, ge=0, description="Company wellness days per year")
    per_cycle_days: int = Field(default=9, ge=0, description="Paid leave days per release cycle")
    cycle_duration_months: int = Field(
        default=6,
        ge=1,
        le=12,
        description="Release cycle length in months (30-day months)",
    )
    release_cycles_per_year: int = Field(default=2, ge=1, le=12)

    @property
    def cycle_days(self) -> int:
        """Cycle length in calendar days."""
        return self.cycle_duration_months * 30

    def describe(self) -> str:
        """One-line policy description."""
        return (
            f"{self.annual_paid_leave_days} paid leave days/year "
            f"({self.per_cycle_days} per release cycle) + "
            f"{self.wellness_days} wellness days + holidays"
        )


class DateGapsConfig(BaseModel):
    """Expected spacing between adjacent milestones, in whole weeks."""

    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=to_camel),
        populate_by_name=True,
    )

    ga_to_promotion_gate: int = Field(default=4, ge=1, le=52)
    promotion_gate_to_commit_gate: int = Field(default=4, ge=1, le=52)
    commit_gate_to_soft_code_complete: int = Field(default=4, ge=1, le=52)
    soft_code_complete_to_execute_commit: int = Field(default=4, ge=1, le=52)
    execute_commit_to_concept_commit: int = Field(default=4, ge=1, le=52)
    concept_commit_to_pre_cc: int = Field(
        default=4,
        ge=1,
        le=52,
        validation_alias="conceptCommitToPreCC",
    )


class HackathonConfig(BaseModel):
    """
    Annual hackathon schedule, as reported by `defaults`.

    Informational only: event days are always the first Tuesday to Thursday
    of February. validate_config warns when these values are changed.
    """

    days_per_year: int = Field(default=3, ge=0)
    month: str = "February"
    week: str = "first"
    days_of_week: list[str] = Field(default=["Tuesday", "Wednesday", "Thursday"])


class ReleaseCycleConfig(BaseModel):
    """Release cadence: GA on the n-th weekday of each release month."""

    releases_per_year: int = Field(default=2, ge=1, le=12)
    months: list[int] = Field(default=[5, 11], description="GA months (1-12)")
    weekday: int = Field(default=1, ge=0, le=6, description="GA weekday (Monday = 0)")
    week_of_month: int = Field(default=2, ge=1, le=5)

    @field_validator("months")
    @classmethod
    def months_in_range(cls, v: list[int]) -> list[int]:
        """Ensure every month is 1-12."""
        bad = [m for m in v if not 1 <= m <= 12]
        if bad:
            raise ValueError(f"Release months must be 1-12, got {bad}")
        return sorted(v)


class HolidayConfig(BaseModel):
    """Holiday provider settings."""

    region: str = Field(default="US", description="Region used by the analyzer")
    regions: list[str] = Field(
        default=["US", "IN"],
        description="Regions offered to callers",
    )


class InsightThresholds(BaseModel):
    """Numeric triggers for analysis insights and recommendations."""

    low_efficiency_pct: float = Field(default=70.0, ge=0, le=100)
    high_efficiency_pct: float = Field(default=80.0, ge=0, le=100)
    high_holiday_count: int = Field(default=8, ge=0)
    high_vacation_insight: int = Field(default=5, ge=0)
    high_vacation_recommendation: int = Field(default=4, ge=0)
    long_project_months: float = Field(default=6.0, ge=0)
    short_project_months: float = Field(default=3.0, ge=0)
    min_code_complete_days: int = Field(default=30, ge=0)


class AuditConfig(BaseModel):
    """Where date-history change events are published."""

    enabled: bool = Field(default=True, description="Publish date change events")
    backend: AuditBackend = Field(default=AuditBackend.LOG)
    topic_strategy: str = Field(
        default="per_table",
        description="Topic resolution: per_table | single | custom",
    )
    topic_prefix: str = Field(default="", description="Topic prefix")
    topic_mapping: dict[str, str] = Field(default_factory=dict)
    json_file_output_dir: str = Field(
        default="data/audit",
        description="Output directory for json_file backend (NDJSON files)",
    )
    log_level: str = Field(default="info", description="Log level for log backend")

    @field_validator("topic_strategy")
    @classmethod
    def known_strategy(cls, v: str) -> str:
        if v not in ("per_table", "single", "custom"):
            raise ValueError(f"Unknown topic strategy: {v}")
        return v


class PlannerConfig(BaseSettings):
    """
    Root planner configuration.

    Values can be loaded from YAML files and overridden via environment
    variables (``CAPACITY_PLANNER_LEAVE__PER_CYCLE_DAYS=10``).
    """

    leave: LeavePolicy = Field(default_factory=LeavePolicy)
    date_gaps: DateGapsConfig = Field(default_factory=DateGapsConfig)
    hackathon: HackathonConfig = Field(default_factory=HackathonConfig)
    release: ReleaseCycleConfig = Field(default_factory=ReleaseCycleConfig)
    holidays: HolidayConfig = Field(default_factory=HolidayConfig)
    insights: InsightThresholds = Field(default_factory=InsightThresholds)
    audit: AuditConfig = Field(default_factory=AuditConfig)

    model_config = {
        "env_prefix": "CAPACITY_PLANNER_",
        "env_nested_delimiter": "__",
    }
