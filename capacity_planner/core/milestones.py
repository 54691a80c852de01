"""
Milestone planning from a GA target.

Works backwards from GA through the configured date gaps to propose the
earlier milestones, and lists GA targets for the release cadence.
"""

from datetime import date

from capacity_planner.config.models import DateGapsConfig, ReleaseCycleConfig
from capacity_planner.core.gap_validator import ADJACENCIES
from capacity_planner.domain.models import MilestoneDates
from capacity_planner.utils.calendar import nth_weekday_of_month
from capacity_planner.utils.time_conversion import add_weeks, previous_business_day, to_date


def plan_milestones(ga: date, gaps: DateGapsConfig | None = None) -> MilestoneDates:
    """
    Propose milestone dates by stepping back from GA.

    Each milestone is the previous one minus the adjacency's gap in weeks,
    rolled back to a business day when it lands on a weekend. Later steps
    continue from the rolled-back date.

    Args:
        ga: Target GA date
        gaps: Expected gaps (defaults if None)

    Returns:
        MilestoneDates with every field set
    """
    gaps = gaps or DateGapsConfig()
    ga = to_date(ga)

    planned = {"ga": ga}
    for _label, later, earlier, gap_field in ADJACENCIES:
        weeks = getattr(gaps, gap_field)
        planned[earlier] = previous_business_day(add_weeks(planned[later], -weeks))

    return MilestoneDates(**planned)


def release_ga_dates(year: int, release_config: ReleaseCycleConfig | None = None) -> list[date]:
    """
    GA target dates for a year's release cadence.

    Defaults to the second Tuesday of May and November.

    Args:
        year: Calendar year
        release_config: Release cadence (defaults if None)

    Returns:
        GA dates in chronological order
    """
    config = release_config or ReleaseCycleConfig()
    return [
        nth_weekday_of_month(year, month, config.weekday, config.week_of_month)
        for month in config.months
    ]
