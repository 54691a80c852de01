"""
Markdown and JSON renderers for planner results.
"""

import json
from datetime import date
from typing import Any

from capacity_planner.config.models import LeavePolicy
from capacity_planner.domain.models import (
    AvailabilityAnalysis,
    EventDay,
    GapValidationResult,
    HolidayEntry,
    PeriodCounts,
)


def _bullets(items: list[str], prefix: str = "") -> str:
    return "\n".join(f"- {prefix}{item}" for item in items)


def _period_lines(counts: PeriodCounts) -> str:
    return (
        f"- Code Complete Period: {counts.code_complete_period} days\n"
        f"- After Code Complete Period: {counts.after_code_complete_period} days"
    )


def format_availability_analysis(analysis: AvailabilityAnalysis) -> str:
    """
    Render an availability analysis as Markdown.

    Args:
        analysis: Analysis to render

    Returns:
        Markdown report
    """
    d = analysis.deductions
    a = analysis.availability
    return f"""# Availability Analysis

## Project Timeline
- **Execute Commit Date**: {analysis.execute_commit.isoformat()}
- **Soft Code Complete Date**: {analysis.soft_code_complete.isoformat()}
- **GA Date**: {analysis.ga.isoformat()}
- **Region**: {analysis.region}

## Working Days
- **Total Working Days**: {analysis.total_working_days}
- **Code Complete Period**: {analysis.code_complete_working_days} days
- **After Code Complete Period**: {analysis.after_code_complete_working_days} days

## Deductions
### Holidays: {d.holidays.total} days
{_period_lines(d.holidays)}

### Hackathon Days: {d.event_days.total} days
{_period_lines(d.event_days)}

### Vacations: {d.vacations.total} days
{_period_lines(d.vacations)}

## Final Availability
- **Days Available to Code Complete**: {a.days_available_to_code_complete}
- **Days Available After Code Complete**: {a.days_available_after_code_complete}
- **Total Available Days**: {a.total_available_days}
- **Efficiency**: {a.efficiency:.1f}%

## Insights
{_bullets(analysis.insights)}

## Recommendations
{_bullets(analysis.recommendations)}"""


def format_holidays(holidays: list[HolidayEntry], start: date, end: date) -> str:
    """Render a holiday list for a period."""
    rows = [f"**{h.name}** ({h.date.isoformat()}) - {h.kind.value}" for h in holidays]
    return f"""# Holidays Analysis

**Period**: {start.isoformat()} to {end.isoformat()}
**Total Holidays**: {len(holidays)}

## Holiday Breakdown
{_bullets(rows)}"""


def format_event_days(event_days: list[EventDay], start: date, end: date) -> str:
    """Render hackathon days for a period."""
    rows = [f"**{day.reason}** ({day.date.isoformat()})" for day in event_days]
    return f"""# Hackathon Days Analysis

**Period**: {start.isoformat()} to {end.isoformat()}
**Total Hackathon Days**: {len(event_days)}

## Hackathon Days
{_bullets(rows)}"""


def format_vacation_days(
    vacation_days: int,
    start: date,
    end: date,
    policy: LeavePolicy | None = None,
) -> str:
    """Render an apportioned vacation count with the policy it came from."""
    policy = policy or LeavePolicy()
    return f"""# Vacation Days Analysis

**Period**: {start.isoformat()} to {end.isoformat()}
**Vacation Days**: {vacation_days}

**Policy**: {policy.describe()}"""


def format_defaults(defaults: dict[str, Any], category: str) -> str:
    """Render default values as a fenced JSON block."""
    body = json.dumps(defaults, indent=2)
    return f"""# Default Configuration

**Category**: {category}

```json
{body}
```"""


def format_date_gap_validation(result: GapValidationResult) -> str:
    """Render a gap validation result."""
    text = f"""# Date Gap Validation

## Warnings ({len(result.warnings)})
{_bullets(result.warnings, prefix="WARNING: ")}

## Errors ({len(result.errors)})
{_bullets(result.errors, prefix="ERROR: ")}"""
    if result.is_valid:
        text += "\n\nAll date gaps are valid!"
    return text


def analysis_to_json(analysis: AvailabilityAnalysis, indent: int | None = 2) -> str:
    """Serialize an analysis to JSON, including the total deduction count."""
    payload = analysis.model_dump(mode="json")
    payload["total_deductions"] = analysis.total_deductions
    return json.dumps(payload, indent=indent)
