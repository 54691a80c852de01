"""
Tests for report formatters.
"""

import json
from datetime import date

import pytest

from capacity_planner.core.availability import analyze_availability
from capacity_planner.core.holiday_provider import holidays_in_range
from capacity_planner.domain.models import GapValidationResult
from capacity_planner.reporting.formatters import (
    analysis_to_json,
    format_availability_analysis,
    format_date_gap_validation,
    format_defaults,
    format_event_days,
    format_holidays,
    format_vacation_days,
)
from capacity_planner.utils.calendar import event_days_for_period


@pytest.fixture
def analysis(scenario_dates):
    return analyze_availability(*scenario_dates)


class TestAvailabilityReport:
    def test_sections_in_order(self, analysis):
        text = format_availability_analysis(analysis)
        headers = [line for line in text.splitlines() if line.startswith("## ")]

        assert headers == [
            "## Project Timeline",
            "## Working Days",
            "## Deductions",
            "## Final Availability",
            "## Insights",
            "## Recommendations",
        ]

    def test_values(self, analysis):
        text = format_availability_analysis(analysis)

        assert "- **Total Working Days**: 44" in text
        assert "### Hackathon Days: 3 days" in text
        assert "- **Total Available Days**: 37" in text
        assert "- **Efficiency**: 84.1%" in text

    def test_json(self, analysis):
        payload = json.loads(analysis_to_json(analysis))

        assert payload["total_working_days"] == 44
        assert payload["total_deductions"] == 8
        assert payload["deductions"]["event_days"]["after_code_complete_period"] == 3


class TestListings:
    def test_holidays(self):
        start, end = date(2024, 1, 2), date(2024, 3, 1)
        text = format_holidays(holidays_in_range(start, end), start, end)

        assert "**Total Holidays**: 2" in text
        assert "- **Presidents' Day** (2024-02-19) - fixed-national" in text

    def test_event_days(self):
        start, end = date(2024, 2, 1), date(2024, 3, 1)
        text = format_event_days(event_days_for_period(start, end), start, end)

        assert "**Total Hackathon Days**: 3" in text
        assert "- **Hackathon Day (Feb 7)** (2024-02-07)" in text

    def test_vacation(self):
        text = format_vacation_days(2, date(2024, 1, 2), date(2024, 2, 1))

        assert "**Vacation Days**: 2" in text
        assert "9 per release cycle" in text

    def test_defaults(self):
        text = format_defaults({"ga_to_promotion_gate": 4}, "date_gaps")

        assert "**Category**: date_gaps" in text
        assert '"ga_to_promotion_gate": 4' in text


class TestGapValidationReport:
    def test_valid(self):
        text = format_date_gap_validation(GapValidationResult())

        assert "## Warnings (0)" in text
        assert text.endswith("All date gaps are valid!")

    def test_warnings(self):
        result = GapValidationResult(
            warnings=["GA to Promotion Gate: Expected 4 weeks, got 3 weeks"]
        )
        text = format_date_gap_validation(result)

        assert "## Warnings (1)" in text
        assert "- WARNING: GA to Promotion Gate: Expected 4 weeks, got 3 weeks" in text
        assert "All date gaps are valid!" not in text
