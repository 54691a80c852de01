"""
Date-gap validation.

Compares the spacing between adjacent release milestones with the expected
gap in weeks and reports mismatches as warnings.
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel

from capacity_planner.config.models import DateGapsConfig
from capacity_planner.domain.models import GapValidationResult, MilestoneDates
from capacity_planner.utils.time_conversion import round_half_away, to_date

# (label, later milestone, earlier milestone, gap field), latest first
ADJACENCIES: tuple[tuple[str, str, str, str], ...] = (
    ("GA to Promotion Gate", "ga", "promotion_gate_met", "ga_to_promotion_gate"),
    (
        "Promotion Gate to Commit Gate",
        "promotion_gate_met",
        "commit_gate_met",
        "promotion_gate_to_commit_gate",
    ),
    (
        "Commit Gate to Soft Code Complete",
        "commit_gate_met",
        "soft_code_complete",
        "commit_gate_to_soft_code_complete",
    ),
    (
        "Soft Code Complete to Execute Commit",
        "soft_code_complete",
        "execute_commit",
        "soft_code_complete_to_execute_commit",
    ),
    (
        "Execute Commit to Concept Commit",
        "execute_commit",
        "concept_commit",
        "execute_commit_to_concept_commit",
    ),
    ("Concept Commit to Pre-CC", "concept_commit", "pre_cc_complete", "concept_commit_to_pre_cc"),
)

# Extra spellings accepted for milestone keys in plain mappings
_MILESTONE_KEYS = {
    "promotion_gate": "promotion_gate_met",
    "commit_gate": "commit_gate_met",
    "pre_cc": "pre_cc_complete",
}


def _to_snake(key: str) -> str:
    out = []
    for i, ch in enumerate(key):
        if ch.isupper() and i > 0 and not key[i - 1].isupper():
            out.append("_")
        out.append(ch.lower())
    return "".join(out)


def _normalize_milestone_key(key: str) -> str:
    key = _to_snake(key)
    if key.endswith("_date"):
        key = key[: -len("_date")]
    return _MILESTONE_KEYS.get(key, key)


def _milestone_dates(actual_dates: Any) -> dict[str, Optional[date]]:
    if isinstance(actual_dates, MilestoneDates):
        return actual_dates.as_dict()
    if isinstance(actual_dates, Mapping):
        return {
            _normalize_milestone_key(key): to_date(value) if value else None
            for key, value in actual_dates.items()
        }
    raise TypeError(f"Expected milestone dates, got {type(actual_dates).__name__}")


def _expected_gaps(expected_gaps_weeks: Any) -> dict[str, int]:
    if expected_gaps_weeks is None:
        return DateGapsConfig().model_dump()
    if isinstance(expected_gaps_weeks, BaseModel):
        gaps = DateGapsConfig.model_validate(expected_gaps_weeks.model_dump())
    else:
        gaps = DateGapsConfig.model_validate(dict(expected_gaps_weeks))
    # Unsupplied gaps are not checked
    return gaps.model_dump(include=gaps.model_fields_set)


def weeks_between(a: date, b: date) -> int:
    """Whole weeks between two dates, rounded half away from zero."""
    return round_half_away(abs((b - a).days) / 7)


def validate_date_gaps(
    actual_dates: MilestoneDates | Mapping[str, Any],
    expected_gaps_weeks: DateGapsConfig | Mapping[str, int] | None = None,
) -> GapValidationResult:
    """
    Validate milestone spacing against expected gaps.

    Adjacencies where either date or the expected gap is missing are
    skipped. Each mismatch adds a warning such as ``"GA to Promotion Gate: Expected 4 weeks, got 3 weeks"``.
    ``errors`` is currently always empty.

    Args:
        actual_dates: MilestoneDates or a mapping of milestone to date.
            Keys may be snake_case or camelCase, with or without a
            ``_date`` suffix.
        expected_gaps_weeks: DateGapsConfig or a mapping of gap name to
            weeks. Only the gaps given are checked; all defaults apply
            when None.

    Returns:
        GapValidationResult
    """
    dates = _milestone_dates(actual_dates)
    gaps = _expected_gaps(expected_gaps_weeks)

    warnings = []
    for label, later, earlier, gap_field in ADJACENCIES:
        later_date = dates.get(later)
        earlier_date = dates.get(earlier)
        expected = gaps.get(gap_field)
        if later_date is None or earlier_date is None or expected is None:
            continue

        actual = weeks_between(earlier_date, later_date)
        if actual != expected:
            warnings.append(f"{label}: Expected {expected} weeks, got {actual} weeks")

    return GapValidationResult(warnings=warnings, errors=[])
