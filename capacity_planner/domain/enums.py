"""
Enumeration types for capacity planner domain models.
"""

from enum import Enum


class HolidayKind(str, Enum):
    """Category of a holiday entry."""
    FIXED_NATIONAL = "fixed-national"
    MOVABLE_RELIGIOUS = "movable-religious"
    COMPANY_OBSERVANCE = "company-observance"


class Milestone(str, Enum):
    """
    Release-plan milestones, earliest first.

    Values match the MilestoneDates field names.
    """
    PRE_CC_COMPLETE = "pre_cc_complete"
    CONCEPT_COMMIT = "concept_commit"
    EXECUTE_COMMIT = "execute_commit"
    SOFT_CODE_COMPLETE = "soft_code_complete"
    COMMIT_GATE_MET = "commit_gate_met"
    PROMOTION_GATE_MET = "promotion_gate_met"
    GA = "ga"


class AuditBackend(str, Enum):
    """Backends for date-history change events."""
    NOOP = "noop"
    MEMORY = "memory"
    LOG = "log"
    JSON_FILE = "json_file"
