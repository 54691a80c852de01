"""
Shared test fixtures for capacity planner tests.
"""

from datetime import date

import pytest

from capacity_planner.config.models import (
    AuditConfig,
    DateGapsConfig,
    LeavePolicy,
    PlannerConfig,
)
from capacity_planner.domain.models import MilestoneDates
from capacity_planner.streaming.implementations.memory import InMemoryPublisher


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def leave_policy() -> LeavePolicy:
    """Default leave policy: 18 days/year, 9 per 6-month cycle."""
    return LeavePolicy()


@pytest.fixture
def date_gaps() -> DateGapsConfig:
    """Four weeks between every pair of milestones."""
    return DateGapsConfig()


@pytest.fixture
def planner_config(tmp_path) -> PlannerConfig:
    """Planner configuration with auditing captured in memory."""
    return PlannerConfig(
        audit=AuditConfig(
            backend="memory",
            json_file_output_dir=str(tmp_path / "audit"),
        ),
    )


# =============================================================================
# Milestone Fixtures
# =============================================================================


@pytest.fixture
def scenario_dates() -> tuple[date, date, date]:
    """Execute commit, soft code complete and GA spanning the 2024 hackathon."""
    return date(2024, 1, 2), date(2024, 2, 1), date(2024, 3, 1)


@pytest.fixture
def milestone_dates() -> MilestoneDates:
    """A full release plan spaced four weeks apart, GA on a Tuesday."""
    return MilestoneDates(
        pre_cc_complete=date(2024, 1, 16),
        concept_commit=date(2024, 2, 13),
        execute_commit=date(2024, 3, 12),
        soft_code_complete=date(2024, 4, 9),
        commit_gate_met=date(2024, 5, 7),
        promotion_gate_met=date(2024, 6, 4),
        ga=date(2024, 7, 2),
    )


# =============================================================================
# Audit Fixtures
# =============================================================================


@pytest.fixture
def memory_publisher() -> InMemoryPublisher:
    """Publisher capturing events in memory."""
    return InMemoryPublisher()
