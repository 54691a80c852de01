"""
Configuration module for the capacity planner.

This module provides:
- Pydantic configuration models
- YAML configuration loading
- Movable-feast lookup tables
- Configuration validation
"""

from capacity_planner.config.models import (
    PlannerConfig,
    LeavePolicy,
    DateGapsConfig,
    HackathonConfig,
    ReleaseCycleConfig,
    HolidayConfig,
    InsightThresholds,
    AuditConfig,
)
from capacity_planner.config.loader import load_config
from capacity_planner.config.validation import ConfigurationError, validate_config
from capacity_planner.config.defaults import get_defaults

__all__ = [
    "PlannerConfig",
    "LeavePolicy",
    "DateGapsConfig",
    "HackathonConfig",
    "ReleaseCycleConfig",
    "HolidayConfig",
    "InsightThresholds",
    "AuditConfig",
    "load_config",
    "ConfigurationError",
    "validate_config",
    "get_defaults",
]
