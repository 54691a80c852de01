"""
Tests for configuration loading and validation.
"""

import pytest
from pydantic import ValidationError

from capacity_planner.config import (
    ConfigurationError,
    PlannerConfig,
    get_defaults,
    load_config,
    validate_config,
)
from capacity_planner.config.loader import _deep_merge, _substitute_env_vars
from capacity_planner.config.models import InsightThresholds, LeavePolicy, ReleaseCycleConfig
from capacity_planner.domain.enums import AuditBackend


class TestPlannerConfig:
    """Tests for configuration models."""

    def test_defaults(self):
        config = PlannerConfig()

        assert config.leave.annual_paid_leave_days == 18
        assert config.leave.per_cycle_days == 9
        assert config.leave.cycle_days == 180
        assert config.holidays.region == "US"
        assert config.release.months == [5, 11]
        assert config.audit.backend == AuditBackend.LOG

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CAPACITY_PLANNER_LEAVE__PER_CYCLE_DAYS", "8")

        config = PlannerConfig()

        assert config.leave.per_cycle_days == 8
        assert config.leave.annual_paid_leave_days == 18

    def test_policy_description(self):
        assert LeavePolicy().describe() == (
            "18 paid leave days/year (9 per release cycle) + 3 wellness days + holidays"
        )

    def test_release_months_validated(self):
        with pytest.raises(ValidationError):
            ReleaseCycleConfig(months=[5, 13])

    def test_release_months_sorted(self):
        assert ReleaseCycleConfig(months=[11, 5]).months == [5, 11]


class TestLoader:
    """Tests for YAML loading."""

    def test_load_yaml_with_env_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PLANNER_TEST_REGION", "IN")
        path = tmp_path / "planner.yaml"
        path.write_text(
            "holidays:\n"
            "  region: ${PLANNER_TEST_REGION}\n"
            "leave:\n"
            "  per_cycle_days: ${PLANNER_TEST_DAYS:-7}\n"
        )

        config = load_config(path)

        assert config.holidays.region == "IN"
        assert config.leave.per_cycle_days == 7

    def test_overrides_merge(self, tmp_path):
        path = tmp_path / "planner.yaml"
        path.write_text("leave:\n  per_cycle_days: 7\n  wellness_days: 2\n")

        config = load_config(path, override_values={"leave": {"wellness_days": 5}})

        assert config.leave.per_cycle_days == 7
        assert config.leave.wellness_days == 5

    def test_empty_file(self, tmp_path):
        path = tmp_path / "planner.yaml"
        path.write_text("")

        assert load_config(path) == PlannerConfig()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_defaults_when_no_file_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("capacity_planner.config.loader.DEFAULT_CONFIG_PATHS", ())

        assert load_config() == PlannerConfig()

    def test_finds_default_location(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "planner.yaml").write_text("holidays:\n  region: IN\n")

        assert load_config().holidays.region == "IN"

    def test_substitute_env_vars_nested(self, monkeypatch):
        monkeypatch.delenv("PLANNER_TEST_MISSING", raising=False)
        value = {"a": ["${PLANNER_TEST_MISSING:-x}", 3], "b": "${PLANNER_TEST_MISSING}"}

        assert _substitute_env_vars(value) == {"a": ["x", 3], "b": ""}

    def test_deep_merge(self):
        merged = _deep_merge({"a": {"b": 1, "c": 2}, "d": 1}, {"a": {"c": 3}, "e": 4})
        assert merged == {"a": {"b": 1, "c": 3}, "d": 1, "e": 4}

    def test_deep_merge_leaves_inputs_untouched(self):
        base = {"leave": {"annual_paid_leave_days": 18, "per_cycle_days": 9}}
        override = {"leave": {"per_cycle_days": 8}}

        merged = _deep_merge(base, override)

        assert merged == {"leave": {"annual_paid_leave_days": 18, "per_cycle_days": 8}}
        assert base["leave"]["per_cycle_days"] == 9
        assert override == {"leave": {"per_cycle_days": 8}}


class TestValidateConfig:
    """Tests for cross-field validation."""

    def test_defaults_are_clean(self):
        assert validate_config(PlannerConfig()) == []

    def test_cycle_leave_exceeds_annual(self):
        config = PlannerConfig(leave=LeavePolicy(per_cycle_days=10))

        with pytest.raises(ConfigurationError, match="exceeds annual paid leave"):
            validate_config(config)

    def test_inverted_efficiency_thresholds(self):
        config = PlannerConfig(
            insights=InsightThresholds(low_efficiency_pct=85, high_efficiency_pct=80)
        )

        with pytest.raises(ConfigurationError, match="low_efficiency_pct"):
            validate_config(config)

    def test_unknown_region_warns(self):
        config = PlannerConfig(holidays={"region": "FR"})

        warnings = validate_config(config)

        assert len(warnings) == 1
        assert "FR" in warnings[0]

    def test_unused_leave_warns(self):
        config = PlannerConfig(leave=LeavePolicy(per_cycle_days=8))

        assert any("covers only 16" in w for w in validate_config(config))

    @pytest.mark.parametrize(
        "hackathon",
        [{"days_per_year": 5}, {"month": "March"}, {"days_of_week": ["Monday"]}],
    )
    def test_changed_hackathon_schedule_warns(self, hackathon):
        warnings = validate_config(PlannerConfig(hackathon=hackathon))

        assert len(warnings) == 1
        assert warnings[0].startswith("hackathon settings are informational")


class TestGetDefaults:
    """Tests for get_defaults."""

    def test_vacation_policy(self):
        defaults = get_defaults("vacation_policy")

        assert defaults["annual_paid_leave_days"] == 18
        assert defaults["per_cycle_days"] == 9

    def test_date_gaps(self):
        assert get_defaults("date_gaps")["ga_to_promotion_gate"] == 4

    def test_all(self):
        assert set(get_defaults("all")) == {
            "vacation_policy",
            "date_gaps",
            "hackathon_config",
            "release_config",
        }

    def test_unknown_category_returns_all(self):
        assert get_defaults("nonsense") == get_defaults("all")

    def test_reads_given_config(self):
        config = PlannerConfig(leave=LeavePolicy(per_cycle_days=7))
        assert get_defaults("vacation_policy", config)["per_cycle_days"] == 7
