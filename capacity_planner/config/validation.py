"""
Configuration validation for the capacity planner.

Provides additional validation beyond Pydantic model validation.
"""

import structlog

from capacity_planner.config.models import HackathonConfig, PlannerConfig

logger = structlog.get_logger()


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""

    pass


def validate_config(config: PlannerConfig) -> list[str]:
    """
    Validate planner configuration.

    Performs cross-field checks that the Pydantic models cannot express.

    Args:
        config: PlannerConfig to validate

    Returns:
        List of warning messages (non-fatal issues)

    Raises:
        ConfigurationError: If configuration has fatal issues
    """
    warnings: list[str] = []
    errors: list[str] = []

    leave = config.leave
    cycle_total = leave.per_cycle_days * leave.release_cycles_per_year
    if cycle_total > leave.annual_paid_leave_days:
        errors.append(
            f"Per-cycle leave ({leave.per_cycle_days} days x "
            f"{leave.release_cycles_per_year} cycles = {cycle_total}) exceeds "
            f"annual paid leave ({leave.annual_paid_leave_days} days)"
        )
    elif cycle_total < leave.annual_paid_leave_days:
        warnings.append(
            f"Per-cycle leave covers only {cycle_total} of "
            f"{leave.annual_paid_leave_days} annual paid leave days."
        )

    cycles_months = leave.cycle_duration_months * leave.release_cycles_per_year
    if cycles_months != 12:
        warnings.append(
            f"{leave.release_cycles_per_year} cycles of {leave.cycle_duration_months} "
            f"months do not add up to a year ({cycles_months} months)."
        )

    thresholds = config.insights
    if thresholds.low_efficiency_pct > thresholds.high_efficiency_pct:
        errors.append(
            f"low_efficiency_pct ({thresholds.low_efficiency_pct}) is above "
            f"high_efficiency_pct ({thresholds.high_efficiency_pct})"
        )
    if thresholds.short_project_months > thresholds.long_project_months:
        errors.append(
            f"short_project_months ({thresholds.short_project_months}) is above "
            f"long_project_months ({thresholds.long_project_months})"
        )

    from capacity_planner.core.holiday_provider import supported_regions

    known = supported_regions()
    region = config.holidays.region.upper()
    if region not in known:
        warnings.append(
            f"Holiday region '{config.holidays.region}' has no holiday table; "
            "only company observances will be deducted."
        )

    release = config.release
    if len(release.months) != release.releases_per_year:
        warnings.append(
            f"releases_per_year is {release.releases_per_year} but "
            f"{len(release.months)} release months are configured."
        )

    if config.hackathon != HackathonConfig():
        warnings.append(
            "hackathon settings are informational; the hackathon is always "
            "three days (first Tuesday to Thursday of February)."
        )

    for warning in warnings:
        logger.warning("config_validation_warning", message=warning)

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

    return warnings
