"""
Vacation apportionment.

Leave is not tracked per person. Instead the whole release span earns a
pro-rated share of the per-cycle allowance, and each sub-period takes its
calendar-day share of that entitlement:

    entitlement = round(total_days / cycle_days * per_cycle_days)
    period_leave = round(period_days / total_days * entitlement)

Rounding is half away from zero at both stages.
"""

from datetime import date

from capacity_planner.config.models import LeavePolicy
from capacity_planner.utils.time_conversion import days_between, round_half_away


def full_period_entitlement(
    total_start: date,
    total_end: date,
    policy: LeavePolicy | None = None,
) -> int:
    """
    Leave earned across a whole span.

    Args:
        total_start: Start of the span
        total_end: End of the span
        policy: Leave policy (defaults if None)

    Returns:
        Leave days in [0, annual_paid_leave_days]; 0 for an empty span
    """
    policy = policy or LeavePolicy()
    total_days = days_between(total_start, total_end)
    if total_days <= 0:
        return 0

    entitlement = round_half_away(total_days / policy.cycle_days * policy.per_cycle_days)
    return max(0, min(entitlement, policy.annual_paid_leave_days))


def apportion_leave(
    period_start: date,
    period_end: date,
    total_start: date,
    total_end: date,
    policy: LeavePolicy | None = None,
) -> int:
    """
    Vacation days attributed to a period within a larger span.

    Args:
        period_start: Start of the period
        period_end: End of the period
        total_start: Start of the whole span
        total_end: End of the whole span
        policy: Leave policy (defaults if None)

    Returns:
        Leave days in [0, entitlement]
    """
    total_days = days_between(total_start, total_end)
    if total_days <= 0:
        return 0

    entitlement = full_period_entitlement(total_start, total_end, policy)
    period_days = days_between(period_start, period_end)

    vacation_days = round_half_away(period_days / total_days * entitlement)
    return max(0, min(vacation_days, entitlement))
