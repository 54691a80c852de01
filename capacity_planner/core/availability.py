"""
Availability analysis for release plans.

Derives engineering availability from three milestone dates. Raw working
days between execute commit and GA are reduced by holidays, hackathon days
and apportioned vacation, split into the code-complete period
[execute commit, soft code complete] and the after-code-complete period
[soft code complete, GA].

The soft-code-complete day belongs to both periods, so per-period working
days can sum to one more than the whole-span count.
"""

from datetime import date

from capacity_planner.config.models import InsightThresholds, LeavePolicy
from capacity_planner.core.holiday_provider import HolidayProvider
from capacity_planner.core.leave import apportion_leave
from capacity_planner.domain.models import (
    Availability,
    AvailabilityAnalysis,
    Deductions,
    EventDayDeductions,
    HolidayDeductions,
    VacationDeductions,
)
from capacity_planner.utils.calendar import (
    count_working_days,
    event_days_for_period,
)
from capacity_planner.utils.logging import AnalysisLogger
from capacity_planner.utils.time_conversion import days_between, to_date

CODE_COMPLETE_PERIOD = "code complete period"
AFTER_CODE_COMPLETE_PERIOD = "after code complete period"


class AvailabilityAnalyzer:
    """
    Computes availability analyses.

    Holds configuration only; every call to ``analyze`` is independent.

    Usage:
        analyzer = AvailabilityAnalyzer(region="US")
        analysis = analyzer.analyze(execute_commit, soft_code_complete, ga)
    """

    def __init__(
        self,
        region: str = "US",
        policy: LeavePolicy | None = None,
        thresholds: InsightThresholds | None = None,
        holiday_provider: HolidayProvider | None = None,
    ):
        """
        Initialize the analyzer.

        Args:
            region: Holiday region
            policy: Leave policy for vacation apportionment
            thresholds: Triggers for insights and recommendations
            holiday_provider: Holiday source (a new provider if None)
        """
        self.region = region
        self.policy = policy or LeavePolicy()
        self.thresholds = thresholds or InsightThresholds()
        self.holiday_provider = holiday_provider or HolidayProvider(region=region)

    def analyze(
        self,
        execute_commit: date,
        soft_code_complete: date,
        ga: date,
    ) -> AvailabilityAnalysis:
        """
        Analyze availability between execute commit and GA.

        Milestone order is not enforced. Out-of-order dates are logged and
        produce zero-length periods rather than an error.

        Args:
            execute_commit: Execute commit date
            soft_code_complete: Soft code complete date
            ga: GA date

        Returns:
            AvailabilityAnalysis with deductions, availability and insights
        """
        execute_commit = to_date(execute_commit)
        soft_code_complete = to_date(soft_code_complete)
        ga = to_date(ga)

        log = AnalysisLogger(region=self.region)
        log.analysis_started(
            execute_commit.isoformat(),
            soft_code_complete.isoformat(),
            ga.isoformat(),
        )

        if not execute_commit <= soft_code_complete <= ga:
            log.warning(
                "milestones_out_of_order",
                execute_commit=execute_commit.isoformat(),
                soft_code_complete=soft_code_complete.isoformat(),
                ga=ga.isoformat(),
            )

        total_working_days = count_working_days(execute_commit, ga)
        code_complete_working_days = count_working_days(execute_commit, soft_code_complete)
        after_code_complete_working_days = count_working_days(soft_code_complete, ga)

        deductions = Deductions(
            holidays=self._holiday_deductions(execute_commit, soft_code_complete, ga),
            event_days=self._event_day_deductions(execute_commit, soft_code_complete, ga),
            vacations=self._vacation_deductions(execute_commit, soft_code_complete, ga),
        )

        to_code_complete = max(
            0,
            code_complete_working_days
            - deductions.holidays.code_complete_period
            - deductions.event_days.code_complete_period
            - deductions.vacations.code_complete_period,
        )
        after_code_complete = max(
            0,
            after_code_complete_working_days
            - deductions.holidays.after_code_complete_period
            - deductions.event_days.after_code_complete_period
            - deductions.vacations.after_code_complete_period,
        )
        total_available = to_code_complete + after_code_complete
        efficiency = (
            total_available / total_working_days * 100 if total_working_days > 0 else 0.0
        )

        availability = Availability(
            days_available_to_code_complete=to_code_complete,
            days_available_after_code_complete=after_code_complete,
            total_available_days=total_available,
            efficiency=efficiency,
        )

        analysis = AvailabilityAnalysis(
            execute_commit=execute_commit,
            soft_code_complete=soft_code_complete,
            ga=ga,
            region=self.region,
            total_working_days=total_working_days,
            code_complete_working_days=code_complete_working_days,
            after_code_complete_working_days=after_code_complete_working_days,
            deductions=deductions,
            availability=availability,
            insights=self._insights(execute_commit, ga, deductions, availability),
            recommendations=self._recommendations(
                execute_commit, soft_code_complete, deductions, availability
            ),
        )

        log.analysis_completed(
            total_working_days=total_working_days,
            total_deductions=deductions.total,
            total_available_days=total_available,
            efficiency=efficiency,
        )
        return analysis

    def _holiday_deductions(
        self, execute_commit: date, soft_code_complete: date, ga: date
    ) -> HolidayDeductions:
        before = self.holiday_provider.in_range(execute_commit, soft_code_complete, self.region)
        after = self.holiday_provider.in_range(soft_code_complete, ga, self.region)

        breakdown = list({entry.date: entry for entry in before + after}.values())
        return HolidayDeductions(
            total=len(before) + len(after),
            code_complete_period=len(before),
            after_code_complete_period=len(after),
            breakdown=sorted(breakdown, key=lambda e: e.date),
        )

    def _event_day_deductions(
        self, execute_commit: date, soft_code_complete: date, ga: date
    ) -> EventDayDeductions:
        before = event_days_for_period(execute_commit, soft_code_complete)
        after = event_days_for_period(soft_code_complete, ga)

        breakdown = list({day.date: day for day in before + after}.values())
        return EventDayDeductions(
            total=len(before) + len(after),
            code_complete_period=len(before),
            after_code_complete_period=len(after),
            breakdown=sorted(breakdown, key=lambda d: d.date),
        )

    def _vacation_deductions(
        self, execute_commit: date, soft_code_complete: date, ga: date
    ) -> VacationDeductions:
        policy = self.policy
        return VacationDeductions(
            total=apportion_leave(execute_commit, ga, execute_commit, ga, policy),
            code_complete_period=apportion_leave(
                execute_commit, soft_code_complete, execute_commit, ga, policy
            ),
            after_code_complete_period=apportion_leave(
                soft_code_complete, ga, execute_commit, ga, policy
            ),
            policy=policy.describe(),
        )

    def _insights(
        self,
        execute_commit: date,
        ga: date,
        deductions: Deductions,
        availability: Availability,
    ) -> list[str]:
        t = self.thresholds
        insights = []

        months = days_between(execute_commit, ga) / 30
        if months > t.long_project_months:
            insights.append(
                f"Long project duration: {months:.1f} months from Execute Commit to GA"
            )
        elif months < t.short_project_months:
            insights.append(
                f"Short project duration: {months:.1f} months from Execute Commit to GA"
            )

        efficiency = availability.efficiency
        if efficiency > t.high_efficiency_pct:
            insights.append(
                f"High efficiency: {efficiency:.1f}% of working days available"
            )
        elif efficiency < t.low_efficiency_pct:
            insights.append(
                f"Timeline risk: only {efficiency:.1f}% of working days available"
            )

        if deductions.holidays.total > t.high_holiday_count:
            insights.append(
                f"High regional holiday density: {deductions.holidays.total} holidays "
                f"({self.region}) during project period"
            )

        event_days = deductions.event_days
        for period, count in (
            (CODE_COMPLETE_PERIOD, event_days.code_complete_period),
            (AFTER_CODE_COMPLETE_PERIOD, event_days.after_code_complete_period),
        ):
            if count > 0:
                insights.append(
                    f"Hackathon overlap: {count} hackathon days fall in the {period}"
                )

        if deductions.vacations.total > t.high_vacation_insight:
            insights.append(
                f"Vacation impact: {deductions.vacations.total} vacation days during project period"
            )

        return insights

    def _recommendations(
        self,
        execute_commit: date,
        soft_code_complete: date,
        deductions: Deductions,
        availability: Availability,
    ) -> list[str]:
        t = self.thresholds
        recommendations = []

        if availability.efficiency < t.low_efficiency_pct:
            recommendations.append(
                "Consider extending project timeline to account for high deduction impact"
            )
            recommendations.append(
                "Review holiday and vacation schedules to optimize working days"
            )

        if deductions.holidays.total > t.high_holiday_count:
            recommendations.append(
                "Plan around major holidays to minimize impact on critical milestones"
            )

        if deductions.event_days.total > 0:
            recommendations.append(
                "Account for hackathon days in sprint planning and milestone scheduling"
            )

        if deductions.vacations.total > t.high_vacation_recommendation:
            recommendations.append(
                "Coordinate team vacation schedules to maintain consistent coverage"
            )

        if days_between(execute_commit, soft_code_complete) < t.min_code_complete_days:
            recommendations.append(
                "Consider extending Code Complete timeline for better quality assurance"
            )

        return recommendations


def analyze_availability(
    execute_commit: date,
    soft_code_complete: date,
    ga: date,
    *,
    region: str = "US",
    policy: LeavePolicy | None = None,
    thresholds: InsightThresholds | None = None,
) -> AvailabilityAnalysis:
    """
    Analyze availability with a one-off analyzer.

    Args:
        execute_commit: Execute commit date
        soft_code_complete: Soft code complete date
        ga: GA date
        region: Holiday region
        policy: Leave policy (defaults if None)
        thresholds: Insight thresholds (defaults if None)

    Returns:
        AvailabilityAnalysis
    """
    analyzer = AvailabilityAnalyzer(region=region, policy=policy, thresholds=thresholds)
    return analyzer.analyze(execute_commit, soft_code_complete, ga)
