"""
Milestone date history.

Turns edits to a release plan's milestone dates into change events and
hands them, together with frozen analysis baselines, to an audit publisher.
The planner itself stores nothing.
"""

from datetime import datetime
from typing import Optional

from capacity_planner.domain.models import (
    MILESTONE_ORDER,
    AvailabilityAnalysis,
    DateChangeEvent,
    MilestoneDates,
)
from capacity_planner.streaming.publisher import (
    ANALYSIS_SNAPSHOT_STREAM,
    DATE_HISTORY_STREAM,
    EventPublisher,
    create_event,
)
from capacity_planner.streaming.topic_resolver import TopicResolver
from capacity_planner.utils.logging import AnalysisLogger


def diff_milestones(
    release_plan_id: str,
    old: MilestoneDates,
    new: MilestoneDates,
    changed_by: str,
    reason: Optional[str] = None,
) -> list[DateChangeEvent]:
    """
    One change event per milestone whose date differs.

    Setting a previously empty date or clearing a date both count as changes.

    Args:
        release_plan_id: Release plan being edited
        old: Dates before the edit
        new: Dates after the edit
        changed_by: User making the change
        reason: Optional free-text reason

    Returns:
        Change events in milestone order, sharing one timestamp
    """
    changed_at = datetime.now()
    before, after = old.as_dict(), new.as_dict()
    return [
        DateChangeEvent(
            release_plan_id=release_plan_id,
            field_name=name,
            old_date=before[name],
            new_date=after[name],
            changed_by=changed_by,
            change_reason=reason,
            changed_at=changed_at,
        )
        for name in MILESTONE_ORDER
        if before[name] != after[name]
    ]


class DateHistoryRecorder:
    """
    Publishes milestone date changes and analysis baselines.

    Usage:
        recorder = DateHistoryRecorder(create_publisher(config.audit))
        recorder.record_changes(diff_milestones(plan_id, old, new, "alice"))
    """

    def __init__(
        self,
        publisher: EventPublisher,
        topic_resolver: TopicResolver | None = None,
    ):
        self.publisher = publisher
        self.topic_resolver = topic_resolver or TopicResolver()
        self._log = AnalysisLogger(component="date_history")

    def record(self, change: DateChangeEvent) -> None:
        """Publish a single date change."""
        self._log_change(change)
        self.publisher.publish(
            self.topic_resolver.resolve(DATE_HISTORY_STREAM),
            self._change_event(change),
        )

    def record_changes(self, changes: list[DateChangeEvent]) -> int:
        """
        Publish a set of date changes as one batch.

        Args:
            changes: Change events, typically from diff_milestones

        Returns:
            Number of events published
        """
        if not changes:
            return 0
        for change in changes:
            self._log_change(change)
        self.publisher.publish_batch(
            self.topic_resolver.resolve(DATE_HISTORY_STREAM),
            [self._change_event(change) for change in changes],
        )
        return len(changes)

    def record_analysis_snapshot(
        self,
        release_plan_id: str,
        analysis: AvailabilityAnalysis,
    ) -> None:
        """
        Publish an analysis as a frozen baseline for a release plan.

        Args:
            release_plan_id: Release plan the analysis belongs to
            analysis: Result to freeze
        """
        snapshot = analysis.to_snapshot(release_plan_id)
        self.publisher.publish(
            self.topic_resolver.resolve(ANALYSIS_SNAPSHOT_STREAM),
            create_event(
                event_type="analysis_snapshot",
                stream=ANALYSIS_SNAPSHOT_STREAM,
                data=snapshot["analysis"],
                key={
                    "release_plan_id": release_plan_id,
                    "computed_at": snapshot["computed_at"],
                },
                timestamp=analysis.computed_at,
            ),
        )

    def close(self) -> None:
        """Flush and close the publisher."""
        self.publisher.flush()
        self.publisher.close()

    def _log_change(self, change: DateChangeEvent) -> None:
        self._log.date_changed(
            change.release_plan_id,
            change.field_name,
            change.old_date.isoformat() if change.old_date else None,
            change.new_date.isoformat() if change.new_date else None,
            changed_by=change.changed_by,
        )

    @staticmethod
    def _change_event(change: DateChangeEvent):
        return create_event(
            event_type="date_changed",
            stream=DATE_HISTORY_STREAM,
            data=change.model_dump(mode="json", exclude={"release_plan_id"}),
            key={"release_plan_id": change.release_plan_id},
            timestamp=change.changed_at,
        )
