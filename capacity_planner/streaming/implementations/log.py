"""
Log publisher: emits audit events through structlog.
"""

import structlog

from capacity_planner.streaming.publisher import AuditEvent

logger = structlog.get_logger()


class LogPublisher:
    """Publishes audit events by logging them via structlog."""

    def __init__(self, level: str = "info") -> None:
        self._level = level.lower()
        self._count = 0

    def _log(self, **kwargs: object) -> None:
        log_fn = getattr(logger, self._level, logger.info)
        log_fn(**kwargs)

    def publish(self, topic: str, event: AuditEvent) -> None:
        self._log(
            event="audit_event",
            topic=topic,
            event_type=event.event_type,
            stream=event.stream,
            event_id=str(event.event_id),
            **event.to_dict()["_key"],
        )
        self._count += 1

    def publish_batch(self, topic: str, events: list[AuditEvent]) -> None:
        self._log(
            event="audit_batch",
            topic=topic,
            event_count=len(events),
            streams=sorted({e.stream for e in events}),
        )
        self._count += len(events)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass

    @property
    def stats(self) -> dict[str, int]:
        return {"log_events": self._count}
