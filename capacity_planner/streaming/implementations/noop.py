"""
No-op publisher: discards all events silently.
"""

from capacity_planner.streaming.publisher import AuditEvent


class NoopPublisher:
    """Publisher that discards all events. Used when auditing is disabled."""

    def publish(self, topic: str, event: AuditEvent) -> None:
        pass

    def publish_batch(self, topic: str, events: list[AuditEvent]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass

    @property
    def stats(self) -> dict[str, int]:
        return {}
