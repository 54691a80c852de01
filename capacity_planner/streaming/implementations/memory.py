"""
In-memory publisher for tests and embedding callers.
"""

from capacity_planner.streaming.publisher import AuditEvent


class InMemoryPublisher:
    """
    Keeps every published event in a list.

    Not thread-safe.
    """

    def __init__(self) -> None:
        self._events: list[tuple[str, AuditEvent]] = []
        self._publish_count = 0
        self._batch_count = 0

    def publish(self, topic: str, event: AuditEvent) -> None:
        self._events.append((topic, event))
        self._publish_count += 1

    def publish_batch(self, topic: str, events: list[AuditEvent]) -> None:
        self._events.extend((topic, event) for event in events)
        self._batch_count += 1
        self._publish_count += len(events)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass

    @property
    def stats(self) -> dict[str, int]:
        return {
            "publish_count": self._publish_count,
            "batch_count": self._batch_count,
            "total_events": len(self._events),
        }

    @property
    def events(self) -> list[tuple[str, AuditEvent]]:
        """All captured (topic, event) pairs."""
        return list(self._events)

    def events_for_stream(self, stream: str) -> list[AuditEvent]:
        """Events recorded for one audit stream."""
        return [e for _, e in self._events if e.stream == stream]

    def events_for_release_plan(self, release_plan_id: str) -> list[AuditEvent]:
        """Events keyed to one release plan."""
        return [e for _, e in self._events if e.key.get("release_plan_id") == release_plan_id]

    def clear(self) -> None:
        """Drop captured events and reset counters."""
        self._events.clear()
        self._publish_count = 0
        self._batch_count = 0
