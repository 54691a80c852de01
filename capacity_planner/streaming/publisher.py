"""
Audit publisher abstractions: AuditEvent dataclass and EventPublisher protocol.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Protocol, runtime_checkable
from uuid import UUID, uuid4

DATE_HISTORY_STREAM = "date_history"
ANALYSIS_SNAPSHOT_STREAM = "availability_snapshot"


@dataclass(frozen=True)
class AuditEvent:
    """
    An audit record handed to a publisher backend.

    ``stream`` names the kind of record (date history or analysis snapshot);
    ``key`` identifies the release plan it belongs to.
    """

    event_id: UUID
    event_type: str  # "date_changed" or "analysis_snapshot"
    stream: str
    timestamp: datetime
    data: dict[str, Any]
    key: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict representation for JSON serialization."""
        return {
            "_event_type": self.event_type,
            "_event_id": str(self.event_id),
            "_event_timestamp": self.timestamp.isoformat(),
            "_stream": self.stream,
            "_key": {k: _serialize(v) for k, v in self.key.items()},
            "data": {k: _serialize(v) for k, v in self.data.items()},
        }


def create_event(
    event_type: str,
    stream: str,
    data: dict[str, Any],
    key: dict[str, Any] | None = None,
    timestamp: datetime | None = None,
) -> AuditEvent:
    """Factory to create an AuditEvent with auto-generated event_id."""
    return AuditEvent(
        event_id=uuid4(),
        event_type=event_type,
        stream=stream,
        timestamp=timestamp or datetime.now(),
        data=data,
        key=key or {},
    )


def _serialize(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_serialize(v) for v in value]
    return value


@runtime_checkable
class EventPublisher(Protocol):
    """Protocol for audit publisher backends."""

    def publish(self, topic: str, event: AuditEvent) -> None:
        """Publish a single event."""
        ...

    def publish_batch(self, topic: str, events: list[AuditEvent]) -> None:
        """Publish a batch of events."""
        ...

    def flush(self) -> None:
        """Flush any internal buffers."""
        ...

    def close(self) -> None:
        """Close the publisher and release resources."""
        ...

    @property
    def stats(self) -> dict[str, int]:
        """Return publishing statistics."""
        ...
