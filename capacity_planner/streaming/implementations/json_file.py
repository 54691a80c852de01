"""
NDJSON file publisher: appends audit events to one file per topic.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import IO, Any
from uuid import UUID

import structlog

from capacity_planner.streaming.publisher import AuditEvent

logger = structlog.get_logger()


class _JsonEncoder(json.JSONEncoder):
    """JSON encoder for audit payload types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


class JsonFilePublisher:
    """
    Writes events as NDJSON (one JSON object per line), one file per topic.

    File naming: {output_dir}/{topic}.ndjson
    """

    def __init__(self, output_dir: str) -> None:
        self._output_dir = Path(output_dir)
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._handles: dict[str, IO[str]] = {}
        self._write_count = 0

    def path_for(self, topic: str) -> Path:
        """File that receives a topic's events."""
        safe_topic = topic.replace(".", "_").replace("/", "_")
        return self._output_dir / f"{safe_topic}.ndjson"

    def _get_handle(self, topic: str) -> IO[str]:
        if topic not in self._handles:
            path = self.path_for(topic)
            logger.debug("audit_file_opened", topic=topic, path=str(path))
            self._handles[topic] = open(path, "a", encoding="utf-8")  # noqa: SIM115
        return self._handles[topic]

    def _write(self, handle: IO[str], event: AuditEvent) -> None:
        handle.write(json.dumps(event.to_dict(), cls=_JsonEncoder, separators=(",", ":")) + "\n")

    def publish(self, topic: str, event: AuditEvent) -> None:
        self._write(self._get_handle(topic), event)
        self._write_count += 1

    def publish_batch(self, topic: str, events: list[AuditEvent]) -> None:
        handle = self._get_handle(topic)
        for event in events:
            self._write(handle, event)
        self._write_count += len(events)

    def flush(self) -> None:
        for handle in self._handles.values():
            handle.flush()

    def close(self) -> None:
        for handle in self._handles.values():
            handle.close()
        self._handles.clear()

    @property
    def stats(self) -> dict[str, int]:
        return {
            "json_file_writes": self._write_count,
            "open_files": len(self._handles),
        }
