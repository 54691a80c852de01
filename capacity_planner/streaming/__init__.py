"""
Audit event publishing for the capacity planner.

Milestone date changes and frozen analysis baselines are handed to a
publisher backend (log, NDJSON files, memory); storing them is up to
whoever consumes the stream.
"""

from capacity_planner.streaming.factory import create_publisher
from capacity_planner.streaming.publisher import (
    ANALYSIS_SNAPSHOT_STREAM,
    DATE_HISTORY_STREAM,
    AuditEvent,
    EventPublisher,
    create_event,
)
from capacity_planner.streaming.topic_resolver import TopicResolver

__all__ = [
    "ANALYSIS_SNAPSHOT_STREAM",
    "DATE_HISTORY_STREAM",
    "AuditEvent",
    "EventPublisher",
    "TopicResolver",
    "create_event",
    "create_publisher",
]
