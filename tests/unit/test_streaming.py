"""
Tests for audit event publishing.

Covers: AuditEvent, publishers (noop, memory, json_file, log),
        topic resolver and factory.
"""

import json
from datetime import date, datetime
from uuid import UUID

import pytest

from capacity_planner.config.models import AuditConfig
from capacity_planner.streaming.factory import create_publisher
from capacity_planner.streaming.implementations.json_file import JsonFilePublisher
from capacity_planner.streaming.implementations.log import LogPublisher
from capacity_planner.streaming.implementations.memory import InMemoryPublisher
from capacity_planner.streaming.implementations.noop import NoopPublisher
from capacity_planner.streaming.publisher import EventPublisher, _serialize, create_event
from capacity_planner.streaming.topic_resolver import TopicResolver


def _change(plan_id: str = "rp-1", field: str = "ga"):
    return create_event(
        event_type="date_changed",
        stream="date_history",
        timestamp=datetime(2024, 2, 1, 9, 30),
        data={"field_name": field, "old_date": date(2024, 3, 1), "new_date": None},
        key={"release_plan_id": plan_id},
    )


# =============================================================================
# AuditEvent tests
# =============================================================================


class TestAuditEvent:
    def test_create_event(self):
        event = _change()

        assert event.event_type == "date_changed"
        assert event.stream == "date_history"
        assert isinstance(event.event_id, UUID)

    def test_default_timestamp(self):
        event = create_event(event_type="date_changed", stream="date_history", data={})
        assert isinstance(event.timestamp, datetime)
        assert event.key == {}

    def test_to_dict(self):
        d = _change().to_dict()

        assert d["_event_type"] == "date_changed"
        assert d["_event_timestamp"] == "2024-02-01T09:30:00"
        assert d["_stream"] == "date_history"
        assert d["_key"] == {"release_plan_id": "rp-1"}
        assert d["data"] == {"field_name": "ga", "old_date": "2024-03-01", "new_date": None}

    def test_frozen(self):
        event = _change()
        with pytest.raises(AttributeError):
            event.stream = "other"


class TestSerialize:
    def test_date(self):
        assert _serialize(date(2024, 2, 6)) == "2024-02-06"

    def test_nested(self):
        assert _serialize({"days": [date(2024, 2, 6)]}) == {"days": ["2024-02-06"]}

    def test_passthrough(self):
        assert _serialize(37) == 37
        assert _serialize(None) is None


# =============================================================================
# Publisher tests
# =============================================================================


class TestNoopPublisher:
    def test_operations_are_noop(self):
        pub = NoopPublisher()
        pub.publish("t", _change())
        pub.publish_batch("t", [_change()])
        pub.flush()
        pub.close()

        assert pub.stats == {}


class TestInMemoryPublisher:
    def test_publish_captures_events(self):
        pub = InMemoryPublisher()
        pub.publish("date_history", _change())

        assert len(pub.events) == 1
        assert pub.stats["publish_count"] == 1

    def test_publish_batch(self):
        pub = InMemoryPublisher()
        pub.publish_batch("date_history", [_change(), _change(field="execute_commit")])

        assert pub.stats == {"publish_count": 2, "batch_count": 1, "total_events": 2}

    def test_filters(self):
        pub = InMemoryPublisher()
        pub.publish("date_history", _change("rp-1"))
        pub.publish("date_history", _change("rp-2"))

        assert len(pub.events_for_stream("date_history")) == 2
        assert len(pub.events_for_release_plan("rp-2")) == 1

    def test_clear(self):
        pub = InMemoryPublisher()
        pub.publish("date_history", _change())
        pub.clear()

        assert pub.events == []
        assert pub.stats["publish_count"] == 0


class TestJsonFilePublisher:
    def test_writes_ndjson(self, tmp_path):
        pub = JsonFilePublisher(output_dir=str(tmp_path))
        pub.publish("date_history", _change())
        pub.close()

        lines = (tmp_path / "date_history.ndjson").read_text().strip().splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["_key"] == {"release_plan_id": "rp-1"}
        assert record["data"]["old_date"] == "2024-03-01"

    def test_batch_appends_lines(self, tmp_path):
        pub = JsonFilePublisher(output_dir=str(tmp_path))
        pub.publish_batch("planner.date_history", [_change(), _change(), _change()])
        pub.flush()

        path = pub.path_for("planner.date_history")
        assert path.name == "planner_date_history.ndjson"
        assert len(path.read_text().strip().splitlines()) == 3
        pub.close()

    def test_stats(self, tmp_path):
        pub = JsonFilePublisher(output_dir=str(tmp_path))
        pub.publish("a", _change())
        pub.publish("b", _change())

        assert pub.stats == {"json_file_writes": 2, "open_files": 2}
        pub.close()
        assert pub.stats["open_files"] == 0


class TestLogPublisher:
    def test_publish_increments_count(self):
        pub = LogPublisher(level="debug")
        pub.publish("date_history", _change())
        pub.publish_batch("date_history", [_change(), _change()])

        assert pub.stats == {"log_events": 3}


# =============================================================================
# Topic resolver and factory tests
# =============================================================================


class TestTopicResolver:
    def test_per_table(self):
        resolver = TopicResolver(AuditConfig(topic_prefix="audit."))
        assert resolver.resolve("date_history") == "audit.date_history"

    def test_single(self):
        resolver = TopicResolver(AuditConfig(topic_strategy="single"))
        assert resolver.resolve("date_history") == "audit"
        assert resolver.resolve("availability_snapshot") == "audit"

    def test_custom_with_fallback(self):
        resolver = TopicResolver(
            AuditConfig(topic_strategy="custom", topic_mapping={"date_history": "dates"})
        )
        assert resolver.resolve("date_history") == "dates"
        assert resolver.resolve("availability_snapshot") == "availability_snapshot"

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValueError):
            AuditConfig(topic_strategy="round_robin")


class TestCreatePublisher:
    @pytest.mark.parametrize(
        "backend,expected",
        [
            ("noop", NoopPublisher),
            ("memory", InMemoryPublisher),
            ("log", LogPublisher),
        ],
    )
    def test_backends(self, backend, expected):
        pub = create_publisher(AuditConfig(backend=backend))

        assert isinstance(pub, expected)
        assert isinstance(pub, EventPublisher)

    def test_json_file(self, tmp_path):
        pub = create_publisher(
            AuditConfig(backend="json_file", json_file_output_dir=str(tmp_path / "out"))
        )

        assert isinstance(pub, JsonFilePublisher)
        assert (tmp_path / "out").is_dir()

    def test_disabled_is_noop(self):
        pub = create_publisher(AuditConfig(enabled=False, backend="log"))
        assert isinstance(pub, NoopPublisher)

    def test_from_planner_config(self, planner_config):
        pub = create_publisher(planner_config.audit)

        assert isinstance(pub, InMemoryPublisher)

    def test_no_config_uses_defaults(self):
        assert isinstance(create_publisher(None), LogPublisher)
