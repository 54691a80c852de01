"""
Topic resolution for audit streams.
"""

from capacity_planner.config.models import AuditConfig


class TopicResolver:
    """
    Resolves audit stream names to publisher topics.

    Strategies:
    - per_table: "{prefix}{stream}"
    - single: every stream goes to one topic
    - custom: explicit stream-to-topic mapping, falling back to per_table
    """

    def __init__(self, config: AuditConfig | None = None) -> None:
        config = config or AuditConfig()
        self._strategy = config.topic_strategy
        self._prefix = config.topic_prefix
        self._mapping = config.topic_mapping

    def resolve(self, stream: str) -> str:
        """
        Resolve a stream name to a topic.

        Args:
            stream: Audit stream (e.g. "date_history")

        Returns:
            Topic name for the publisher backend
        """
        if self._strategy == "custom":
            return self._mapping.get(stream, f"{self._prefix}{stream}")
        elif self._strategy == "single":
            if self._mapping:
                return next(iter(self._mapping.values()))
            return self._prefix.rstrip(".") if self._prefix else "audit"
        return f"{self._prefix}{stream}"
