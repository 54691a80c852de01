"""
Factory for creating audit publishers from configuration.
"""

from capacity_planner.config.models import AuditConfig
from capacity_planner.domain.enums import AuditBackend
from capacity_planner.streaming.publisher import EventPublisher


def create_publisher(config: AuditConfig | None = None) -> EventPublisher:
    """
    Create a publisher instance based on configuration.

    Disabled auditing always yields the no-op publisher.

    Args:
        config: Audit configuration (defaults if None)

    Returns:
        An EventPublisher implementation
    """
    config = config or AuditConfig()
    backend = config.backend if config.enabled else AuditBackend.NOOP

    if backend == AuditBackend.JSON_FILE:
        from capacity_planner.streaming.implementations.json_file import JsonFilePublisher

        return JsonFilePublisher(output_dir=config.json_file_output_dir)

    elif backend == AuditBackend.LOG:
        from capacity_planner.streaming.implementations.log import LogPublisher

        return LogPublisher(level=config.log_level)

    elif backend == AuditBackend.MEMORY:
        from capacity_planner.streaming.implementations.memory import InMemoryPublisher

        return InMemoryPublisher()

    else:
        from capacity_planner.streaming.implementations.noop import NoopPublisher

        return NoopPublisher()
