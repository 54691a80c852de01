"""
Structured logging configuration for the capacity planner.

Uses structlog for structured, contextual logging.
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output logs as JSON
        include_timestamp: If True, include timestamp in logs
    """
    # Logs go to stderr so command output on stdout stays clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger.

    Args:
        name: Logger name (optional)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name)


class AnalysisLogger:
    """
    Specialized logger for availability analysis events.

    Provides convenience methods for the events the planner emits.

    Usage:
        logger = AnalysisLogger(region="US")
        logger.analysis_started(execute_commit, soft_code_complete, ga)
        logger.analysis_completed(total_working_days=44, total_available_days=37)
    """

    def __init__(self, **context: Any):
        """
        Initialize the analysis logger.

        Args:
            **context: Context bound to every event (e.g. region)
        """
        self._logger = structlog.get_logger().bind(**context)

    def bind(self, **kwargs: Any) -> "AnalysisLogger":
        """Bind additional context to the logger."""
        self._logger = self._logger.bind(**kwargs)
        return self

    def analysis_started(
        self,
        execute_commit: str,
        soft_code_complete: str,
        ga: str,
        **kwargs: Any,
    ) -> None:
        """Log analysis start."""
        self._logger.info(
            "availability_analysis_started",
            execute_commit=execute_commit,
            soft_code_complete=soft_code_complete,
            ga=ga,
            **kwargs,
        )

    def analysis_completed(
        self,
        total_working_days: int,
        total_deductions: int,
        total_available_days: int,
        efficiency: float,
        **kwargs: Any,
    ) -> None:
        """Log analysis completion."""
        self._logger.info(
            "availability_analysis_completed",
            total_working_days=total_working_days,
            total_deductions=total_deductions,
            total_available_days=total_available_days,
            efficiency=f"{efficiency:.1f}%",
            **kwargs,
        )

    def date_changed(
        self,
        release_plan_id: str,
        field_name: str,
        old_date: str | None,
        new_date: str | None,
        **kwargs: Any,
    ) -> None:
        """Log a milestone date change."""
        self._logger.info(
            "milestone_date_changed",
            release_plan_id=release_plan_id,
            field_name=field_name,
            old_date=old_date,
            new_date=new_date,
            **kwargs,
        )

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error."""
        self._logger.error(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning."""
        self._logger.warning(message, **kwargs)
