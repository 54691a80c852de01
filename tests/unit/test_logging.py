"""
Tests for structured logging helpers.
"""

from structlog.testing import capture_logs

from capacity_planner.utils.logging import AnalysisLogger, get_logger


class TestAnalysisLogger:
    """Tests for AnalysisLogger events."""

    def test_bound_context_on_every_event(self):
        with capture_logs() as logs:
            logger = AnalysisLogger(region="IN")
            logger.analysis_started("2024-01-02", "2024-02-01", "2024-03-01")

        assert logs[0]["event"] == "availability_analysis_started"
        assert logs[0]["region"] == "IN"
        assert logs[0]["ga"] == "2024-03-01"

    def test_completed_formats_efficiency(self):
        with capture_logs() as logs:
            AnalysisLogger().analysis_completed(
                total_working_days=44,
                total_deductions=8,
                total_available_days=37,
                efficiency=37 / 44 * 100,
            )

        assert logs[0]["efficiency"] == "84.1%"
        assert logs[0]["log_level"] == "info"

    def test_date_changed(self):
        with capture_logs() as logs:
            AnalysisLogger().bind(source="test").date_changed("rp-1", "ga", None, "2024-07-02")

        event = logs[0]
        assert event["event"] == "milestone_date_changed"
        assert event["old_date"] is None
        assert event["source"] == "test"


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_usable_logger(self):
        with capture_logs() as logs:
            get_logger("planner").warning("something_odd", count=2)

        assert logs == [{"event": "something_odd", "count": 2, "log_level": "warning"}]
