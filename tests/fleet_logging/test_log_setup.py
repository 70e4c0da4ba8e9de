"""Tests for logging setup, formatters, filters and context."""

import json
import logging

import pytest

from fleet_trips.fleet_logging import (
    ContextFilter,
    DefaultCorrelationFilter,
    DevFormatter,
    JSONFormatter,
    LogContext,
    PIIFilter,
    log_context,
    log_trip_context,
    setup_logging,
)


def make_record(msg: str = "Test message", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers.copy()
    original_level = root_logger.level
    yield root_logger
    root_logger.handlers = original_handlers
    root_logger.setLevel(original_level)


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_single_handler_with_filters(self, restore_root_logger):
        """Root logger gets one handler with all filters."""
        setup_logging(level="DEBUG")

        assert len(restore_root_logger.handlers) == 1
        handler = restore_root_logger.handlers[0]
        assert isinstance(handler.formatter, DevFormatter)
        filter_types = {type(f) for f in handler.filters}
        assert filter_types == {PIIFilter, DefaultCorrelationFilter, ContextFilter}
        assert restore_root_logger.level == logging.DEBUG

    def test_json_output(self, restore_root_logger):
        """json_output selects JSONFormatter with the environment."""
        setup_logging(json_output=True, environment="production")
        formatter = restore_root_logger.handlers[0].formatter
        assert isinstance(formatter, JSONFormatter)
        assert formatter.environment == "production"

    def test_suppresses_noisy_loggers(self, restore_root_logger):
        """SQLAlchemy engine logging is raised to WARNING."""
        setup_logging()
        assert logging.getLogger("sqlalchemy.engine").level >= logging.WARNING


@pytest.mark.unit
class TestFormatters:
    """Tests for JSON and dev formatters."""

    def test_json_formatter_includes_context_fields(self):
        """JSON output carries context fields that are set."""
        record = make_record(trip_id="trip-1", operator="Dana", correlation_id="trip-1")
        data = json.loads(JSONFormatter(environment="staging").format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert data["env"] == "staging"
        assert data["trip_id"] == "trip-1"
        assert data["operator"] == "Dana"
        assert "vehicle_id" not in data

    def test_dev_formatter_without_correlation_id(self):
        """Dev format falls back to a dash for correlation id."""
        output = DevFormatter().format(make_record())
        assert "[-]" in output
        assert "Test message" in output


@pytest.mark.unit
class TestFilters:
    """Tests for PII and correlation filters."""

    def test_pii_filter_masks_email(self):
        """Email addresses are masked."""
        record = make_record("Planned by dana@fleet.example")
        PIIFilter().filter(record)
        assert record.msg == "Planned by [EMAIL]"

    def test_pii_filter_masks_phone(self):
        """Phone numbers are masked."""
        record = make_record("Call driver at 555-123-4567")
        PIIFilter().filter(record)
        assert record.msg == "Call driver at [PHONE]"

    def test_pii_filter_keeps_odometer_readings(self):
        """Plain numbers such as odometer readings are kept."""
        record = make_record("Trip completed at odometer 45830, distance 600")
        PIIFilter().filter(record)
        assert record.msg == "Trip completed at odometer 45830, distance 600"

    def test_default_correlation_filter(self):
        """Missing correlation id defaults to a dash."""
        record = make_record()
        DefaultCorrelationFilter().filter(record)
        assert record.correlation_id == "-"


@pytest.mark.unit
class TestLogContext:
    """Tests for thread-local log context."""

    def test_trip_context_sets_and_clears_fields(self):
        """Trip context is applied inside the block and cleared after."""
        with log_trip_context("trip-9", vehicle_id="v1"):
            record = make_record()
            ContextFilter().filter(record)
            assert record.trip_id == "trip-9"
            assert record.correlation_id == "trip-9"
            assert record.vehicle_id == "v1"

        assert LogContext.get() == {}

    def test_nested_context_restores_outer(self):
        """Leaving an inner context restores the outer one."""
        with log_context(operator="Dana"):
            with log_trip_context("trip-1"):
                assert LogContext.get()["trip_id"] == "trip-1"
            assert LogContext.get() == {"operator": "Dana"}
        assert LogContext.get() == {}

    def test_record_attributes_take_precedence(self):
        """Explicit record attributes are not overwritten."""
        with log_context(trip_id="from-context"):
            record = make_record(trip_id="explicit")
            ContextFilter().filter(record)
            assert record.trip_id == "explicit"
