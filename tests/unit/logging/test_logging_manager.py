"""
Unit tests for LoggingManager and the logging helpers around it.
"""

import json
import logging
import logging.handlers

import pytest

from gravefinder.exceptions import InvalidLocatorError
from gravefinder.logging import (
    GraveFinderLogger,
    LoggingConfig,
    LoggingConfiguration,
    LoggingContext,
    LoggingManager,
    StructuredFormatter,
    TimedOperation,
    timed,
)


@pytest.fixture
def fresh_manager():
    """A fresh LoggingManager; the root logger is restored afterwards."""
    root_logger = logging.getLogger()
    original_handlers = root_logger.handlers[:]
    original_level = root_logger.level
    original_instance = LoggingManager._instance
    original_initialized = LoggingManager._initialized

    LoggingManager._instance = None
    LoggingManager._initialized = False
    manager = LoggingManager()
    yield manager

    for handler in manager.handlers:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.handlers[:] = original_handlers
    root_logger.setLevel(original_level)
    LoggingManager._instance = original_instance
    LoggingManager._initialized = original_initialized


@pytest.mark.unit
class TestLoggingManager:
    def test_singleton_pattern(self):
        assert LoggingManager() is LoggingManager()

    def test_configure_console(self, fresh_manager):
        fresh_manager.configure(LoggingConfig(level="DEBUG", format_type="console", output="console"))

        assert fresh_manager.is_configured
        assert len(fresh_manager.handlers) == 1
        assert fresh_manager.handlers[0] in logging.getLogger().handlers
        assert logging.getLogger().level == logging.DEBUG

    def test_reconfigure_replaces_handlers(self, fresh_manager):
        fresh_manager.configure(LoggingConfig(output="console"))
        first = fresh_manager.handlers[0]

        fresh_manager.configure(LoggingConfig(output="console", format_type="json"))

        assert first not in logging.getLogger().handlers
        assert len(fresh_manager.handlers) == 1
        assert isinstance(fresh_manager.handlers[0].formatter, StructuredFormatter)

    def test_file_output_creates_directory(self, fresh_manager, temp_dir):
        log_file = temp_dir / "logs" / "gravefinder.log"

        fresh_manager.configure(LoggingConfig(output=["file"], file_path=log_file))

        assert log_file.parent.is_dir()
        assert isinstance(fresh_manager.handlers[0], logging.handlers.RotatingFileHandler)

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            LoggingConfig(level="LOUD")


@pytest.mark.unit
class TestStructuredFormatter:
    def test_json_record(self):
        formatter = StructuredFormatter(version="1.0.0")
        record = logging.LogRecord("gravefinder.test", logging.INFO, __file__, 10, "hello", None, None)
        record.correlation_id = "abc"
        record.extra_context = {"niche": 4, "imported": 2, "cemetery": 1}

        entry = json.loads(formatter.format(record))

        assert entry["message"] == "hello"
        assert entry["service"] == "gravefinder"
        assert entry["correlation_id"] == "abc"
        assert entry["imported"] == 2
        assert entry["location"] == {"cemetery": 1, "niche": 4}

    def test_error_record_keeps_its_own_message(self):
        error = InvalidLocatorError("plot", 5, "out of range 0..1")
        record = logging.LogRecord("gravefinder.cli", logging.ERROR, __file__, 10, "locator failed", None, None)
        record.extra_context = error.to_dict()

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["message"] == "locator failed"
        assert entry["error_code"] == "INVALID_LOCATOR"
        assert entry["location"] == {"plot": 5}

    def test_duration_is_reported_in_milliseconds(self):
        record = logging.LogRecord("gravefinder.test", logging.DEBUG, __file__, 10, "saved", None, None)
        record.extra_context = {"operation": "storage.save", "duration": 1.5}

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["duration_ms"] == 1.5
        assert entry["operation"] == "storage.save"
        assert "location" not in entry


@pytest.mark.unit
class TestGraveFinderLogger:
    def test_context_is_attached(self, caplog):
        logger = GraveFinderLogger("gravefinder.test", correlation_id="cid")

        with caplog.at_level(logging.INFO, logger="gravefinder.test"):
            logger.info("loaded", graves=3)

        record = caplog.records[-1]
        assert record.correlation_id == "cid"
        assert record.extra_context == {"graves": 3}

    def test_no_context(self, caplog):
        logger = GraveFinderLogger("gravefinder.test")

        with caplog.at_level(logging.INFO, logger="gravefinder.test"):
            logger.info("loaded")

        assert not hasattr(caplog.records[-1], "extra_context")


@pytest.mark.unit
class TestLoggingContext:
    def test_success_message(self, caplog):
        config = LoggingConfiguration(entry_msg="start", success_msg="done", failure_msg="failed")

        with caplog.at_level(logging.DEBUG, logger="gravefinder.test"):
            with LoggingContext(config, logging.getLogger("gravefinder.test")):
                pass

        assert [r.getMessage() for r in caplog.records] == ["start", "done"]

    def test_failure_is_logged_and_propagated(self, caplog):
        config = LoggingConfiguration(success_msg="done", failure_msg="failed")

        with caplog.at_level(logging.DEBUG, logger="gravefinder.test"):
            with pytest.raises(RuntimeError):
                with LoggingContext(config, logging.getLogger("gravefinder.test")):
                    raise RuntimeError("boom")

        record = caplog.records[-1]
        assert record.getMessage() == "failed"
        assert record.levelno == logging.ERROR
        assert record.extra_context == {"error": "boom"}


@pytest.mark.unit
class TestTiming:
    def test_timed_operation_records_duration(self):
        with TimedOperation("load") as operation:
            pass

        assert operation.duration_ms is not None
        assert operation.duration_ms >= 0

    def test_timed_logs_at_debug(self, caplog):
        @timed("unit.work")
        def work():
            return 42

        with caplog.at_level(logging.DEBUG):
            assert work() == 42

        assert any("unit.work" in r.getMessage() for r in caplog.records)

    def test_timed_skips_logging_above_debug(self, caplog):
        @timed("unit.quiet")
        def work():
            return 7

        with caplog.at_level(logging.WARNING):
            assert work() == 7

        assert not any("unit.quiet" in r.getMessage() for r in caplog.records)
