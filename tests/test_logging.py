"""
Tests for logging utilities and configuration.
"""

import json
import logging
import sys

import pytest

from trenchcalc.core.logging_config import (
    ColoredFormatter,
    JSONFormatter,
    get_log_level,
    get_logger,
    setup_logging,
)
from trenchcalc.utils.logging import log_performance, log_with_context


@pytest.fixture
def restore_root_logger():
    """Restore root handlers replaced by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_get_log_level(self):
        """Test log level name conversion."""
        assert get_log_level("DEBUG") == logging.DEBUG
        assert get_log_level("INFO") == logging.INFO
        assert get_log_level("WARNING") == logging.WARNING
        assert get_log_level("ERROR") == logging.ERROR
        assert get_log_level("CRITICAL") == logging.CRITICAL
        assert get_log_level("invalid") == logging.INFO  # Default

    def test_get_log_level_case_insensitive(self):
        """Test log level is case insensitive."""
        assert get_log_level("debug") == logging.DEBUG
        assert get_log_level("DeBuG") == logging.DEBUG

    def test_setup_logging_console_only(self, restore_root_logger):
        """Test logging setup with console handler only."""
        setup_logging(log_level="DEBUG", enable_console=True)

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_setup_logging_json_file(self, restore_root_logger, tmp_path):
        """Test logging setup with a JSON log file."""
        log_file = tmp_path / "logs" / "trenchcalc.log"
        setup_logging(log_level="INFO", log_file=log_file, json_logs=True, enable_console=False)

        get_logger("trenchcalc.test").info("Estimate done", extra={"bank_vol_cy": 7.41})
        for handler in restore_root_logger.handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        data = json.loads(lines[-1])
        assert data["message"] == "Estimate done"
        assert data["bank_vol_cy"] == 7.41

    def test_get_logger(self):
        assert get_logger("trenchcalc.test").name == "trenchcalc.test"


class TestFormatters:
    """Tests for log formatters."""

    @pytest.fixture
    def record(self):
        return logging.LogRecord(
            name="trenchcalc.core.estimator.calculator",
            level=logging.INFO,
            pathname="/path/to/calculator.py",
            lineno=42,
            msg="Estimated %s",
            args=("trench",),
            exc_info=None,
        )

    def test_json_formatter_basic(self, record):
        """Test JSON formatter with basic record."""
        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "trenchcalc.core.estimator.calculator"
        assert data["message"] == "Estimated trench"
        assert data["line"] == 42

    def test_json_formatter_with_extra_fields(self, record):
        """Test JSON formatter with extra fields."""
        record.total_field_hrs = 5.6
        record.duration_ms = 1.25

        data = json.loads(JSONFormatter().format(record))

        assert data["total_field_hrs"] == 5.6
        assert data["duration_ms"] == 1.25

    def test_json_formatter_with_exception(self, record):
        try:
            raise ValueError("bad slope")
        except ValueError:
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError: bad slope" in data["exception"]

    def test_colored_formatter_restores_level(self, record):
        formatted = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert ColoredFormatter.COLORS["INFO"] in formatted
        assert record.levelname == "INFO"


class TestLogPerformance:
    """Tests for log_performance decorator."""

    def test_logs_duration(self, caplog):
        @log_performance()
        def estimate(x):
            return x * 2

        with caplog.at_level(logging.INFO):
            assert estimate(3) == 6

        record = caplog.records[-1]
        assert "estimate executed in" in record.getMessage()
        assert record.duration_ms >= 0
        assert record.function.endswith("estimate")

    def test_threshold_suppresses_fast_calls(self, caplog):
        @log_performance(threshold_ms=10_000)
        def estimate():
            return 1

        with caplog.at_level(logging.DEBUG):
            estimate()

        assert not [r for r in caplog.records if "executed in" in r.getMessage()]

    def test_logs_when_raising(self, caplog):
        @log_performance()
        def failing():
            raise RuntimeError("boom")

        with caplog.at_level(logging.INFO):
            with pytest.raises(RuntimeError):
                failing()

        assert any("failing executed in" in r.getMessage() for r in caplog.records)


class TestLogWithContext:
    """Tests for log_with_context."""

    def test_context_attached(self, caplog):
        with caplog.at_level(logging.INFO):
            log_with_context(logging.INFO, "Estimate computed", bank_vol_cy=7.41)

        record = caplog.records[-1]
        assert record.getMessage() == "Estimate computed"
        assert record.bank_vol_cy == 7.41

    def test_target_logger(self, caplog):
        target = logging.getLogger("trenchcalc.test.target")

        with caplog.at_level(logging.INFO):
            log_with_context(logging.INFO, "Hauled", target=target, truck_loads=2)

        assert caplog.records[-1].name == "trenchcalc.test.target"
