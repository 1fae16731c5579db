"""
SUNRISE Unit Tests - Logging Configuration

Unit tests for sunrise/logging_config.py.
Tests setup_logging, get_logger, set_module_level and log_timing, plus the
solver log output.

Run:
    pytest tests/unit/test_logging_config.py -v
"""

import logging
import tempfile
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import patch

import pytest

from sunrise.angles import Angle
from sunrise.events import refined_sunrise_set_utc
from sunrise.exceptions import EventNotFoundError
from sunrise.logging_config import get_logger, log_timing, set_module_level, setup_logging


def _close_file_handlers():
    # Close file handlers before temp dir cleanup
    root_logger = logging.getLogger("sunrise")
    for h in list(root_logger.handlers):
        if isinstance(h, RotatingFileHandler):
            h.close()
            root_logger.removeHandler(h)


# =============================================================================
# Test setup_logging Function
# =============================================================================

class TestSetupLogging:
    """Unit tests for setup_logging function."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()

        root_logger = logging.getLogger("sunrise")
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1

    def test_setup_logging_custom_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(log_level="DEBUG")
        assert logging.getLogger("sunrise").level == logging.DEBUG

    def test_setup_logging_invalid_level_defaults_to_info(self):
        """Test unknown level names fall back to INFO."""
        setup_logging(log_level="CHATTY")
        assert logging.getLogger("sunrise").level == logging.INFO

    def test_setup_logging_with_file(self):
        """Test setup_logging creates a rotating file handler."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "logs" / "sunrise.log"
            setup_logging(log_file=log_path)

            root_logger = logging.getLogger("sunrise")
            file_handlers = [
                h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)
            ]
            assert len(file_handlers) == 1
            assert Path(file_handlers[0].baseFilename) == log_path
            assert log_path.parent.exists()

            _close_file_handlers()

    def test_setup_logging_clears_existing_handlers(self):
        """Test that setup_logging clears existing handlers on re-initialization."""
        setup_logging(log_level="INFO")
        setup_logging(log_level="DEBUG")

        # Should not accumulate handlers
        assert len(logging.getLogger("sunrise").handlers) == 1


# =============================================================================
# Test get_logger Function
# =============================================================================

class TestGetLogger:
    """Unit tests for get_logger function."""

    def test_get_logger_adds_prefix(self):
        """Test get_logger places bare names under the sunrise namespace."""
        assert get_logger("events").name == "sunrise.events"

    def test_get_logger_preserves_existing_prefix(self):
        """Test module __name__ values are used as-is."""
        assert get_logger("sunrise.events").name == "sunrise.events"
        assert get_logger("sunrise").name == "sunrise"

    def test_get_logger_does_not_match_partial_prefix(self):
        """Test names that merely start with the word get prefixed."""
        assert get_logger("sunrisetools").name == "sunrise.sunrisetools"


# =============================================================================
# Test set_module_level Function
# =============================================================================

class TestSetModuleLevel:
    """Unit tests for set_module_level function."""

    def test_set_module_level(self):
        """Test setting a module level."""
        setup_logging()
        set_module_level("events", "DEBUG")
        assert logging.getLogger("sunrise.events").level == logging.DEBUG
        set_module_level("events", "NOTSET_LEVEL")
        assert logging.getLogger("sunrise.events").level == logging.INFO


# =============================================================================
# Test log_timing Context Manager
# =============================================================================

class TestLogTiming:
    """Unit tests for log_timing context manager."""

    def test_log_timing_logs_start_and_end(self):
        """Test log_timing logs operation start and completion."""
        logger = get_logger("test_timing")

        with patch.object(logger, "log") as mock_log:
            with log_timing(logger, "sunrise_details"):
                pass

            assert mock_log.call_count == 2
            message = mock_log.call_args_list[-1][0][1]
            assert "sunrise_details completed in" in message

    def test_log_timing_warns_on_threshold_exceeded(self):
        """Test log_timing emits warning when threshold exceeded."""
        logger = get_logger("test_threshold")

        with patch.object(logger, "warning") as mock_warning:
            with log_timing(logger, "slow_operation", warn_threshold_sec=0.01):
                time.sleep(0.05)

            mock_warning.assert_called_once()
            assert "exceeded" in mock_warning.call_args[0][0]

    def test_log_timing_includes_extra_data(self):
        """Test log_timing includes operation name in extra data."""
        logger = get_logger("test_extra")

        with patch.object(logger, "log") as mock_log:
            with log_timing(logger, "my_operation"):
                pass

            extra = mock_log.call_args_list[-1][1].get("extra", {})
            assert extra["operation"] == "my_operation"
            assert "elapsed_seconds" in extra

    def test_log_timing_works_with_exception(self):
        """Test log_timing still logs completion when the block raises."""
        logger = get_logger("test_exception_timing")

        with patch.object(logger, "log") as mock_log:
            with pytest.raises(RuntimeError):
                with log_timing(logger, "failing_operation"):
                    raise RuntimeError("boom")

            assert mock_log.call_count == 2


# =============================================================================
# Solver log output
# =============================================================================

class TestSolverLogging:
    """Tests for log records emitted by the solvers."""

    def test_polar_search_logged_at_debug(self, caplog):
        """Test the day search reports its offset."""
        with caplog.at_level(logging.DEBUG, logger="sunrise.events"):
            refined_sunrise_set_utc(True, -5, Angle(70.0), Angle(0.0))

        assert any("+61 days" in record.getMessage() for record in caplog.records)

    def test_edge_day_refinement_logged(self, caplog):
        """Test refinement leaving the event window is reported."""
        with caplog.at_level(logging.DEBUG, logger="sunrise.events"):
            refined_sunrise_set_utc(False, -5, Angle(70.0), Angle(0.0))

        messages = [record.getMessage() for record in caplog.records]
        assert any("left the event window" in message for message in messages)
        assert any("-1 days" in message for message in messages)

    def test_exhausted_search_logged_at_warning(self, caplog):
        """Test an exhausted search warns before raising."""
        with caplog.at_level(logging.WARNING, logger="sunrise.events"):
            with pytest.raises(EventNotFoundError):
                refined_sunrise_set_utc(False, -5, Angle(70.0), Angle(0.0), max_search_days=0)

        assert any(record.levelno == logging.WARNING for record in caplog.records)
