"""
SUNRISE Logging Configuration

Provides centralized logging configuration for the sunrise package with
support for:
- Console output on stdout
- Rotating file handlers with size limits
- Per-module log level configuration
- Timing helper for solver runs (log_timing)

Usage:
    from sunrise.logging_config import setup_logging, get_logger, log_timing

    # Initialize logging at application startup
    setup_logging(log_level="DEBUG", log_file="sunrise.log")

    # Get a logger for your module
    logger = get_logger(__name__)
    logger.debug("Searching forward for next sunrise")

    # Time a block of code
    with log_timing(logger, "sunrise_details"):
        details = sunrise_details(when, longitude, latitude)
"""

import logging
import sys
import time
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Generator, Optional

from sunrise.constants import LOG_BACKUP_COUNT, LOG_DATE_FORMAT, LOG_MAX_BYTES

# Module-level constants
ROOT_LOGGER_NAME = "sunrise"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log level mapping for per-module configuration
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str | Path] = None,
) -> None:
    """Configure logging for the sunrise package.

    Sets up the package logger with a console handler and an optional
    rotating file handler. Calling it again replaces the handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file. If provided, enables file logging
                  with rotation.

    Example:
        setup_logging(log_level="DEBUG", log_file="/var/log/sunrise.log")
    """
    level = LOG_LEVELS.get(log_level.upper(), logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # Close before clearing so rotated files are released
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT, LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the sunrise namespace.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger instance inheriting the package configuration

    Example:
        logger = get_logger(__name__)
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_module_level(module_name: str, level: str) -> None:
    """Set log level for a single sunrise module.

    Args:
        module_name: Module name without the package prefix (e.g., "events")
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Example:
        set_module_level("events", "DEBUG")  # Trace the day search
    """
    logger = get_logger(module_name)
    logger.setLevel(LOG_LEVELS.get(level.upper(), logging.INFO))


@contextmanager
def log_timing(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
    warn_threshold_sec: Optional[float] = None,
) -> Generator[None, None, None]:
    """Context manager to log the duration of an operation.

    Optionally emits a warning if the operation exceeds a threshold.

    Args:
        logger: Logger instance to use
        operation: Name of the operation being timed
        level: Log level for the timing message (default: DEBUG)
        warn_threshold_sec: If set, emit WARNING if duration exceeds this

    Example:
        with log_timing(logger, "sunrise_details", warn_threshold_sec=0.5):
            details = sunrise_details(when, longitude, latitude)

        # Logs: "sunrise_details completed in 0.002s"
    """
    start_time = time.perf_counter()
    logger.log(level, f"{operation} started")

    try:
        yield
    finally:
        elapsed = time.perf_counter() - start_time
        extra = {
            "operation": operation,
            "elapsed_seconds": round(elapsed, 3),
        }

        if warn_threshold_sec is not None and elapsed > warn_threshold_sec:
            logger.warning(
                f"{operation} completed in {elapsed:.3f}s "
                f"(exceeded {warn_threshold_sec}s threshold)",
                extra=extra,
            )
        else:
            logger.log(level, f"{operation} completed in {elapsed:.3f}s", extra=extra)
