"""
Logging framework for the Travel Bucket List planner.

This module configures loguru for the planner core, providing a consistent
logging interface across all modules.
"""

import json
import os
import sys
from typing import Any

from loguru import logger

from travel_bucket_list.config import LogLevel


def get_logger(name: str):
    """
    Get a logger instance for the specified module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance with the module name attached
    """
    return logger.bind(name=name)


def setup_logging(
    log_level: LogLevel | str = LogLevel.INFO, log_file: str | None = None
):
    """
    Set up the logging configuration for the application.

    Args:
        log_level: The logging level to use (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
    """
    if isinstance(log_level, str):
        log_level = LogLevel(log_level.upper())

    logger.remove()

    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=log_level.value,
        colorize=True,
    )

    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        logger.add(
            log_file,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
                "{name}:{function}:{line} - {message}"
            ),
            level=log_level.value,
            rotation="10 MB",
            compression="zip",
        )

    logger.info(f"Logging initialized with level {log_level.value}")


class ServiceLogger:
    """
    Logger carrying the name of a planner service, so scheduler runs and
    state mutations can be traced back to the component that made them.
    """

    def __init__(self, service_name: str):
        self.service_name = service_name
        self.logger = logger.bind(service=service_name)

    def debug(self, message: str, **kwargs):
        """Log a debug message with service context."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log an info message with service context."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log a warning message with service context."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log an error message with service context."""
        self.logger.error(message, **kwargs)

    def log_mutation(self, action: str, trip_id: Any, **details: Any):
        """
        Log a change made to the trip collection.

        Args:
            action: Mutation name (add, update, remove, assign, ...)
            trip_id: Id of the affected trip
            **details: Extra fields worth keeping with the record
        """
        self.debug(
            f"Trip {action}: {trip_id}",
            action=action,
            trip_id=trip_id,
            details=self._safe_json(details),
        )

    def _safe_json(self, obj: Any) -> str | None:
        """Convert an object to JSON for the log record, falling back to str."""
        if obj is None:
            return None

        try:
            return json.dumps(obj, default=str)
        except (TypeError, ValueError) as e:
            self.warning(f"Failed to serialize object to JSON: {e!s}")
            return str(obj)
