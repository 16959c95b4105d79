"""Structured logging configuration for the Loyalty Maturity Quiz service.

Every module logs through get_logger(__name__). Log lines are key=value
pairs so they grep well. The service logs scorer debug totals, stored
assessments (tagged with assessment_id), rejected request payloads and
route failures with their traceback. The terminal client logs API
submissions and failed runs.
"""

import logging
import sys
from typing import Any


class StructuredFormatter(logging.Formatter):
    """
    Key=value structured log formatter.

    Emits timestamp, level, module, function and message, then
    assessment_id when the record is tied to a stored assessment, then any
    context passed through log_with_context (e.g. overall_percentage).
    A traceback, if any, follows on the next lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured output."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        # Add assessment_id if present in extra
        if hasattr(record, "assessment_id"):
            log_data["assessment_id"] = record.assessment_id

        # Add any other extra fields
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        # Format as key=value pairs for readability
        parts = [f"{k}={v}" for k, v in log_data.items()]
        line = " ".join(parts)

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        # Set level based on environment
        try:
            from app.core.config import get_settings

            settings = get_settings()
            if settings.QUIZ_ENV == "dev":
                logger.setLevel(logging.DEBUG)
            else:
                logger.setLevel(logging.INFO)
        except Exception:
            # Default to INFO if settings not available
            logger.setLevel(logging.INFO)

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **kwargs: Any) -> None:
    """
    Log with additional context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **kwargs: Additional context fields (e.g., assessment_id)
    """
    extra = {"extra_data": kwargs}
    if "assessment_id" in kwargs:
        extra["assessment_id"] = kwargs.pop("assessment_id")
        extra["extra_data"] = kwargs

    logger.log(level, msg, extra=extra)
