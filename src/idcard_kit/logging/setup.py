"""Logging configuration for idcard-kit.

Provides structured JSON logging with job_id correlation, so every line
emitted during one CLI run (e.g. a batch validation) can be grouped.
"""

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any, Optional

from pythonjsonlogger import jsonlogger


# Context variable for job_id correlation
job_id_var: ContextVar[str] = ContextVar("job_id", default="")


class JobContextFilter(logging.Filter):
    """Filter that adds job_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.job_id = job_id_var.get() or "-"
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with service and job fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = "idcard-kit"

        if hasattr(record, "job_id"):
            log_record["job_id"] = record.job_id


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               IDCARD_KIT_LOG_LEVEL or INFO.
        json_format: Whether to use JSON format. Defaults to env var
                     IDCARD_KIT_LOG_FORMAT == 'json' or True.
    """
    if level is None:
        level = os.getenv("IDCARD_KIT_LOG_LEVEL", "INFO").upper()
    if json_format is None:
        log_format = os.getenv("IDCARD_KIT_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries command output, logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(JobContextFilter())

    if json_format:
        formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - [%(job_id)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # presidio logs every recognizer it loads at INFO
    logging.getLogger("presidio-analyzer").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)


def set_job_id(job_id: str) -> None:
    """Set the job ID for the current context."""
    job_id_var.set(job_id)


def get_job_id() -> str:
    """Get the current job ID, or an empty string."""
    return job_id_var.get()
