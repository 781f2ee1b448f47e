"""Logging configuration for the application.

Development gets a readable one-line format; production gets key=value
pairs that include any ``extra`` fields passed by the caller.
"""

import logging
import sys
from typing import Any, Dict

from study_tracker.config import get_settings


class StructuredFormatter(logging.Formatter):
    """Formatter emitting key="value" pairs, extras included."""

    # Standard LogRecord attributes that should not be included as extra fields
    _STANDARD_ATTRS = set(
        logging.LogRecord("", 0, "", 0, "", None, None).__dict__
    ) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self._STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return " ".join(f'{key}="{value}"' for key, value in log_data.items())


DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Levels for noisy library loggers
LIBRARY_LEVELS = {
    "uvicorn": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "uvicorn.error": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "alembic": logging.INFO,
}


def build_formatter(production: bool) -> logging.Formatter:
    if production:
        return StructuredFormatter(datefmt=DATE_FORMAT)
    return logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt=DATE_FORMAT,
    )


def setup_logging() -> None:
    """Send all logs to stdout at LOG_LEVEL, replacing existing handlers."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(settings.LOG_LEVEL)
    handler.setFormatter(build_formatter(settings.is_production))

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(settings.LOG_LEVEL)

    for name, level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    root_logger.info(
        "Logging configured",
        extra={"log_level": settings.LOG_LEVEL, "environment": settings.ENVIRONMENT},
    )
