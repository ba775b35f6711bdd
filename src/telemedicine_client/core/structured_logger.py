"""
Structured logging utilities for the telemedicine client
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import LoggingSettings


class StructuredLogger:
    """
    Structured logger that outputs JSON logs for easy parsing and querying
    """

    def __init__(self, name: str, level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

    def log(self, level: str, message: str, **kwargs):
        """Log with structured data"""
        log_data = {"message": message, **kwargs}
        self.logger.log(
            logging.getLevelName(level.upper()), json.dumps(log_data, default=str)
        )

    def info(self, message: str, **kwargs):
        """Log info level"""
        self.log("info", message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning level"""
        self.log("warning", message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error level"""
        self.log("error", message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug level"""
        self.log("debug", message, **kwargs)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


def configure_logging(settings: "LoggingSettings") -> None:
    """Attach a stdout handler to the package logger using the given settings."""
    logger = logging.getLogger("telemedicine_client")
    logger.setLevel(settings.level)

    handler = logging.StreamHandler(sys.stdout)
    if settings.format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logger.handlers = [handler]


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger"""
    return StructuredLogger(name, logging.NOTSET)
