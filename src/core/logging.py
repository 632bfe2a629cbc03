"""Logging configuration for numkit."""

import json
import logging
import sys
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "numkit"


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        output: Dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if hasattr(record, "data"):
            output["data"] = record.data

        return json.dumps(output, default=str)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a JSON stderr handler to the numkit logger (once)."""
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
        app_logger.addHandler(handler)
        app_logger.propagate = False

    app_logger.setLevel(level)
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the numkit namespace."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_with_data(
    logger: logging.Logger,
    level: int,
    msg: str,
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Log a message with optional structured data."""
    if data:
        logger.log(level, msg, extra={"data": data})
    else:
        logger.log(level, msg)
