"""Logging setup for the command-line entry point.

Library modules only create loggers via ``logging.getLogger(__name__)``;
handlers are installed here, and only by the CLI.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

LOG_FORMATS = ("pretty", "json")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


class PrettyFormatter(logging.Formatter):
    """Format log records in human-readable format."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: str = "WARNING", format_type: str = "pretty") -> logging.Logger:
    """
    Configure the ``manchu_converter`` logger hierarchy.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "pretty" or "json"

    Returns:
        The configured package logger
    """
    if format_type not in LOG_FORMATS:
        raise ValueError(f"Unknown log format {format_type!r} (expected one of {LOG_FORMATS})")

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level {level!r}")

    logger = logging.getLogger("manchu_converter")
    logger.setLevel(numeric)
    logger.handlers.clear()

    # stdout carries converted text, so logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if format_type == "json" else PrettyFormatter())
    logger.addHandler(handler)
    return logger
