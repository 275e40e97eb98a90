"""Structured JSON logging configuration.

Configures Python logging to emit one JSON object per log entry with the
fields: timestamp, level, logger, message. Selection-specific fields are
added contextually through ``extra`` (client_ip, internal, banner_count,
valid_count, expiration, error_reason).
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import IO


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Optional fields copied from the record when a log call passes them in ``extra``
_CONTEXT_FIELDS = (
    "client_ip",
    "internal",
    "banner_count",
    "valid_count",
    "expiration",
)


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in _CONTEXT_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if hasattr(record, "error_reason"):
            entry["error_reason"] = str(getattr(record, "error_reason"))

        # Exception info
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO", stream: IO[str] | None = None) -> logging.Handler:
    """Install a single JSON handler on the root logger.

    Parameters
    ----------
    level:
        Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    stream:
        Where log lines are written; stderr when omitted.

    Returns
    -------
    logging.Handler
        The installed handler, replacing any handlers already on the root.
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    name = level.upper()
    root.setLevel(name if name in _LEVELS else "INFO")
    return handler
