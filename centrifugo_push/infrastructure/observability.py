"""Structured Logging — JSON formatter and setup for client-side observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (method, status_code, error_code, api_code, duration_ms) surfaced when present
    - JSON format by default, human-readable with fmt="text"
    - setup_logging is idempotent: a second call replaces the handler it installed
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "method", "status_code", "error_code", "api_code", "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_installed_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure the centrifugo_push logger. Returns the installed handler."""
    global _installed_handler
    logger = logging.getLogger("centrifugo_push")
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler
