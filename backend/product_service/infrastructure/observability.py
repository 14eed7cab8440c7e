"""Structured Logging: JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (product_id, error_code, path, status_code) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency, full control over the shape
    - setup_logging called once on startup via lifespan; calling it again replaces
      its own handler instead of stacking duplicates
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "product_id", "error_code", "path", "status_code",
    "page_number", "page_size",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val) if key == "product_id" else val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure root logging for the application."""
    global _handler
    if _handler is not None:
        logging.root.removeHandler(_handler)
    _handler = logging.StreamHandler()
    if fmt == "json":
        _handler.setFormatter(JSONFormatter())
    else:
        _handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(_handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
