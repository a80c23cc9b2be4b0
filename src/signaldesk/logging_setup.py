"""Structured JSON logging for the ``signaldesk`` logger tree."""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from . import config

# Extra attributes copied from LogRecord onto the JSON entry when present.
_EXTRA_FIELDS = (
    "source_name",
    "signal_id",
    "row_count",
    "using_explain",
    "is_demo",
    "access_hint",
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a single JSON stderr handler to the ``signaldesk`` logger."""
    logger = logging.getLogger("signaldesk")
    level_name = (level or config.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
    return logger
