"""
Structured Logging — JSON Output for Production

Configures Python logging to emit structured JSON logs.
Each log entry includes timestamp, level, logger, and
any known context fields passed through ``extra``.

Usage:
    from eumenides.logging import get_logger
    logger = get_logger("detector")
    logger.info("Classified", extra={"score": 4.0, "sensitivity": "medium"})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


LOG_LEVEL = os.getenv("EUMENIDES_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("EUMENIDES_LOG_FORMAT", "json")  # "json" or "text"

EXTRA_FIELDS = (
    "score", "sensitivity", "tier", "emotion", "is_aggressive",
    "detected_by", "classifier", "language", "words", "cache_hit",
    "duration_ms", "error", "error_type",
)


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable format for development."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Logger:
    """Configure the eumenides logger. Call once at startup."""
    root = logging.getLogger("eumenides")
    level = (level or LOG_LEVEL).upper()
    root.setLevel(getattr(logging, level, logging.INFO))

    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if (fmt or LOG_FORMAT) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)

    # Suppress noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the eumenides namespace."""
    return logging.getLogger(f"eumenides.{name}")
