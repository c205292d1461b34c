# planwright/logging_config.py
"""
Stderr-only logging configuration.

CRITICAL: the MCP server uses stdio transport, so ALL logging must go to
stderr. No print() statements, no stdout handlers.

Two formats: JSON lines (servers) and a short human-readable line (CLI).
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_VERBOSITY_LEVELS = {
    "quiet": logging.WARNING,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}

_THIRD_PARTY_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error", "fastmcp", "httpx"]


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON line."""
        log_data: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # Include exception info if present
        if record.exc_info:
            log_data["exc"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def level_for(verbosity: str) -> int:
    """Map an output.verbosity value to a logging level."""
    return _VERBOSITY_LEVELS.get(verbosity, logging.INFO)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """
    Configure logging to output to stderr only.

    MUST be called before any imports that might create loggers when
    serving over stdio. Clears existing handlers to prevent stdout pollution.

    Args:
        json_format: JSON lines if True, human-readable lines otherwise
        level: Root log level
    """
    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s  %(levelname)-7s  %(message)s", datefmt="%H:%M:%S")
        )

    # Get root logger and clear all existing handlers
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Configure third-party loggers to use same handler
    for logger_name in _THIRD_PARTY_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.handlers.clear()
        logger.addHandler(handler)
        # httpx logs every request at INFO
        logger.setLevel(max(level, logging.WARNING) if logger_name == "httpx" else level)
        logger.propagate = False  # Don't propagate to root to avoid double logging
