"""
Centralized logging configuration for AssetVerse.

Every process writes the same line format:
Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    LOG_LEVEL: "TRACE", "DEBUG", "INFO" (default), "WARNING" or "ERROR"
               - TRACE: store call parameters (filters, payloads)
               - DEBUG: per-step lifecycle diagnostics

Usage:
    from assetverse.logging_config import configure_logging, get_logger

    configure_logging(source="api")
    logger = get_logger(__name__)
    logger.info("Application started")
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any

# Custom TRACE level for very verbose diagnostics
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS_BY_NAME = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _trace(self: logging.Logger, message: object, *args: object, **kw: object) -> None:
    """Log a message at TRACE level (5)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kw)  # type: ignore[arg-type]


logging.Logger.trace = _trace  # type: ignore[attr-defined]


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 UTC timestamps.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "app"):
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


class HealthCheckFilter(logging.Filter):
    """Suppress access-log lines for the liveness endpoint.

    Container health probes hit /health every few seconds; those lines are
    only kept when DEBUG logging is on.
    """

    HEALTH_PATHS = {"/health"}

    def filter(self, record: logging.LogRecord) -> bool:
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            return True

        message = record.getMessage()
        return all(not (path in message and ("GET" in message or "200" in message)) for path in self.HEALTH_PATHS)


def resolve_log_level(level: int | None = None, debug: bool | None = None) -> int:
    """Pick the effective level: explicit argument, then debug flag, then LOG_LEVEL."""
    if level is not None:
        return level
    if debug:
        return logging.DEBUG
    return _LEVELS_BY_NAME.get(os.getenv("LOG_LEVEL", "").upper(), logging.INFO)


def configure_logging(
    source: str = "app",
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure the root logger for a service component.

    Args:
        source: Identifier shown in brackets (e.g., "api", "worker")
        level: Explicit logging level; overrides LOG_LEVEL
        debug: Force DEBUG when no explicit level is given

    Returns:
        Configured root logger
    """
    level = resolve_log_level(level, debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())
    root_logger.addHandler(handler)

    # Uvicorn installs its own handlers; route them through ours instead
    for uvicorn_logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = False

    # The PocketBase SDK talks over httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root_logger


def uvicorn_log_config(source: str = "uvicorn") -> dict[str, Any]:
    """Build a dictConfig for uvicorn.run(..., log_config=...) in the same format."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"health_filter": {"()": HealthCheckFilter}},
        "formatters": {"default": {"()": ISO8601Formatter, "source": source}},
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "filters": ["health_filter"],
            },
        },
        "loggers": {
            name: {"handlers": ["default"], "level": "INFO", "propagate": False}
            for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
        },
    }


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
