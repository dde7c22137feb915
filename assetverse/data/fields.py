"""Helpers for moving values between domain models and PocketBase records."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)


def quote(value: str) -> str:
    """Quote a string literal for a PocketBase filter expression.

    Backslashes and double quotes are escaped so caller-supplied emails or
    ids cannot break out of the literal.
    """
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_pb_datetime(value: datetime | None) -> str:
    """Format a datetime the way PocketBase stores it (UTC, millisecond precision)."""
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    utc_value = value.astimezone(UTC)
    return utc_value.strftime("%Y-%m-%d %H:%M:%S.") + f"{utc_value.microsecond // 1000:03d}Z"


def from_pb_datetime(value: Any) -> datetime | None:
    """Parse a PocketBase date field; empty strings mean unset."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Unparseable date value from store: {value!r}")
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)


def record_value(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a PocketBase record, treating empty strings as missing."""
    value = getattr(record, name, None)
    if value is None or value == "":
        return default
    return value


def record_int(record: Any, name: str, default: int = 0) -> int:
    """Read a numeric field from a PocketBase record as an int."""
    value = getattr(record, name, None)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Non-numeric value for {name}: {value!r}")
        return default
