"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system are timezone-aware UTC. SQLite (used in
tests) hands back naive values; normalize them with ensure_utc at the
repository boundary.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of datetime.now() or datetime.utcnow().
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_iso_utc(value: str) -> datetime:
    """
    Parse an ISO-8601 string into a UTC-aware datetime.

    Accepts a trailing 'Z' and naive values (read as UTC).

    Raises:
        ValueError: If value is not a valid ISO-8601 timestamp.
    """
    parsed = datetime.fromisoformat(value.strip())
    return parsed.replace(tzinfo=UTC) if parsed.tzinfo is None else parsed.astimezone(UTC)
