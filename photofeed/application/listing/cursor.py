"""Cursor codec for timestamp-keyed listings.

A cursor is the ISO-8601 creation timestamp of the last item on the
previous page, in UTC with microsecond precision and a "Z" suffix so it
survives an unencoded query string. Clients treat it as opaque.
"""

from datetime import datetime

from photofeed.domain.exceptions import InvalidCursorException
from photofeed.shared.utils.datetime import ensure_utc, parse_iso_utc


def encode_cursor(created_at: datetime) -> str:
    """Return the cursor string for an item created at created_at."""
    return ensure_utc(created_at).isoformat(timespec="microseconds").replace("+00:00", "Z")


def decode_cursor(cursor: str) -> datetime:
    """Parse a cursor back into a UTC-aware datetime.

    Naive timestamps are read as UTC.

    Raises:
        InvalidCursorException: If cursor is not an ISO-8601 timestamp.
    """
    try:
        return parse_iso_utc(cursor)
    except (TypeError, ValueError) as e:
        raise InvalidCursorException(cursor) from e
