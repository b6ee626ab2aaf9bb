"""Cursor pagination primitives: validated page requests and page trimming.

Listings fetch limit + 1 rows ordered by (created_at DESC, id DESC); the
extra row only signals that another page exists and is never returned.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from photofeed.application.listing.cursor import decode_cursor, encode_cursor
from photofeed.domain.exceptions import ValidationException

MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 50

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PageRequest:
    """Validated listing window: page size and optional exclusive upper bound."""

    limit: int
    cursor: datetime | None = None

    @classmethod
    def create(
        cls,
        limit: int | None,
        cursor: str | None,
        default_limit: int,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> "PageRequest":
        """Validate raw query values.

        An absent limit falls back to default_limit. An absent or empty
        cursor starts at the newest item.

        Raises:
            ValidationException: If limit is outside [1, max_limit].
            InvalidCursorException: If cursor is not an ISO-8601 timestamp.
        """
        if limit is None:
            limit = default_limit
        if not MIN_PAGE_LIMIT <= limit <= max_limit:
            raise ValidationException(
                f"limit must be between {MIN_PAGE_LIMIT} and {max_limit}",
                field="limit",
            )
        decoded = decode_cursor(cursor) if cursor else None
        return cls(limit=limit, cursor=decoded)

    @property
    def fetch_size(self) -> int:
        """Rows to request from the store (one more than the page size)."""
        return self.limit + 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a listing. next_cursor is None iff has_more is False."""

    items: list[T]
    has_more: bool = False
    next_cursor: str | None = None

    @classmethod
    def empty(cls) -> "Page[T]":
        return cls(items=[])

    def with_items(self, items: list[U]) -> "Page[U]":
        """Return a page with the same continuation and different items."""
        return Page(items=items, has_more=self.has_more, next_cursor=self.next_cursor)


def paginate(
    rows: Sequence[T],
    limit: int,
    created_at_of: Callable[[T], datetime],
) -> Page[T]:
    """Trim a limit + 1 fetch into a page.

    If more than limit rows came back, the extra row is dropped and the
    cursor is the creation timestamp of the new last item.
    """
    if len(rows) <= limit:
        return Page(items=list(rows))
    items = list(rows[:limit])
    return Page(
        items=items,
        has_more=True,
        next_cursor=encode_cursor(created_at_of(items[-1])),
    )
