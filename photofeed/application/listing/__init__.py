"""Cursor-paginated relationship listing: paging, visibility, and enrichment."""

from photofeed.application.listing.assembler import Enrichment, ListingAssembler
from photofeed.application.listing.cursor import decode_cursor, encode_cursor
from photofeed.application.listing.pagination import (
    MAX_PAGE_LIMIT,
    MIN_PAGE_LIMIT,
    Page,
    PageRequest,
    paginate,
)
from photofeed.application.listing.visibility import (
    DIRECT_ACCESS,
    FEED_VISIBILITY,
    UNFILTERED,
    VisibilityPolicy,
    is_visible,
)

__all__ = [
    "DIRECT_ACCESS",
    "Enrichment",
    "FEED_VISIBILITY",
    "ListingAssembler",
    "MAX_PAGE_LIMIT",
    "MIN_PAGE_LIMIT",
    "Page",
    "PageRequest",
    "UNFILTERED",
    "VisibilityPolicy",
    "decode_cursor",
    "encode_cursor",
    "is_visible",
    "paginate",
]
