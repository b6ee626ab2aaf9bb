"""Shared utilities: datetime and id generators."""

from photofeed.shared.utils.datetime import ensure_utc, parse_iso_utc, utc_now
from photofeed.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_iso_utc",
]
