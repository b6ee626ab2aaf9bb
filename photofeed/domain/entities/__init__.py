"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from photofeed.domain.entities.post import PostEntity

__all__ = ["PostEntity"]
