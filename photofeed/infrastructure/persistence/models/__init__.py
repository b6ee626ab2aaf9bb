"""Persistence models: ORM entities and mixins."""

from photofeed.infrastructure.persistence.models.comment import Comment
from photofeed.infrastructure.persistence.models.edges import Follow, PostLike, Report
from photofeed.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    CuidMixin,
    TimestampMixin,
)
from photofeed.infrastructure.persistence.models.post import Post, PostCaption, PostImage
from photofeed.infrastructure.persistence.models.user import User

__all__ = [
    "Comment",
    "CreatedAtMixin",
    "CuidMixin",
    "Follow",
    "Post",
    "PostCaption",
    "PostImage",
    "PostLike",
    "Report",
    "TimestampMixin",
    "User",
]
