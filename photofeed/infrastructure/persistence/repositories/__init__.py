"""SQLAlchemy repository implementations of the application ports."""

from photofeed.infrastructure.persistence.repositories.base import BaseRepository
from photofeed.infrastructure.persistence.repositories.comment_repo import CommentRepository
from photofeed.infrastructure.persistence.repositories.follow_repo import FollowRepository
from photofeed.infrastructure.persistence.repositories.like_repo import LikeRepository
from photofeed.infrastructure.persistence.repositories.post_repo import PostRepository
from photofeed.infrastructure.persistence.repositories.relationship_resolver import (
    RelationshipResolver,
)
from photofeed.infrastructure.persistence.repositories.report_repo import ReportRepository
from photofeed.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "CommentRepository",
    "FollowRepository",
    "LikeRepository",
    "PostRepository",
    "RelationshipResolver",
    "ReportRepository",
    "UserRepository",
]
