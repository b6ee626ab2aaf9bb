"""Application ports: repository protocols implemented by infrastructure."""

from photofeed.application.interfaces.repositories import (
    ICommentRepository,
    IFollowRepository,
    ILikeRepository,
    IPostRepository,
    IRelationshipResolver,
    IReportRepository,
    IUserRepository,
)

__all__ = [
    "ICommentRepository",
    "IFollowRepository",
    "ILikeRepository",
    "IPostRepository",
    "IRelationshipResolver",
    "IReportRepository",
    "IUserRepository",
]
