"""Application DTOs: read-models and inputs passed between layers (no ORM)."""

from photofeed.application.dtos.comment import CommentResult
from photofeed.application.dtos.follow import (
    FollowEdgeResult,
    FollowToggleResult,
    FollowUserItem,
)
from photofeed.application.dtos.post import (
    CaptionCreate,
    FeedItem,
    LikeToggleResult,
    PostCaptionResult,
    PostCreate,
    PostImageCreate,
    PostImageResult,
    PostResult,
    PostStateResult,
)
from photofeed.application.dtos.report import (
    DismissReportsResult,
    ModerationPostItem,
    ReportDetail,
    ReportResult,
)
from photofeed.application.dtos.user import AuthorSummary, ProfileResult, UserResult

__all__ = [
    "AuthorSummary",
    "CaptionCreate",
    "CommentResult",
    "DismissReportsResult",
    "FeedItem",
    "FollowEdgeResult",
    "FollowToggleResult",
    "FollowUserItem",
    "LikeToggleResult",
    "ModerationPostItem",
    "PostCaptionResult",
    "PostCreate",
    "PostImageCreate",
    "PostImageResult",
    "PostResult",
    "PostStateResult",
    "ProfileResult",
    "ReportDetail",
    "ReportResult",
    "UserResult",
]
