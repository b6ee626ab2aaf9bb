"""Admin API schemas: moderation post queue and user list."""

from datetime import datetime

from photofeed.application.dtos.report import ModerationPostItem
from photofeed.application.dtos.user import UserResult
from photofeed.domain.enums import PostState, ReportReason, UserRole
from photofeed.schemas.common import AuthorResponse, CamelModel


class ModerationReportResponse(CamelModel):
    id: str
    reporter: AuthorResponse
    reason: ReportReason
    created_at: datetime


class ModerationPostResponse(CamelModel):
    """One row of the moderation queue."""

    id: str
    author: AuthorResponse
    first_image_url: str | None = None
    state: PostState
    created_at: datetime
    report_count: int
    reports: list[ModerationReportResponse]

    @classmethod
    def from_item(cls, item: ModerationPostItem) -> "ModerationPostResponse":
        return cls(
            id=item.id,
            author=AuthorResponse.model_validate(item.author),
            first_image_url=item.first_image_url,
            state=item.state,
            created_at=item.created_at,
            report_count=item.report_count,
            reports=[ModerationReportResponse.model_validate(r) for r in item.reports],
        )


class ModerationPostPageResponse(CamelModel):
    posts: list[ModerationPostResponse]
    has_more: bool
    next_cursor: str | None = None


class AdminUserResponse(CamelModel):
    id: str
    email: str
    username: str
    role: UserRole
    is_suspended: bool
    created_at: datetime

    @classmethod
    def from_result(cls, user: UserResult) -> "AdminUserResponse":
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            role=user.role,
            is_suspended=user.is_suspended,
            created_at=user.created_at,
        )


class AdminUserPageResponse(CamelModel):
    users: list[AdminUserResponse]
    has_more: bool
    next_cursor: str | None = None
