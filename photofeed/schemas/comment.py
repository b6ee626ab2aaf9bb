"""Comment API schemas."""

from datetime import datetime

from pydantic import Field

from photofeed.schemas.common import AuthorResponse, CamelModel


class CommentCreateRequest(CamelModel):
    """Length is enforced by the service after stripping whitespace."""

    text: str = Field(..., description="Comment text (1-500 characters)")


class CommentResponse(CamelModel):
    id: str
    text: str
    author: AuthorResponse
    created_at: datetime


class CommentPageResponse(CamelModel):
    comments: list[CommentResponse]
    has_more: bool
    next_cursor: str | None = None
