"""Post, feed, like and report API schemas."""

from datetime import datetime

from pydantic import Field

from photofeed.application.dtos.post import CaptionCreate, PostCreate, PostImageCreate
from photofeed.domain.enums import PostState, ReportReason
from photofeed.schemas.common import AuthorResponse, CamelModel


class ImageRefRequest(CamelModel):
    """Reference to an already-stored image."""

    image_url: str = Field(..., min_length=1, max_length=2048)
    original_file_name: str | None = Field(default=None, max_length=255)
    mime_type: str | None = Field(default=None, max_length=100)
    file_size: int | None = Field(default=None, ge=0)


class CaptionRequest(CamelModel):
    text: str = Field(..., min_length=1, max_length=2200)
    is_bold: bool = False
    is_italic: bool = False
    font_size: int = Field(default=14, ge=8, le=48)


class PostCreateRequest(CamelModel):
    """Request body for creating a post. Image count is checked by the service."""

    images: list[ImageRefRequest]
    caption: CaptionRequest | None = None

    def to_dto(self) -> PostCreate:
        return PostCreate(
            images=tuple(
                PostImageCreate(
                    image_url=img.image_url,
                    original_file_name=img.original_file_name,
                    mime_type=img.mime_type,
                    file_size=img.file_size,
                )
                for img in self.images
            ),
            caption=(
                CaptionCreate(
                    text=self.caption.text,
                    is_bold=self.caption.is_bold,
                    is_italic=self.caption.is_italic,
                    font_size=self.caption.font_size,
                )
                if self.caption
                else None
            ),
        )


class PostImageResponse(CamelModel):
    id: str
    image_url: str
    order_index: int
    original_file_name: str | None = None
    mime_type: str | None = None


class CaptionResponse(CamelModel):
    id: str
    text: str
    is_bold: bool
    is_italic: bool
    font_size: int


class FeedPostResponse(CamelModel):
    """One post as seen by the requesting viewer."""

    id: str
    author: AuthorResponse
    images: list[PostImageResponse]
    caption: CaptionResponse | None = None
    like_count: int
    is_liked_by_me: bool
    comment_count: int
    created_at: datetime


class FeedPageResponse(CamelModel):
    posts: list[FeedPostResponse]
    has_more: bool
    next_cursor: str | None = None


class LikeToggleResponse(CamelModel):
    liked: bool
    like_count: int


class ReportRequest(CamelModel):
    reason: ReportReason


class ReportResponse(CamelModel):
    id: str
    post_id: str
    reason: ReportReason
    created_at: datetime


class PostStateResponse(CamelModel):
    """Result of an admin state transition."""

    id: str
    state: PostState


class DismissReportsResponse(CamelModel):
    post_id: str
    dismissed: int
