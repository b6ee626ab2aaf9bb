"""DTOs for post, feed and like use cases."""

from dataclasses import dataclass, field
from datetime import datetime

from photofeed.application.dtos.user import AuthorSummary
from photofeed.domain.enums import PostState


@dataclass(frozen=True)
class PostImageResult:
    id: str
    image_url: str
    order_index: int
    original_file_name: str | None
    mime_type: str | None


@dataclass(frozen=True)
class PostCaptionResult:
    id: str
    text: str
    is_bold: bool
    is_italic: bool
    font_size: int


@dataclass(frozen=True)
class PostResult:
    """Post read-model before enrichment (the raw listing row)."""

    id: str
    author: AuthorSummary
    images: tuple[PostImageResult, ...]
    caption: PostCaptionResult | None
    state: PostState
    created_at: datetime


@dataclass(frozen=True)
class FeedItem:
    """Post enriched for a specific viewer."""

    id: str
    author: AuthorSummary
    images: tuple[PostImageResult, ...]
    caption: PostCaptionResult | None
    like_count: int
    is_liked_by_me: bool
    comment_count: int
    created_at: datetime


@dataclass(frozen=True)
class PostImageCreate:
    """Reference to an image already stored elsewhere."""

    image_url: str
    original_file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None


@dataclass(frozen=True)
class CaptionCreate:
    text: str
    is_bold: bool = False
    is_italic: bool = False
    font_size: int = 14


@dataclass(frozen=True)
class PostCreate:
    """Input for creating a post: ordered images and an optional caption."""

    images: tuple[PostImageCreate, ...] = field(default_factory=tuple)
    caption: CaptionCreate | None = None


@dataclass(frozen=True)
class LikeToggleResult:
    liked: bool
    like_count: int


@dataclass(frozen=True)
class PostStateResult:
    """Result of a moderation transition."""

    id: str
    state: PostState
