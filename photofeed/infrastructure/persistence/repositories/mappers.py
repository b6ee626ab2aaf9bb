"""ORM -> application DTO mappers shared by repositories."""

from photofeed.application.dtos.comment import CommentResult
from photofeed.application.dtos.post import PostCaptionResult, PostImageResult, PostResult
from photofeed.application.dtos.user import AuthorSummary, UserResult
from photofeed.infrastructure.persistence.models import Comment, Post, User
from photofeed.shared.utils.datetime import ensure_utc


def user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        username=u.username,
        email=u.email,
        role=u.role,
        profile_image_url=u.profile_image_url,
        created_at=ensure_utc(u.created_at),
        is_suspended=u.is_suspended,
    )


def user_to_author(u: User) -> AuthorSummary:
    return AuthorSummary(id=u.id, username=u.username, avatar_url=u.profile_image_url)


def post_to_result(p: Post) -> PostResult:
    """Map a Post loaded with author, images and captions."""
    caption = p.captions[0] if p.captions else None
    return PostResult(
        id=p.id,
        author=user_to_author(p.author),
        images=tuple(
            PostImageResult(
                id=img.id,
                image_url=img.image_url,
                order_index=img.order_index,
                original_file_name=img.original_file_name,
                mime_type=img.mime_type,
            )
            for img in p.images
        ),
        caption=(
            PostCaptionResult(
                id=caption.id,
                text=caption.text,
                is_bold=caption.is_bold,
                is_italic=caption.is_italic,
                font_size=caption.font_size,
            )
            if caption is not None
            else None
        ),
        state=p.state,
        created_at=ensure_utc(p.created_at),
    )


def comment_to_result(c: Comment) -> CommentResult:
    """Map a Comment loaded with author."""
    return CommentResult(
        id=c.id,
        post_id=c.post_id,
        text=c.text,
        author=user_to_author(c.author),
        created_at=ensure_utc(c.created_at),
    )
