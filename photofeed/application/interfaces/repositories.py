"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from photofeed.domain.enums import (
    CountKind,
    ModerationPostFilter,
    ModerationUserFilter,
    PostState,
    RelationKind,
    ReportReason,
    UserRole,
)

if TYPE_CHECKING:
    from photofeed.application.dtos.comment import CommentResult
    from photofeed.application.dtos.follow import FollowEdgeResult
    from photofeed.application.dtos.post import PostCreate, PostResult
    from photofeed.application.dtos.report import ReportDetail, ReportResult
    from photofeed.application.dtos.user import UserResult
    from photofeed.application.listing.pagination import Page, PageRequest
    from photofeed.application.listing.visibility import VisibilityPolicy


class IRelationshipResolver(Protocol):
    """Batch resolver for viewer relationships and per-subject counts.

    Implementations issue one query per requested kind regardless of the
    number of subjects, and no query at all for an empty subject list.
    """

    async def resolve(
        self,
        viewer_id: str,
        subject_ids: Sequence[str],
        kinds: Sequence[RelationKind],
    ) -> dict[str, dict[RelationKind, bool]]:
        """Return {subject_id: {kind: bool}} for every distinct subject id."""

    async def count(
        self,
        subject_ids: Sequence[str],
        kinds: Sequence[CountKind],
    ) -> dict[str, dict[CountKind, int]]:
        """Return {subject_id: {kind: count}}, zero-filled for absent ids."""


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by id."""

    async def get_by_username(self, username: str) -> UserResult | None:
        """Return user by username."""

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        """Return user if email and password match; else None."""

    async def create_user(
        self,
        email: str,
        username: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> UserResult:
        """Create user; raise UserAlreadyExistsException on duplicate username/email."""

    async def list_users(
        self, page: PageRequest, status_filter: ModerationUserFilter
    ) -> Page[UserResult]:
        """Return one page of accounts (newest first) narrowed by status_filter."""

    async def set_suspended(self, user_id: str, suspended: bool) -> UserResult | None:
        """Set the suspension flag; return None if the user does not exist."""


class IPostRepository(Protocol):
    """Protocol for post repository (DIP)."""

    async def list_posts(
        self,
        viewer_id: str,
        page: PageRequest,
        policy: VisibilityPolicy,
        author_id: str | None = None,
    ) -> Page[PostResult]:
        """Return one page of posts (newest first) visible to viewer under policy."""

    async def list_for_moderation(
        self, page: PageRequest, status_filter: ModerationPostFilter
    ) -> Page[PostResult]:
        """Return one page of posts in any state (newest first) for the admin queue."""

    async def get_by_id(self, post_id: str) -> PostResult | None:
        """Return post in any state, or None."""

    async def create_post(self, author_id: str, data: PostCreate) -> PostResult:
        """Create an active post with its images and caption."""

    async def update_state(self, post_id: str, state: PostState) -> None:
        """Persist a lifecycle transition."""

    async def count_active_by_author(self, author_id: str) -> int:
        """Return number of active posts by author."""


class ICommentRepository(Protocol):
    """Protocol for comment repository (DIP)."""

    async def list_for_post(self, post_id: str, page: PageRequest) -> Page[CommentResult]:
        """Return one page of the post's comments (newest first)."""

    async def get_by_id(self, comment_id: str) -> CommentResult | None:
        """Return comment by id."""

    async def create_comment(self, post_id: str, user_id: str, text: str) -> CommentResult:
        """Create comment."""

    async def delete_comment(self, comment_id: str) -> bool:
        """Delete comment; return True if a row was removed."""


class IFollowRepository(Protocol):
    """Protocol for follow-edge repository (DIP)."""

    async def list_followers(self, user_id: str, page: PageRequest) -> Page[FollowEdgeResult]:
        """Return one page of users following user_id (newest edge first)."""

    async def list_following(self, user_id: str, page: PageRequest) -> Page[FollowEdgeResult]:
        """Return one page of users that user_id follows (newest edge first)."""

    async def exists(self, follower_id: str, following_id: str) -> bool:
        """Return True if follower_id follows following_id."""

    async def create_follow(self, follower_id: str, following_id: str) -> None:
        """Create follow edge."""

    async def delete_follow(self, follower_id: str, following_id: str) -> bool:
        """Delete follow edge; return True if removed."""

    async def count_followers(self, user_id: str) -> int:
        """Return number of users following user_id."""

    async def count_following(self, user_id: str) -> int:
        """Return number of users user_id follows."""


class ILikeRepository(Protocol):
    """Protocol for post-like repository (DIP)."""

    async def exists(self, user_id: str, post_id: str) -> bool:
        """Return True if user liked post."""

    async def create_like(self, user_id: str, post_id: str) -> None:
        """Create like edge."""

    async def delete_like(self, user_id: str, post_id: str) -> bool:
        """Delete like edge; return True if removed."""

    async def count_for_post(self, post_id: str) -> int:
        """Return number of likes on post."""


class IReportRepository(Protocol):
    """Protocol for report repository (DIP)."""

    async def exists(self, reporter_id: str, post_id: str) -> bool:
        """Return True if reporter already reported post."""

    async def create_report(
        self, reporter_id: str, post_id: str, reason: ReportReason
    ) -> ReportResult:
        """Create report; raise ConflictException if already reported."""

    async def list_for_posts(self, post_ids: Sequence[str]) -> dict[str, list[ReportDetail]]:
        """Return {post_id: reports newest first} in one query; {} for no ids."""

    async def delete_for_post(self, post_id: str) -> int:
        """Delete every report on post; return number removed."""
