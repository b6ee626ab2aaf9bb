"""DTOs for follow listings and follow toggling."""

from dataclasses import dataclass
from datetime import datetime

from photofeed.application.dtos.user import AuthorSummary


@dataclass(frozen=True)
class FollowEdgeResult:
    """One follow edge seen from the listed user's side.

    user is the follower (followers listing) or the followed user
    (following listing); followed_at is the edge creation time and the
    listing's sort key.
    """

    id: str
    user: AuthorSummary
    followed_at: datetime


@dataclass(frozen=True)
class FollowUserItem:
    """Follow listing item enriched with the viewer's relationship to user."""

    id: str
    username: str
    avatar_url: str | None
    is_followed_by_me: bool
    is_following_me: bool
    followed_at: datetime


@dataclass(frozen=True)
class FollowToggleResult:
    followed: bool
    follower_count: int
