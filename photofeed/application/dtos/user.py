"""DTOs for user and profile use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from photofeed.domain.enums import UserRole


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, etc.). No password."""

    id: str
    username: str
    email: str
    role: UserRole
    profile_image_url: str | None
    created_at: datetime
    is_suspended: bool = False

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


@dataclass(frozen=True)
class AuthorSummary:
    """Minimal public view of a user embedded in posts, comments and lists."""

    id: str
    username: str
    avatar_url: str | None


@dataclass(frozen=True)
class ProfileResult:
    """Public profile with counters and the viewer's follow relationship."""

    id: str
    username: str
    avatar_url: str | None
    post_count: int
    follower_count: int
    following_count: int
    is_followed_by_me: bool
    is_following_me: bool
    created_at: datetime
