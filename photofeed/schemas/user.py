"""User profile and follow-list API schemas."""

from datetime import datetime

from photofeed.application.dtos.follow import FollowUserItem
from photofeed.schemas.common import CamelModel


class FollowStatusResponse(CamelModel):
    """The viewer's relationship with the listed user."""

    is_followed_by_me: bool
    is_following_me: bool


class FollowUserResponse(CamelModel):
    id: str
    username: str
    avatar_url: str | None = None
    follow_status: FollowStatusResponse
    followed_at: datetime

    @classmethod
    def from_item(cls, item: FollowUserItem) -> "FollowUserResponse":
        return cls(
            id=item.id,
            username=item.username,
            avatar_url=item.avatar_url,
            follow_status=FollowStatusResponse(
                is_followed_by_me=item.is_followed_by_me,
                is_following_me=item.is_following_me,
            ),
            followed_at=item.followed_at,
        )


class FollowPageResponse(CamelModel):
    users: list[FollowUserResponse]
    has_more: bool
    next_cursor: str | None = None


class FollowToggleResponse(CamelModel):
    followed: bool
    follower_count: int


class ProfileResponse(CamelModel):
    id: str
    username: str
    avatar_url: str | None = None
    post_count: int
    follower_count: int
    following_count: int
    is_followed_by_me: bool
    is_following_me: bool
    created_at: datetime
