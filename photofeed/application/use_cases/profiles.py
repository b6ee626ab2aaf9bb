"""Profile use case: public counters plus the viewer's follow relationship."""

from __future__ import annotations

from photofeed.application.dtos.user import ProfileResult
from photofeed.application.interfaces.repositories import (
    IFollowRepository,
    IPostRepository,
    IRelationshipResolver,
    IUserRepository,
)
from photofeed.domain.enums import RelationKind
from photofeed.domain.exceptions import ResourceNotFoundException

_PROFILE_RELATIONS = (RelationKind.IS_FOLLOWED_BY_ME, RelationKind.IS_FOLLOWING_ME)


class ProfileService:
    def __init__(
        self,
        user_repo: IUserRepository,
        post_repo: IPostRepository,
        follow_repo: IFollowRepository,
        resolver: IRelationshipResolver,
    ) -> None:
        self.user_repo = user_repo
        self.post_repo = post_repo
        self.follow_repo = follow_repo
        self.resolver = resolver

    async def get_profile(self, viewer_id: str, username: str) -> ProfileResult:
        """Return profile for username. Follow flags are False on one's own profile."""
        user = await self.user_repo.get_by_username(username)
        if not user:
            raise ResourceNotFoundException("user", username)
        flags: dict[RelationKind, bool] = {}
        if user.id != viewer_id:
            resolved = await self.resolver.resolve(
                viewer_id=viewer_id, subject_ids=[user.id], kinds=_PROFILE_RELATIONS
            )
            flags = resolved.get(user.id, {})
        return ProfileResult(
            id=user.id,
            username=user.username,
            avatar_url=user.profile_image_url,
            post_count=await self.post_repo.count_active_by_author(user.id),
            follower_count=await self.follow_repo.count_followers(user.id),
            following_count=await self.follow_repo.count_following(user.id),
            is_followed_by_me=flags.get(RelationKind.IS_FOLLOWED_BY_ME, False),
            is_following_me=flags.get(RelationKind.IS_FOLLOWING_ME, False),
            created_at=user.created_at,
        )
