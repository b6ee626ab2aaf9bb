"""Follow use cases: followers/following listings and follow toggling."""

from __future__ import annotations

from photofeed.application.dtos.follow import (
    FollowEdgeResult,
    FollowToggleResult,
    FollowUserItem,
)
from photofeed.application.dtos.user import UserResult
from photofeed.application.interfaces.repositories import IFollowRepository, IUserRepository
from photofeed.application.listing import (
    MAX_PAGE_LIMIT,
    Enrichment,
    ListingAssembler,
    Page,
    PageRequest,
)
from photofeed.domain.enums import RelationKind
from photofeed.domain.exceptions import ResourceNotFoundException, ValidationException

FOLLOW_RELATIONS = (RelationKind.IS_FOLLOWED_BY_ME, RelationKind.IS_FOLLOWING_ME)


def to_follow_item(edge: FollowEdgeResult, enrichment: Enrichment) -> FollowUserItem:
    """Flags are always from the viewer's perspective, not the listed user's."""
    return FollowUserItem(
        id=edge.user.id,
        username=edge.user.username,
        avatar_url=edge.user.avatar_url,
        is_followed_by_me=enrichment.flag(RelationKind.IS_FOLLOWED_BY_ME),
        is_following_me=enrichment.flag(RelationKind.IS_FOLLOWING_ME),
        followed_at=edge.followed_at,
    )


class FollowService:
    """Followers/following listings enriched with the viewer's follow status."""

    def __init__(
        self,
        user_repo: IUserRepository,
        follow_repo: IFollowRepository,
        assembler: ListingAssembler,
        *,
        default_limit: int = 20,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> None:
        self.user_repo = user_repo
        self.follow_repo = follow_repo
        self.assembler = assembler
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def list_followers(
        self,
        viewer_id: str,
        username: str,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Page[FollowUserItem]:
        """Users following username, newest follow first."""
        page = PageRequest.create(limit, cursor, self.default_limit, self.max_limit)
        target = await self._get_user(username)
        raw = await self.follow_repo.list_followers(target.id, page)
        return await self._enrich(viewer_id, raw)

    async def list_following(
        self,
        viewer_id: str,
        username: str,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Page[FollowUserItem]:
        """Users that username follows, newest follow first."""
        page = PageRequest.create(limit, cursor, self.default_limit, self.max_limit)
        target = await self._get_user(username)
        raw = await self.follow_repo.list_following(target.id, page)
        return await self._enrich(viewer_id, raw)

    async def toggle_follow(self, viewer_id: str, username: str) -> FollowToggleResult:
        """Follow username if not yet followed, else unfollow."""
        target = await self._get_user(username)
        if target.id == viewer_id:
            raise ValidationException("You cannot follow yourself", field="username")
        if await self.follow_repo.exists(viewer_id, target.id):
            await self.follow_repo.delete_follow(viewer_id, target.id)
            followed = False
        else:
            await self.follow_repo.create_follow(viewer_id, target.id)
            followed = True
        return FollowToggleResult(
            followed=followed,
            follower_count=await self.follow_repo.count_followers(target.id),
        )

    async def _get_user(self, username: str) -> UserResult:
        user = await self.user_repo.get_by_username(username)
        if not user:
            raise ResourceNotFoundException("user", username)
        return user

    async def _enrich(
        self, viewer_id: str, raw: Page[FollowEdgeResult]
    ) -> Page[FollowUserItem]:
        return await self.assembler.assemble(
            viewer_id=viewer_id,
            page=raw,
            subject_id_of=lambda e: e.user.id,
            build=to_follow_item,
            relations=FOLLOW_RELATIONS,
        )
