"""Follow-edge repository: followers/following listings, toggling, counts."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from photofeed.application.dtos.follow import FollowEdgeResult
from photofeed.application.listing.pagination import Page, PageRequest, paginate
from photofeed.domain.exceptions import ConflictException
from photofeed.infrastructure.persistence.listing import (
    ListingParams,
    ListingSort,
    build_listing_statement,
)
from photofeed.infrastructure.persistence.models import Follow
from photofeed.infrastructure.persistence.repositories.base import BaseRepository
from photofeed.infrastructure.persistence.repositories.mappers import user_to_author
from photofeed.shared.utils.datetime import ensure_utc

FOLLOW_SORT = ListingSort(created_at=Follow.created_at, id=Follow.id)


class FollowRepository(BaseRepository[Follow]):
    """Follow repository. Listings are ordered by edge creation time."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Follow)

    async def list_followers(self, user_id: str, page: PageRequest) -> Page[FollowEdgeResult]:
        stmt = build_listing_statement(
            select(Follow).options(joinedload(Follow.follower)),
            ListingParams.for_page(page, FOLLOW_SORT, Follow.following_id == user_id),
        )
        result = await self.db.execute(stmt)
        rows = [
            FollowEdgeResult(
                id=f.id,
                user=user_to_author(f.follower),
                followed_at=ensure_utc(f.created_at),
            )
            for f in result.scalars().all()
        ]
        return paginate(rows, page.limit, lambda e: e.followed_at)

    async def list_following(self, user_id: str, page: PageRequest) -> Page[FollowEdgeResult]:
        stmt = build_listing_statement(
            select(Follow).options(joinedload(Follow.following)),
            ListingParams.for_page(page, FOLLOW_SORT, Follow.follower_id == user_id),
        )
        result = await self.db.execute(stmt)
        rows = [
            FollowEdgeResult(
                id=f.id,
                user=user_to_author(f.following),
                followed_at=ensure_utc(f.created_at),
            )
            for f in result.scalars().all()
        ]
        return paginate(rows, page.limit, lambda e: e.followed_at)

    async def exists(self, follower_id: str, following_id: str) -> bool:
        return (
            await self._count(
                Follow.follower_id == follower_id,
                Follow.following_id == following_id,
            )
            > 0
        )

    async def create_follow(self, follower_id: str, following_id: str) -> None:
        try:
            await self.create(Follow(follower_id=follower_id, following_id=following_id))
        except IntegrityError:
            raise ConflictException(
                "Already following this user",
                follower_id=follower_id,
                following_id=following_id,
            ) from None

    async def delete_follow(self, follower_id: str, following_id: str) -> bool:
        result = await self.db.execute(
            delete(Follow)
            .where(Follow.follower_id == follower_id, Follow.following_id == following_id)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount > 0

    async def count_followers(self, user_id: str) -> int:
        return await self._count(Follow.following_id == user_id)

    async def count_following(self, user_id: str) -> int:
        return await self._count(Follow.follower_id == user_id)
