"""Post-like repository."""

from __future__ import annotations

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from photofeed.domain.exceptions import ConflictException
from photofeed.infrastructure.persistence.models import PostLike
from photofeed.infrastructure.persistence.repositories.base import BaseRepository


class LikeRepository(BaseRepository[PostLike]):
    """At most one like per (user, post)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, PostLike)

    async def exists(self, user_id: str, post_id: str) -> bool:
        return await self._count(PostLike.user_id == user_id, PostLike.post_id == post_id) > 0

    async def create_like(self, user_id: str, post_id: str) -> None:
        try:
            await self.create(PostLike(user_id=user_id, post_id=post_id))
        except IntegrityError:
            raise ConflictException(
                "Post already liked", user_id=user_id, post_id=post_id
            ) from None

    async def delete_like(self, user_id: str, post_id: str) -> bool:
        result = await self.db.execute(
            delete(PostLike)
            .where(PostLike.user_id == user_id, PostLike.post_id == post_id)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount > 0

    async def count_for_post(self, post_id: str) -> int:
        return await self._count(PostLike.post_id == post_id)
