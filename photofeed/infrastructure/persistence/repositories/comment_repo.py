"""Comment repository: per-post listing, create, delete."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from photofeed.application.dtos.comment import CommentResult
from photofeed.application.listing.pagination import Page, PageRequest, paginate
from photofeed.infrastructure.persistence.listing import (
    ListingParams,
    ListingSort,
    build_listing_statement,
)
from photofeed.infrastructure.persistence.models import Comment
from photofeed.infrastructure.persistence.repositories.base import BaseRepository
from photofeed.infrastructure.persistence.repositories.mappers import comment_to_result

COMMENT_SORT = ListingSort(created_at=Comment.created_at, id=Comment.id)


class CommentRepository(BaseRepository[Comment]):
    """Comment repository. Listings apply no visibility filtering."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Comment)

    async def list_for_post(self, post_id: str, page: PageRequest) -> Page[CommentResult]:
        base = select(Comment).options(joinedload(Comment.author))
        stmt = build_listing_statement(
            base,
            ListingParams.for_page(page, COMMENT_SORT, Comment.post_id == post_id),
        )
        result = await self.db.execute(stmt)
        rows = [comment_to_result(c) for c in result.scalars().all()]
        return paginate(rows, page.limit, lambda c: c.created_at)

    async def get_by_id(self, comment_id: str) -> CommentResult | None:
        result = await self.db.execute(
            select(Comment)
            .options(joinedload(Comment.author))
            .where(Comment.id == comment_id)
        )
        comment = result.scalar_one_or_none()
        return comment_to_result(comment) if comment else None

    async def create_comment(self, post_id: str, user_id: str, text: str) -> CommentResult:
        comment = await self.create(Comment(post_id=post_id, user_id=user_id, text=text))
        result = await self.db.execute(
            select(Comment)
            .options(joinedload(Comment.author))
            .where(Comment.id == comment.id)
            .execution_options(populate_existing=True)
        )
        return comment_to_result(result.scalar_one())

    async def delete_comment(self, comment_id: str) -> bool:
        result = await self.db.execute(
            delete(Comment)
            .where(Comment.id == comment_id)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount > 0
