"""Post repository: feed/profile listings, creation, lifecycle updates."""

from __future__ import annotations

from sqlalchemy import ColumnElement, Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from photofeed.application.dtos.post import PostCreate, PostResult
from photofeed.application.listing.pagination import Page, PageRequest, paginate
from photofeed.application.listing.visibility import VisibilityPolicy
from photofeed.domain.enums import ModerationPostFilter, PostState
from photofeed.infrastructure.persistence.listing import (
    ListingParams,
    ListingSort,
    apply_visibility,
    build_listing_statement,
)
from photofeed.infrastructure.persistence.models import Post, PostCaption, PostImage, Report
from photofeed.infrastructure.persistence.repositories.base import BaseRepository
from photofeed.infrastructure.persistence.repositories.mappers import post_to_result
from photofeed.shared.utils.datetime import utc_now

POST_SORT = ListingSort(created_at=Post.created_at, id=Post.id)


def _post_with_children():
    """select(Post) with author, images and captions eagerly loaded."""
    return select(Post).options(
        joinedload(Post.author),
        selectinload(Post.images),
        selectinload(Post.captions),
    )


class PostRepository(BaseRepository[Post]):
    """Post repository. Returns PostResult DTOs with author, images and caption."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Post)

    async def list_posts(
        self,
        viewer_id: str,
        page: PageRequest,
        policy: VisibilityPolicy,
        author_id: str | None = None,
    ) -> Page[PostResult]:
        """Return one page of posts visible to viewer_id, newest first.

        Visibility clauses are part of the WHERE so the limit + 1 fetch only
        counts rows the viewer may see.
        """
        filters = (Post.user_id == author_id,) if author_id is not None else ()
        base = apply_visibility(_post_with_children(), policy, viewer_id)
        stmt = build_listing_statement(
            base, ListingParams.for_page(page, POST_SORT, *filters)
        )
        return await self._fetch_page(stmt, page)

    async def list_for_moderation(
        self, page: PageRequest, status_filter: ModerationPostFilter
    ) -> Page[PostResult]:
        """Admin queue: posts in any state, newest first, narrowed by status_filter."""
        filters: tuple[ColumnElement[bool], ...] = ()
        if status_filter is ModerationPostFilter.REPORTED:
            filters = (select(Report.id).where(Report.post_id == Post.id).exists(),)
        elif status_filter is ModerationPostFilter.DELETED:
            filters = (Post.state == PostState.DELETED,)
        stmt = build_listing_statement(
            _post_with_children(), ListingParams.for_page(page, POST_SORT, *filters)
        )
        return await self._fetch_page(stmt, page)

    async def _fetch_page(self, stmt: Select, page: PageRequest) -> Page[PostResult]:
        result = await self.db.execute(stmt)
        rows = [post_to_result(p) for p in result.scalars().unique().all()]
        return paginate(rows, page.limit, lambda p: p.created_at)

    async def get_by_id(self, post_id: str) -> PostResult | None:
        result = await self.db.execute(_post_with_children().where(Post.id == post_id))
        post = result.scalars().unique().one_or_none()
        return post_to_result(post) if post else None

    async def create_post(self, author_id: str, data: PostCreate) -> PostResult:
        """Create an active post; images keep the order they were given in."""
        post = Post(
            user_id=author_id,
            state=PostState.ACTIVE,
            images=[
                PostImage(
                    image_url=img.image_url,
                    order_index=index,
                    original_file_name=img.original_file_name,
                    mime_type=img.mime_type,
                    file_size=img.file_size,
                )
                for index, img in enumerate(data.images)
            ],
            captions=(
                [
                    PostCaption(
                        text=data.caption.text,
                        order_index=0,
                        is_bold=data.caption.is_bold,
                        is_italic=data.caption.is_italic,
                        font_size=data.caption.font_size,
                    )
                ]
                if data.caption is not None
                else []
            ),
        )
        await self.create(post)
        result = await self.db.execute(
            _post_with_children()
            .where(Post.id == post.id)
            .execution_options(populate_existing=True)
        )
        return post_to_result(result.scalars().unique().one())

    async def update_state(self, post_id: str, state: PostState) -> None:
        await self.db.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(state=state, updated_at=utc_now())
            .execution_options(synchronize_session="evaluate")
        )

    async def count_active_by_author(self, author_id: str) -> int:
        return await self._count(Post.user_id == author_id, Post.state == PostState.ACTIVE)
