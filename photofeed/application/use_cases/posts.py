"""Post use cases: feed and profile grid listings, single post, create."""

from __future__ import annotations

from photofeed.application.dtos.post import FeedItem, PostCreate, PostResult
from photofeed.application.interfaces.repositories import IPostRepository, IUserRepository
from photofeed.application.listing import (
    FEED_VISIBILITY,
    MAX_PAGE_LIMIT,
    Enrichment,
    ListingAssembler,
    Page,
    PageRequest,
)
from photofeed.application.use_cases.lookups import get_visible_post
from photofeed.domain.enums import CountKind, RelationKind
from photofeed.domain.exceptions import ResourceNotFoundException, ValidationException

FEED_RELATIONS = (RelationKind.IS_LIKED_BY_ME,)
FEED_COUNTS = (CountKind.LIKE_COUNT, CountKind.COMMENT_COUNT)


def to_feed_item(post: PostResult, enrichment: Enrichment) -> FeedItem:
    """Build a FeedItem from a raw post and its resolved enrichment."""
    return FeedItem(
        id=post.id,
        author=post.author,
        images=post.images,
        caption=post.caption,
        like_count=enrichment.count(CountKind.LIKE_COUNT),
        is_liked_by_me=enrichment.flag(RelationKind.IS_LIKED_BY_ME),
        comment_count=enrichment.count(CountKind.COMMENT_COUNT),
        created_at=post.created_at,
    )


class PostService:
    """Feed listing (all authors or one author), get and create posts."""

    def __init__(
        self,
        post_repo: IPostRepository,
        user_repo: IUserRepository,
        assembler: ListingAssembler,
        *,
        default_limit: int = 10,
        max_limit: int = MAX_PAGE_LIMIT,
        max_images: int = 9,
    ) -> None:
        self.post_repo = post_repo
        self.user_repo = user_repo
        self.assembler = assembler
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.max_images = max_images

    async def list_feed(
        self, viewer_id: str, limit: int | None = None, cursor: str | None = None
    ) -> Page[FeedItem]:
        """Main feed: every author's active posts the viewer has not reported."""
        page = PageRequest.create(limit, cursor, self.default_limit, self.max_limit)
        return await self._list(viewer_id, page)

    async def list_user_posts(
        self,
        viewer_id: str,
        username: str,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Page[FeedItem]:
        """Profile grid: the feed restricted to one author."""
        page = PageRequest.create(limit, cursor, self.default_limit, self.max_limit)
        author = await self.user_repo.get_by_username(username)
        if not author:
            raise ResourceNotFoundException("user", username)
        return await self._list(viewer_id, page, author_id=author.id)

    async def get_post(self, viewer_id: str, post_id: str) -> FeedItem:
        """Return one active post enriched for viewer."""
        post = await get_visible_post(self.post_repo, post_id)
        page = await self._enrich(viewer_id, Page(items=[post]))
        return page.items[0]

    async def create_post(self, author_id: str, data: PostCreate) -> FeedItem:
        """Create a post from 1..max_images image references and an optional caption."""
        if not 1 <= len(data.images) <= self.max_images:
            raise ValidationException(
                f"A post needs between 1 and {self.max_images} images",
                field="images",
            )
        if data.caption is not None and not data.caption.text.strip():
            raise ValidationException("Caption text must not be blank", field="caption")
        post = await self.post_repo.create_post(author_id, data)
        page = await self._enrich(author_id, Page(items=[post]))
        return page.items[0]

    async def _list(
        self, viewer_id: str, page: PageRequest, author_id: str | None = None
    ) -> Page[FeedItem]:
        raw = await self.post_repo.list_posts(
            viewer_id, page, FEED_VISIBILITY, author_id=author_id
        )
        return await self._enrich(viewer_id, raw)

    async def _enrich(self, viewer_id: str, raw: Page[PostResult]) -> Page[FeedItem]:
        return await self.assembler.assemble(
            viewer_id=viewer_id,
            page=raw,
            subject_id_of=lambda p: p.id,
            build=to_feed_item,
            relations=FEED_RELATIONS,
            counts=FEED_COUNTS,
        )
