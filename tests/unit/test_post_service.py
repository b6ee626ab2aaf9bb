"""PostService unit tests with mocked repos and resolver."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from photofeed.application.dtos.post import CaptionCreate, PostCreate, PostImageCreate, PostResult
from photofeed.application.dtos.user import AuthorSummary, UserResult
from photofeed.application.listing import FEED_VISIBILITY, ListingAssembler, Page, PageRequest
from photofeed.application.use_cases.posts import PostService
from photofeed.domain.enums import CountKind, PostState, RelationKind, UserRole
from photofeed.domain.exceptions import (
    InvalidCursorException,
    ResourceNotFoundException,
    ValidationException,
)

T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=UTC)


def _post(post_id: str = "p1", state: PostState = PostState.ACTIVE) -> PostResult:
    return PostResult(
        id=post_id,
        author=AuthorSummary(id="author", username="author", avatar_url=None),
        images=(),
        caption=None,
        state=state,
        created_at=T0,
    )


def _user(user_id: str = "author", username: str = "author") -> UserResult:
    return UserResult(
        id=user_id,
        username=username,
        email=f"{username}@example.com",
        role=UserRole.USER,
        profile_image_url=None,
        created_at=T0,
    )


@pytest.fixture
def mocks():
    post_repo = AsyncMock()
    user_repo = AsyncMock()
    resolver = AsyncMock()
    resolver.resolve = AsyncMock(
        return_value={"p1": {RelationKind.IS_LIKED_BY_ME: True}}
    )
    resolver.count = AsyncMock(
        return_value={"p1": {CountKind.LIKE_COUNT: 4, CountKind.COMMENT_COUNT: 2}}
    )
    service = PostService(
        post_repo, user_repo, ListingAssembler(resolver), default_limit=10, max_images=3
    )
    return service, post_repo, user_repo, resolver


async def test_list_feed_enriches_page(mocks) -> None:
    service, post_repo, _, _ = mocks
    post_repo.list_posts = AsyncMock(
        return_value=Page(items=[_post()], has_more=True, next_cursor="c1")
    )
    page = await service.list_feed("viewer")
    item = page.items[0]
    assert item.like_count == 4
    assert item.comment_count == 2
    assert item.is_liked_by_me is True
    assert page.has_more is True
    assert page.next_cursor == "c1"
    post_repo.list_posts.assert_awaited_once_with(
        "viewer", PageRequest(limit=10), FEED_VISIBILITY, author_id=None
    )


async def test_list_feed_invalid_limit_never_hits_repo(mocks) -> None:
    service, post_repo, _, _ = mocks
    with pytest.raises(ValidationException) as exc_info:
        await service.list_feed("viewer", limit=0)
    assert exc_info.value.details == {"field": "limit"}
    post_repo.list_posts.assert_not_awaited()


async def test_list_feed_invalid_cursor(mocks) -> None:
    service, post_repo, _, _ = mocks
    with pytest.raises(InvalidCursorException):
        await service.list_feed("viewer", cursor="not-a-time")
    post_repo.list_posts.assert_not_awaited()


async def test_list_user_posts_unknown_user(mocks) -> None:
    service, post_repo, user_repo, _ = mocks
    user_repo.get_by_username = AsyncMock(return_value=None)
    with pytest.raises(ResourceNotFoundException):
        await service.list_user_posts("viewer", "ghost")
    post_repo.list_posts.assert_not_awaited()


async def test_list_user_posts_bad_limit_before_lookup(mocks) -> None:
    service, _, user_repo, _ = mocks
    with pytest.raises(ValidationException):
        await service.list_user_posts("viewer", "ghost", limit=51)
    user_repo.get_by_username.assert_not_awaited()


async def test_list_user_posts_filters_by_author(mocks) -> None:
    service, post_repo, user_repo, _ = mocks
    user_repo.get_by_username = AsyncMock(return_value=_user())
    post_repo.list_posts = AsyncMock(return_value=Page(items=[]))
    page = await service.list_user_posts("viewer", "author", limit=5)
    assert page.items == []
    assert post_repo.list_posts.await_args.kwargs["author_id"] == "author"


async def test_empty_feed_page(mocks) -> None:
    service, post_repo, _, resolver = mocks
    post_repo.list_posts = AsyncMock(return_value=Page(items=[]))
    resolver.resolve.return_value = {}
    resolver.count.return_value = {}
    page = await service.list_feed("viewer")
    assert page.items == []
    assert page.has_more is False


@pytest.mark.parametrize("state", [None, PostState.DELETED])
async def test_get_post_missing_or_deleted(mocks, state) -> None:
    service, post_repo, _, _ = mocks
    post_repo.get_by_id = AsyncMock(return_value=_post(state=state) if state else None)
    with pytest.raises(ResourceNotFoundException):
        await service.get_post("viewer", "p1")


async def test_create_post_image_count(mocks) -> None:
    service, post_repo, _, _ = mocks
    with pytest.raises(ValidationException) as exc_info:
        await service.create_post("author", PostCreate(images=()))
    assert exc_info.value.details == {"field": "images"}
    too_many = tuple(PostImageCreate(image_url=f"u{i}") for i in range(4))
    with pytest.raises(ValidationException):
        await service.create_post("author", PostCreate(images=too_many))
    post_repo.create_post.assert_not_awaited()


async def test_create_post_blank_caption(mocks) -> None:
    service, _, _, _ = mocks
    data = PostCreate(
        images=(PostImageCreate(image_url="u"),), caption=CaptionCreate(text="   ")
    )
    with pytest.raises(ValidationException) as exc_info:
        await service.create_post("author", data)
    assert exc_info.value.details == {"field": "caption"}


async def test_create_post_returns_enriched_item(mocks) -> None:
    service, post_repo, _, _ = mocks
    post_repo.create_post = AsyncMock(return_value=_post())
    data = PostCreate(images=(PostImageCreate(image_url="u"),))
    item = await service.create_post("author", data)
    assert item.id == "p1"
    assert item.like_count == 4
