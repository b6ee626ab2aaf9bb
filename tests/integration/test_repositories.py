"""User, post, report, like and moderation repository tests against in-memory SQLite."""

from unittest.mock import AsyncMock

import pytest

from photofeed.application.dtos.post import CaptionCreate, PostCreate, PostImageCreate
from photofeed.application.listing import PageRequest
from photofeed.domain.enums import (
    ModerationPostFilter,
    ModerationUserFilter,
    PostState,
    ReportReason,
    UserRole,
)
from photofeed.domain.exceptions import ConflictException, UserAlreadyExistsException
from photofeed.infrastructure.persistence.repositories import (
    FollowRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)

PASSWORD = "correct-horse-battery"


async def test_create_user_and_authenticate(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user("Mixed@Example.com", "mixed", PASSWORD)
    assert created.email == "mixed@example.com"
    assert created.role is UserRole.USER
    assert created.created_at.tzinfo is not None

    assert (await repo.authenticate("MIXED@example.com", PASSWORD)).id == created.id
    assert await repo.authenticate("mixed@example.com", "wrong-password") is None
    assert await repo.authenticate("nobody@example.com", PASSWORD) is None


async def test_duplicate_username_rejected(db_session, make_user) -> None:
    await make_user("taken")
    with pytest.raises(UserAlreadyExistsException):
        await UserRepository(db_session).create_user("other@example.com", "taken", PASSWORD)
    await db_session.rollback()


async def test_set_role(db_session, make_user) -> None:
    user = await make_user("promote")
    repo = UserRepository(db_session)
    updated = await repo.set_role(user.id, UserRole.ADMIN)
    assert updated is not None
    assert updated.is_admin is True
    assert await repo.set_role("missing", UserRole.ADMIN) is None


async def test_create_post_keeps_image_order(db_session, make_user) -> None:
    author = await make_user("author")
    repo = PostRepository(db_session)
    created = await repo.create_post(
        author.id,
        PostCreate(
            images=tuple(PostImageCreate(image_url=f"https://cdn.example.com/{n}.jpg") for n in "abc"),
            caption=CaptionCreate(text="sunset", is_bold=True),
        ),
    )
    assert [img.order_index for img in created.images] == [0, 1, 2]
    assert [img.image_url[-5:] for img in created.images] == ["a.jpg", "b.jpg", "c.jpg"]
    assert created.caption is not None
    assert created.caption.is_bold is True
    assert created.caption.font_size == 14
    assert created.author.username == "author"
    assert created.state is PostState.ACTIVE


async def test_update_state_and_active_count(db_session, make_user, make_post) -> None:
    author = await make_user("author")
    p1 = await make_post(author.id)
    await make_post(author.id)
    repo = PostRepository(db_session)
    assert await repo.count_active_by_author(author.id) == 2
    await repo.update_state(p1, PostState.DELETED)
    await db_session.commit()
    assert (await repo.get_by_id(p1)).state is PostState.DELETED
    assert await repo.count_active_by_author(author.id) == 1


async def test_report_pair_is_unique(db_session, make_user, make_post) -> None:
    author = await make_user("author")
    reporter = await make_user("reporter")
    post_id = await make_post(author.id)
    repo = ReportRepository(db_session)
    report = await repo.create_report(reporter.id, post_id, ReportReason.HATE_SPEECH)
    await db_session.commit()
    assert report.reason is ReportReason.HATE_SPEECH
    assert await repo.exists(reporter.id, post_id) is True
    with pytest.raises(ConflictException):
        await repo.create_report(reporter.id, post_id, ReportReason.SPAM)
    await db_session.rollback()
    assert await repo.delete_for_post(post_id) == 1
    assert await repo.exists(reporter.id, post_id) is False


async def test_like_and_follow_edges(db_session, make_user, make_post) -> None:
    a = await make_user("alpha")
    b = await make_user("beta")
    post_id = await make_post(b.id)

    likes = LikeRepository(db_session)
    await likes.create_like(a.id, post_id)
    assert await likes.count_for_post(post_id) == 1
    assert await likes.delete_like(a.id, post_id) is True
    assert await likes.delete_like(a.id, post_id) is False

    follows = FollowRepository(db_session)
    await follows.create_follow(a.id, b.id)
    assert await follows.exists(a.id, b.id) is True
    assert await follows.exists(b.id, a.id) is False
    assert (await follows.count_followers(b.id), await follows.count_following(a.id)) == (1, 1)
    assert await follows.delete_follow(a.id, b.id) is True
    assert await follows.count_followers(b.id) == 0


async def test_suspended_user_cannot_authenticate(db_session, make_user) -> None:
    user = await make_user("quiet")
    repo = UserRepository(db_session)
    suspended = await repo.set_suspended(user.id, True)
    await db_session.commit()
    assert suspended is not None
    assert suspended.is_suspended is True
    assert await repo.authenticate("quiet@example.com", PASSWORD) is None

    await repo.set_suspended(user.id, False)
    await db_session.commit()
    assert (await repo.authenticate("quiet@example.com", PASSWORD)).id == user.id
    assert await repo.set_suspended("missing", True) is None


async def test_list_users_by_suspension(db_session, make_user) -> None:
    active = await make_user("active")
    quiet = await make_user("quiet")
    repo = UserRepository(db_session)
    await repo.set_suspended(quiet.id, True)
    await db_session.commit()
    page = PageRequest.create(10, None, 10, 100)

    suspended = await repo.list_users(page, ModerationUserFilter.SUSPENDED)
    not_suspended = await repo.list_users(page, ModerationUserFilter.ACTIVE)
    everyone = await repo.list_users(page, ModerationUserFilter.ALL)
    assert [u.id for u in suspended.items] == [quiet.id]
    assert [u.id for u in not_suspended.items] == [active.id]
    assert {u.id for u in everyone.items} == {active.id, quiet.id}


async def test_list_for_moderation_filters(db_session, make_user, make_post) -> None:
    author = await make_user("author")
    reporter = await make_user("reporter")
    plain = await make_post(author.id)
    reported = await make_post(author.id)
    deleted = await make_post(author.id, state=PostState.DELETED)
    await ReportRepository(db_session).create_report(reporter.id, reported, ReportReason.SPAM)
    await db_session.commit()
    repo = PostRepository(db_session)
    page = PageRequest.create(10, None, 10, 100)

    everything = await repo.list_for_moderation(page, ModerationPostFilter.ALL)
    only_reported = await repo.list_for_moderation(page, ModerationPostFilter.REPORTED)
    only_deleted = await repo.list_for_moderation(page, ModerationPostFilter.DELETED)
    assert {p.id for p in everything.items} == {plain, reported, deleted}
    assert [p.id for p in only_reported.items] == [reported]
    assert [p.id for p in only_deleted.items] == [deleted]


async def test_list_for_posts_groups_reports(db_session, make_user, make_post) -> None:
    author = await make_user("author")
    first = await make_user("first")
    second = await make_user("second")
    reported = await make_post(author.id)
    clean = await make_post(author.id)
    repo = ReportRepository(db_session)
    await repo.create_report(first.id, reported, ReportReason.SPAM)
    await repo.create_report(second.id, reported, ReportReason.HATE_SPEECH)
    await db_session.commit()

    grouped = await repo.list_for_posts([reported, clean, reported])
    assert set(grouped) == {reported, clean}
    assert grouped[clean] == []
    assert {r.reporter.username for r in grouped[reported]} == {"first", "second"}
    assert all(r.post_id == reported for r in grouped[reported])


async def test_list_for_posts_without_ids_skips_query() -> None:
    db = AsyncMock()
    assert await ReportRepository(db).list_for_posts([]) == {}
    db.execute.assert_not_awaited()
