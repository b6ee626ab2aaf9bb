"""Moderation use cases (admin): post queue, post lifecycle, account suspension."""

from __future__ import annotations

import logging

from photofeed.application.dtos.post import PostResult, PostStateResult
from photofeed.application.dtos.report import (
    DismissReportsResult,
    ModerationPostItem,
    ReportDetail,
)
from photofeed.application.dtos.user import UserResult
from photofeed.application.interfaces.repositories import (
    IPostRepository,
    IReportRepository,
    IUserRepository,
)
from photofeed.application.listing import MAX_PAGE_LIMIT, Page, PageRequest
from photofeed.domain.entities import PostEntity
from photofeed.domain.enums import ModerationPostFilter, ModerationUserFilter
from photofeed.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def to_moderation_item(post: PostResult, reports: list[ReportDetail]) -> ModerationPostItem:
    first_image = min(post.images, key=lambda img: img.order_index, default=None)
    return ModerationPostItem(
        id=post.id,
        author=post.author,
        first_image_url=first_image.image_url if first_image else None,
        state=post.state,
        created_at=post.created_at,
        reports=tuple(reports),
    )


class ModerationService:
    """State transitions go through PostEntity so invalid ones raise ValidationException."""

    def __init__(
        self,
        post_repo: IPostRepository,
        report_repo: IReportRepository,
        user_repo: IUserRepository,
        *,
        default_limit: int = 20,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> None:
        self.post_repo = post_repo
        self.report_repo = report_repo
        self.user_repo = user_repo
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def list_posts(
        self,
        status_filter: ModerationPostFilter = ModerationPostFilter.ALL,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Page[ModerationPostItem]:
        """Posts in any state with their reports. Reports for the page come from one query."""
        page = PageRequest.create(limit, cursor, self.default_limit, self.max_limit)
        raw = await self.post_repo.list_for_moderation(page, status_filter)
        reports = await self.report_repo.list_for_posts([p.id for p in raw.items])
        return raw.with_items(
            [to_moderation_item(post, reports.get(post.id, [])) for post in raw.items]
        )

    async def soft_delete_post(self, admin_id: str, post_id: str) -> PostStateResult:
        entity = await self._load(post_id)
        state = entity.soft_delete()
        await self.post_repo.update_state(post_id, state)
        logger.info("Post %s soft-deleted by admin %s", post_id, admin_id)
        return PostStateResult(id=post_id, state=state)

    async def restore_post(self, admin_id: str, post_id: str) -> PostStateResult:
        entity = await self._load(post_id)
        state = entity.restore()
        await self.post_repo.update_state(post_id, state)
        logger.info("Post %s restored by admin %s", post_id, admin_id)
        return PostStateResult(id=post_id, state=state)

    async def dismiss_reports(self, admin_id: str, post_id: str) -> DismissReportsResult:
        """Delete every report on the post. Reporters see the post in their feed again."""
        await self._load(post_id)
        dismissed = await self.report_repo.delete_for_post(post_id)
        if dismissed == 0:
            raise ValidationException("Post has no reports", field="reports")
        logger.info("%d report(s) on post %s dismissed by admin %s", dismissed, post_id, admin_id)
        return DismissReportsResult(post_id=post_id, dismissed=dismissed)

    async def list_users(
        self,
        status_filter: ModerationUserFilter = ModerationUserFilter.ALL,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Page[UserResult]:
        page = PageRequest.create(limit, cursor, self.default_limit, self.max_limit)
        return await self.user_repo.list_users(page, status_filter)

    async def suspend_user(self, admin_id: str, user_id: str) -> UserResult:
        """Suspend an account. Admin accounts cannot be suspended."""
        target = await self.user_repo.get_by_id(user_id)
        if not target:
            raise ResourceNotFoundException("user", user_id)
        if target.is_admin:
            raise AuthorizationException("admin account", "suspend")
        return await self._set_suspended(admin_id, user_id, True)

    async def unsuspend_user(self, admin_id: str, user_id: str) -> UserResult:
        return await self._set_suspended(admin_id, user_id, False)

    async def _set_suspended(self, admin_id: str, user_id: str, suspended: bool) -> UserResult:
        user = await self.user_repo.set_suspended(user_id, suspended)
        if not user:
            raise ResourceNotFoundException("user", user_id)
        logger.info(
            "User %s %s by admin %s", user_id, "suspended" if suspended else "unsuspended", admin_id
        )
        return user

    async def _load(self, post_id: str) -> PostEntity:
        post = await self.post_repo.get_by_id(post_id)
        if not post:
            raise ResourceNotFoundException("post", post_id)
        return PostEntity(id=post.id, author_id=post.author.id, state=post.state)
