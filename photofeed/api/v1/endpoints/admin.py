"""Admin API: moderation queue, post lifecycle, user suspension. Requires role admin."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from photofeed.api.v1.dependencies import (
    AdminUser,
    get_moderation_service,
    get_moderation_service_for_write,
)
from photofeed.api.v1.endpoints.posts import LISTING_ERRORS, CursorQuery, LimitQuery
from photofeed.application.use_cases import ModerationService
from photofeed.core.limiter import limit_writes
from photofeed.domain.enums import ModerationPostFilter, ModerationUserFilter
from photofeed.schemas.admin import (
    AdminUserPageResponse,
    AdminUserResponse,
    ModerationPostPageResponse,
    ModerationPostResponse,
)
from photofeed.schemas.post import DismissReportsResponse, PostStateResponse

router = APIRouter()


@router.get("/posts", response_model=ModerationPostPageResponse, responses=LISTING_ERRORS)
async def list_posts(
    admin: AdminUser,
    moderation_svc: Annotated[ModerationService, Depends(get_moderation_service)],
    status_filter: Annotated[ModerationPostFilter, Query(alias="filter")] = ModerationPostFilter.ALL,
    limit: LimitQuery = None,
    cursor: CursorQuery = None,
):
    """Posts in any state, newest first, each with its reports and reporters."""
    page = await moderation_svc.list_posts(status_filter, limit=limit, cursor=cursor)
    return ModerationPostPageResponse(
        posts=[ModerationPostResponse.from_item(item) for item in page.items],
        has_more=page.has_more,
        next_cursor=page.next_cursor,
    )


@router.delete("/posts/{post_id}", response_model=PostStateResponse)
@limit_writes
async def soft_delete_post(
    request: Request,
    post_id: str,
    admin: AdminUser,
    moderation_svc: Annotated[ModerationService, Depends(get_moderation_service_for_write)],
):
    """Soft-delete a post. 400 if already deleted."""
    result = await moderation_svc.soft_delete_post(admin.id, post_id)
    return PostStateResponse(id=result.id, state=result.state)


@router.patch("/posts/{post_id}/restore", response_model=PostStateResponse)
@limit_writes
async def restore_post(
    request: Request,
    post_id: str,
    admin: AdminUser,
    moderation_svc: Annotated[ModerationService, Depends(get_moderation_service_for_write)],
):
    """Restore a soft-deleted post. 400 if not deleted."""
    result = await moderation_svc.restore_post(admin.id, post_id)
    return PostStateResponse(id=result.id, state=result.state)


@router.delete("/posts/{post_id}/reports", response_model=DismissReportsResponse)
@limit_writes
async def dismiss_reports(
    request: Request,
    post_id: str,
    admin: AdminUser,
    moderation_svc: Annotated[ModerationService, Depends(get_moderation_service_for_write)],
):
    """Delete every report on a post. 400 if it has none."""
    result = await moderation_svc.dismiss_reports(admin.id, post_id)
    return DismissReportsResponse(post_id=result.post_id, dismissed=result.dismissed)


@router.get("/users", response_model=AdminUserPageResponse, responses=LISTING_ERRORS)
async def list_users(
    admin: AdminUser,
    moderation_svc: Annotated[ModerationService, Depends(get_moderation_service)],
    status_filter: Annotated[ModerationUserFilter, Query(alias="filter")] = ModerationUserFilter.ALL,
    limit: LimitQuery = None,
    cursor: CursorQuery = None,
):
    """Accounts, newest first, optionally only suspended or only active ones."""
    page = await moderation_svc.list_users(status_filter, limit=limit, cursor=cursor)
    return AdminUserPageResponse(
        users=[AdminUserResponse.from_result(user) for user in page.items],
        has_more=page.has_more,
        next_cursor=page.next_cursor,
    )


@router.patch("/users/{user_id}/suspend", response_model=AdminUserResponse)
@limit_writes
async def suspend_user(
    request: Request,
    user_id: str,
    admin: AdminUser,
    moderation_svc: Annotated[ModerationService, Depends(get_moderation_service_for_write)],
):
    """Suspend an account: login fails and existing tokens stop working. 403 for admins."""
    user = await moderation_svc.suspend_user(admin.id, user_id)
    return AdminUserResponse.from_result(user)


@router.patch("/users/{user_id}/unsuspend", response_model=AdminUserResponse)
@limit_writes
async def unsuspend_user(
    request: Request,
    user_id: str,
    admin: AdminUser,
    moderation_svc: Annotated[ModerationService, Depends(get_moderation_service_for_write)],
):
    """Lift a suspension."""
    user = await moderation_svc.unsuspend_user(admin.id, user_id)
    return AdminUserResponse.from_result(user)
