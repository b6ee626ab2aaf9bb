"""User API: profile, profile post grid, followers/following, follow toggle."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from photofeed.api.v1.dependencies import (
    CurrentUser,
    get_follow_service,
    get_follow_service_for_write,
    get_post_service,
    get_profile_service,
)
from photofeed.api.v1.endpoints.posts import (
    LISTING_ERRORS,
    CursorQuery,
    LimitQuery,
    feed_page_response,
)
from photofeed.application.dtos.follow import FollowUserItem
from photofeed.application.listing import Page
from photofeed.application.use_cases import FollowService, PostService, ProfileService
from photofeed.core.limiter import limit_writes
from photofeed.schemas.post import FeedPageResponse
from photofeed.schemas.user import (
    FollowPageResponse,
    FollowToggleResponse,
    FollowUserResponse,
    ProfileResponse,
)

router = APIRouter()


def follow_page_response(page: Page[FollowUserItem]) -> FollowPageResponse:
    return FollowPageResponse(
        users=[FollowUserResponse.from_item(item) for item in page.items],
        has_more=page.has_more,
        next_cursor=page.next_cursor,
    )


@router.get("/{username}", response_model=ProfileResponse)
async def get_profile(
    username: str,
    current_user: CurrentUser,
    profile_svc: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Profile with post/follower/following counts and the viewer's follow status."""
    profile = await profile_svc.get_profile(current_user.id, username)
    return ProfileResponse.model_validate(profile)


@router.get("/{username}/posts", response_model=FeedPageResponse, responses=LISTING_ERRORS)
async def list_user_posts(
    username: str,
    current_user: CurrentUser,
    post_svc: Annotated[PostService, Depends(get_post_service)],
    limit: LimitQuery = None,
    cursor: CursorQuery = None,
):
    """Posts by one user, with the same visibility rules as the main feed."""
    page = await post_svc.list_user_posts(
        current_user.id, username, limit=limit, cursor=cursor
    )
    return feed_page_response(page)


@router.get(
    "/{username}/followers", response_model=FollowPageResponse, responses=LISTING_ERRORS
)
async def list_followers(
    username: str,
    current_user: CurrentUser,
    follow_svc: Annotated[FollowService, Depends(get_follow_service)],
    limit: LimitQuery = None,
    cursor: CursorQuery = None,
):
    """Users following username. followStatus is relative to the caller."""
    page = await follow_svc.list_followers(
        current_user.id, username, limit=limit, cursor=cursor
    )
    return follow_page_response(page)


@router.get(
    "/{username}/following", response_model=FollowPageResponse, responses=LISTING_ERRORS
)
async def list_following(
    username: str,
    current_user: CurrentUser,
    follow_svc: Annotated[FollowService, Depends(get_follow_service)],
    limit: LimitQuery = None,
    cursor: CursorQuery = None,
):
    """Users that username follows. followStatus is relative to the caller."""
    page = await follow_svc.list_following(
        current_user.id, username, limit=limit, cursor=cursor
    )
    return follow_page_response(page)


@router.post("/{username}/follow", response_model=FollowToggleResponse)
@limit_writes
async def toggle_follow(
    request: Request,
    username: str,
    current_user: CurrentUser,
    follow_svc: Annotated[FollowService, Depends(get_follow_service_for_write)],
):
    """Follow username, or unfollow if already following. 400 on self-follow."""
    result = await follow_svc.toggle_follow(current_user.id, username)
    return FollowToggleResponse(
        followed=result.followed, follower_count=result.follower_count
    )
