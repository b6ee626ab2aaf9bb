"""Post API: feed, single post, create, like, comments and report."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from photofeed.api.v1.dependencies import (
    CurrentUser,
    get_comment_service,
    get_comment_service_for_write,
    get_like_service,
    get_post_service,
    get_post_service_for_write,
    get_report_service,
)
from photofeed.application.dtos.comment import CommentResult
from photofeed.application.dtos.post import FeedItem
from photofeed.application.listing import Page
from photofeed.application.use_cases import (
    CommentService,
    LikeService,
    PostService,
    ReportService,
)
from photofeed.core.limiter import limit_writes
from photofeed.schemas.comment import (
    CommentCreateRequest,
    CommentPageResponse,
    CommentResponse,
)
from photofeed.schemas.common import ErrorResponse
from photofeed.schemas.post import (
    FeedPageResponse,
    FeedPostResponse,
    LikeToggleResponse,
    PostCreateRequest,
    ReportRequest,
    ReportResponse,
)

router = APIRouter()

LISTING_ERRORS = {
    400: {"model": ErrorResponse, "description": "limit out of range or invalid cursor"},
    404: {"model": ErrorResponse, "description": "Subject not found"},
}

LimitQuery = Annotated[
    int | None, Query(description="Page size (1-50); defaults per listing")
]
CursorQuery = Annotated[
    str | None,
    Query(description="nextCursor from the previous page (ISO-8601 timestamp)"),
]


def feed_page_response(page: Page[FeedItem]) -> FeedPageResponse:
    return FeedPageResponse(
        posts=[FeedPostResponse.model_validate(item) for item in page.items],
        has_more=page.has_more,
        next_cursor=page.next_cursor,
    )


def comment_page_response(page: Page[CommentResult]) -> CommentPageResponse:
    return CommentPageResponse(
        comments=[CommentResponse.model_validate(item) for item in page.items],
        has_more=page.has_more,
        next_cursor=page.next_cursor,
    )


@router.get("", response_model=FeedPageResponse, responses=LISTING_ERRORS)
async def list_feed(
    current_user: CurrentUser,
    post_svc: Annotated[PostService, Depends(get_post_service)],
    limit: LimitQuery = None,
    cursor: CursorQuery = None,
):
    """Main feed, newest first. Hides deleted posts and posts the viewer reported."""
    page = await post_svc.list_feed(current_user.id, limit=limit, cursor=cursor)
    return feed_page_response(page)


@router.post("", response_model=FeedPostResponse, status_code=201)
@limit_writes
async def create_post(
    request: Request,
    body: PostCreateRequest,
    current_user: CurrentUser,
    post_svc: Annotated[PostService, Depends(get_post_service_for_write)],
):
    """Create a post from 1-9 image references and an optional caption."""
    created = await post_svc.create_post(current_user.id, body.to_dto())
    return FeedPostResponse.model_validate(created)


@router.get("/{post_id}", response_model=FeedPostResponse)
async def get_post(
    post_id: str,
    current_user: CurrentUser,
    post_svc: Annotated[PostService, Depends(get_post_service)],
):
    """Return one active post. 404 if missing or deleted."""
    item = await post_svc.get_post(current_user.id, post_id)
    return FeedPostResponse.model_validate(item)


@router.post("/{post_id}/like", response_model=LikeToggleResponse)
@limit_writes
async def toggle_like(
    request: Request,
    post_id: str,
    current_user: CurrentUser,
    like_svc: Annotated[LikeService, Depends(get_like_service)],
):
    """Like the post, or remove the like if already liked."""
    result = await like_svc.toggle_like(current_user.id, post_id)
    return LikeToggleResponse(liked=result.liked, like_count=result.like_count)


@router.get(
    "/{post_id}/comments", response_model=CommentPageResponse, responses=LISTING_ERRORS
)
async def list_comments(
    post_id: str,
    current_user: CurrentUser,
    comment_svc: Annotated[CommentService, Depends(get_comment_service)],
    limit: LimitQuery = None,
    cursor: CursorQuery = None,
):
    """Comments of a post, newest first."""
    page = await comment_svc.list_comments(
        current_user.id, post_id, limit=limit, cursor=cursor
    )
    return comment_page_response(page)


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=201)
@limit_writes
async def create_comment(
    request: Request,
    post_id: str,
    body: CommentCreateRequest,
    current_user: CurrentUser,
    comment_svc: Annotated[CommentService, Depends(get_comment_service_for_write)],
):
    """Add a comment (1-500 characters)."""
    created = await comment_svc.create_comment(current_user.id, post_id, body.text)
    return CommentResponse.model_validate(created)


@router.post("/{post_id}/report", response_model=ReportResponse, status_code=201)
@limit_writes
async def report_post(
    request: Request,
    post_id: str,
    body: ReportRequest,
    current_user: CurrentUser,
    report_svc: Annotated[ReportService, Depends(get_report_service)],
):
    """Report a post. It disappears from the reporter's feed only. 409 if already reported."""
    report = await report_svc.report_post(current_user.id, post_id, body.reason)
    return ReportResponse.model_validate(report)
