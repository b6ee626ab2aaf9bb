"""Comment API: delete own comment."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from photofeed.api.v1.dependencies import CurrentUser, get_comment_service_for_write
from photofeed.application.use_cases import CommentService
from photofeed.core.limiter import limit_writes

router = APIRouter()


@router.delete("/{comment_id}", status_code=204)
@limit_writes
async def delete_comment(
    request: Request,
    comment_id: str,
    current_user: CurrentUser,
    comment_svc: Annotated[CommentService, Depends(get_comment_service_for_write)],
):
    """Delete a comment. 403 if the caller is not its author, 404 if missing."""
    await comment_svc.delete_comment(current_user.id, comment_id)
    return Response(status_code=204)
