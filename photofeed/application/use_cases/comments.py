"""Comment use cases: list, create and delete comments on a post."""

from __future__ import annotations

from photofeed.application.dtos.comment import CommentResult
from photofeed.application.interfaces.repositories import ICommentRepository, IPostRepository
from photofeed.application.listing import MAX_PAGE_LIMIT, ListingAssembler, Page, PageRequest
from photofeed.application.use_cases.lookups import get_visible_post
from photofeed.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)


class CommentService:
    """Comments of active posts. Listings apply no visibility filtering."""

    def __init__(
        self,
        comment_repo: ICommentRepository,
        post_repo: IPostRepository,
        assembler: ListingAssembler,
        *,
        default_limit: int = 20,
        max_limit: int = MAX_PAGE_LIMIT,
        max_length: int = 500,
    ) -> None:
        self.comment_repo = comment_repo
        self.post_repo = post_repo
        self.assembler = assembler
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.max_length = max_length

    async def list_comments(
        self,
        viewer_id: str,
        post_id: str,
        limit: int | None = None,
        cursor: str | None = None,
    ) -> Page[CommentResult]:
        page = PageRequest.create(limit, cursor, self.default_limit, self.max_limit)
        await self._ensure_active_post(post_id)
        raw = await self.comment_repo.list_for_post(post_id, page)
        return await self.assembler.assemble(
            viewer_id=viewer_id,
            page=raw,
            subject_id_of=lambda c: c.id,
            build=lambda c, _: c,
        )

    async def create_comment(self, user_id: str, post_id: str, text: str) -> CommentResult:
        """Add a comment of 1..max_length characters (surrounding whitespace stripped)."""
        body = text.strip()
        if not 1 <= len(body) <= self.max_length:
            raise ValidationException(
                f"Comment must be between 1 and {self.max_length} characters",
                field="text",
            )
        await self._ensure_active_post(post_id)
        return await self.comment_repo.create_comment(post_id, user_id, body)

    async def delete_comment(self, user_id: str, comment_id: str) -> None:
        """Delete a comment. Only its author may delete it."""
        comment = await self.comment_repo.get_by_id(comment_id)
        if not comment:
            raise ResourceNotFoundException("comment", comment_id)
        if comment.author.id != user_id:
            raise AuthorizationException("comment", "delete")
        await self.comment_repo.delete_comment(comment_id)

    async def _ensure_active_post(self, post_id: str) -> None:
        await get_visible_post(self.post_repo, post_id)
