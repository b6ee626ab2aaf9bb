"""Lookups shared by the post-scoped use cases."""

from __future__ import annotations

from photofeed.application.dtos.post import PostResult
from photofeed.application.interfaces.repositories import IPostRepository
from photofeed.application.listing.visibility import DIRECT_ACCESS, is_visible
from photofeed.domain.exceptions import ResourceNotFoundException


async def get_visible_post(post_repo: IPostRepository, post_id: str) -> PostResult:
    """Return the post if it may be opened by id; 404 when missing or deleted."""
    post = await post_repo.get_by_id(post_id)
    if not post or not is_visible(post.state, False, DIRECT_ACCESS):
        raise ResourceNotFoundException("post", post_id)
    return post
