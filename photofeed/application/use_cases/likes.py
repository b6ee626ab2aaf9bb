"""Like use case: toggle the viewer's like on a post."""

from __future__ import annotations

from photofeed.application.dtos.post import LikeToggleResult
from photofeed.application.interfaces.repositories import ILikeRepository, IPostRepository
from photofeed.application.use_cases.lookups import get_visible_post


class LikeService:
    def __init__(self, post_repo: IPostRepository, like_repo: ILikeRepository) -> None:
        self.post_repo = post_repo
        self.like_repo = like_repo

    async def toggle_like(self, user_id: str, post_id: str) -> LikeToggleResult:
        """Like the post if not yet liked, else remove the like."""
        await get_visible_post(self.post_repo, post_id)
        if await self.like_repo.exists(user_id, post_id):
            await self.like_repo.delete_like(user_id, post_id)
            liked = False
        else:
            await self.like_repo.create_like(user_id, post_id)
            liked = True
        return LikeToggleResult(
            liked=liked,
            like_count=await self.like_repo.count_for_post(post_id),
        )
