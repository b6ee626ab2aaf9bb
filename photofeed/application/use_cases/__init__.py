"""Use cases: services orchestrating repositories and the listing core."""

from photofeed.application.use_cases.comments import CommentService
from photofeed.application.use_cases.follows import FollowService
from photofeed.application.use_cases.likes import LikeService
from photofeed.application.use_cases.moderation import ModerationService
from photofeed.application.use_cases.posts import PostService
from photofeed.application.use_cases.profiles import ProfileService
from photofeed.application.use_cases.reports import ReportService

__all__ = [
    "CommentService",
    "FollowService",
    "LikeService",
    "ModerationService",
    "PostService",
    "ProfileService",
    "ReportService",
]
