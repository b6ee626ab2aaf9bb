"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the current user, and
application services. Services are built from infrastructure
implementations here; routes depend only on these dependencies.
Read endpoints use get_db; write endpoints use get_db_transactional.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from photofeed.application.dtos.user import UserResult
from photofeed.application.listing import ListingAssembler
from photofeed.application.use_cases import (
    CommentService,
    FollowService,
    LikeService,
    ModerationService,
    PostService,
    ProfileService,
    ReportService,
)
from photofeed.core.config import Settings, get_settings
from photofeed.domain.exceptions import AuthenticationException, AuthorizationException
from photofeed.infrastructure.persistence.database import get_db, get_db_transactional
from photofeed.infrastructure.persistence.repositories import (
    CommentRepository,
    FollowRepository,
    LikeRepository,
    PostRepository,
    RelationshipResolver,
    ReportRepository,
    UserRepository,
)
from photofeed.infrastructure.security.jwt import verify_token

_http_bearer = HTTPBearer(auto_error=False)

ReadSession = Annotated[AsyncSession, Depends(get_db)]
WriteSession = Annotated[AsyncSession, Depends(get_db_transactional)]
AppSettings = Annotated[Settings, Depends(get_settings)]


async def get_user_repo(db: ReadSession) -> UserRepository:
    """User repository for read operations."""
    return UserRepository(db)


async def get_user_repo_for_write(db: WriteSession) -> UserRepository:
    """User repository for register (same transaction as the request)."""
    return UserRepository(db)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult:
    """Return current user from the bearer token; raise 401 if missing or invalid."""
    if not credentials:
        raise AuthenticationException("Not authenticated")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        raise AuthenticationException("Invalid or expired token") from None
    user = await user_repo.get_by_id(payload["sub"])
    if not user or user.is_suspended:
        raise AuthenticationException("Invalid or expired token")
    return user


CurrentUser = Annotated[UserResult, Depends(get_current_user)]


async def require_admin(current_user: CurrentUser) -> UserResult:
    """Return current user if admin; raise 403 otherwise."""
    if not current_user.is_admin:
        raise AuthorizationException("admin", "moderate")
    return current_user


AdminUser = Annotated[UserResult, Depends(require_admin)]


def _assembler(db: AsyncSession) -> ListingAssembler:
    return ListingAssembler(RelationshipResolver(db))


def _post_service(db: AsyncSession, settings: Settings) -> PostService:
    return PostService(
        PostRepository(db),
        UserRepository(db),
        _assembler(db),
        default_limit=settings.feed_default_limit,
        max_limit=settings.max_page_limit,
        max_images=settings.max_post_images,
    )


def _comment_service(db: AsyncSession, settings: Settings) -> CommentService:
    return CommentService(
        CommentRepository(db),
        PostRepository(db),
        _assembler(db),
        default_limit=settings.comment_default_limit,
        max_limit=settings.max_page_limit,
        max_length=settings.max_comment_length,
    )


def _follow_service(db: AsyncSession, settings: Settings) -> FollowService:
    return FollowService(
        UserRepository(db),
        FollowRepository(db),
        _assembler(db),
        default_limit=settings.follow_default_limit,
        max_limit=settings.max_page_limit,
    )


async def get_post_service(db: ReadSession, settings: AppSettings) -> PostService:
    """Post service for feed listings and reads."""
    return _post_service(db, settings)


async def get_post_service_for_write(db: WriteSession, settings: AppSettings) -> PostService:
    """Post service for create (transactional)."""
    return _post_service(db, settings)


async def get_comment_service(db: ReadSession, settings: AppSettings) -> CommentService:
    return _comment_service(db, settings)


async def get_comment_service_for_write(
    db: WriteSession, settings: AppSettings
) -> CommentService:
    return _comment_service(db, settings)


async def get_follow_service(db: ReadSession, settings: AppSettings) -> FollowService:
    return _follow_service(db, settings)


async def get_follow_service_for_write(
    db: WriteSession, settings: AppSettings
) -> FollowService:
    return _follow_service(db, settings)


async def get_profile_service(db: ReadSession) -> ProfileService:
    return ProfileService(
        UserRepository(db),
        PostRepository(db),
        FollowRepository(db),
        RelationshipResolver(db),
    )


async def get_like_service(db: WriteSession) -> LikeService:
    return LikeService(PostRepository(db), LikeRepository(db))


async def get_report_service(db: WriteSession) -> ReportService:
    return ReportService(PostRepository(db), ReportRepository(db))


def _moderation_service(db: AsyncSession, settings: Settings) -> ModerationService:
    return ModerationService(
        PostRepository(db),
        ReportRepository(db),
        UserRepository(db),
        default_limit=settings.moderation_default_limit,
        max_limit=settings.max_page_limit,
    )


async def get_moderation_service(db: ReadSession, settings: AppSettings) -> ModerationService:
    """Moderation service for the admin post queue and user list."""
    return _moderation_service(db, settings)


async def get_moderation_service_for_write(
    db: WriteSession, settings: AppSettings
) -> ModerationService:
    return _moderation_service(db, settings)
