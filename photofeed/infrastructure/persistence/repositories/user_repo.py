"""User repository with password helpers. Interface methods return application DTOs."""

from __future__ import annotations

import asyncio

from sqlalchemy import ColumnElement, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from photofeed.application.dtos.user import UserResult
from photofeed.application.listing.pagination import Page, PageRequest, paginate
from photofeed.domain.enums import ModerationUserFilter, UserRole
from photofeed.domain.exceptions import UserAlreadyExistsException
from photofeed.infrastructure.persistence.listing import (
    ListingParams,
    ListingSort,
    build_listing_statement,
)
from photofeed.infrastructure.persistence.models.user import User
from photofeed.infrastructure.persistence.repositories.base import BaseRepository
from photofeed.infrastructure.persistence.repositories.mappers import user_to_result
from photofeed.infrastructure.security.password import get_password_hash, verify_password

USER_SORT = ListingSort(created_at=User.created_at, id=User.id)

# Lazy dummy hash for constant-time comparison when the email is unknown.
# Computed on first use in a thread to avoid blocking the event loop at import.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    """Return a valid bcrypt hash for dummy comparison; computed once in thread pool."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


class UserRepository(BaseRepository[User]):
    """User repository. Lookup by id/username/email, authenticate, create_user."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_model_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_model_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await super().get_by_id(user_id)
        return user_to_result(user) if user else None

    async def get_by_username(self, username: str) -> UserResult | None:
        user = await self.get_model_by_username(username)
        return user_to_result(user) if user else None

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        user = await self.get_model_by_email(email)
        if not user:
            dummy_hash = await _get_dummy_hash()
            await asyncio.to_thread(verify_password, password, dummy_hash)
            return None
        if not await asyncio.to_thread(verify_password, password, user.hashed_password):
            return None
        if user.is_suspended:
            return None
        return user_to_result(user)

    async def create_user(
        self,
        email: str,
        username: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> UserResult:
        """Create user; raise UserAlreadyExistsException on unique constraint violation."""
        hashed = await asyncio.to_thread(get_password_hash, password)
        user = User(
            email=email.lower(),
            username=username,
            hashed_password=hashed,
            role=role,
        )
        try:
            created = await self.create(user)
        except IntegrityError:
            raise UserAlreadyExistsException() from None
        return user_to_result(created)

    async def set_role(self, user_id: str, role: UserRole) -> UserResult | None:
        """Change a user's role (used by the create_admin script)."""
        user = await super().get_by_id(user_id)
        if not user:
            return None
        user.role = role
        await self.db.flush()
        return user_to_result(user)

    async def list_users(
        self, page: PageRequest, status_filter: ModerationUserFilter
    ) -> Page[UserResult]:
        """Admin user list, newest account first."""
        filters: tuple[ColumnElement[bool], ...] = ()
        if status_filter is ModerationUserFilter.SUSPENDED:
            filters = (User.is_suspended.is_(True),)
        elif status_filter is ModerationUserFilter.ACTIVE:
            filters = (User.is_suspended.is_(False),)
        stmt = build_listing_statement(
            select(User), ListingParams.for_page(page, USER_SORT, *filters)
        )
        result = await self.db.execute(stmt)
        rows = [user_to_result(u) for u in result.scalars().all()]
        return paginate(rows, page.limit, lambda u: u.created_at)

    async def set_suspended(self, user_id: str, suspended: bool) -> UserResult | None:
        user = await super().get_by_id(user_id)
        if not user:
            return None
        user.is_suspended = suspended
        await self.db.flush()
        return user_to_result(user)
