"""Pytest configuration and fixtures for photofeed.

Uses photofeed.main:app for HTTP tests. Every test gets a fresh in-memory
SQLite database (aiosqlite); the app's get_db and get_db_transactional
dependencies are overridden to share one session with the test so data
created in fixtures is visible to requests and vice versa.
"""

import os

# Settings are validated on first get_settings(); set test env before importing the app.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["TELEMETRY_ENABLED"] = "false"

from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from photofeed.application.dtos.user import UserResult
from photofeed.core.config import get_settings
from photofeed.core.limiter import limiter
from photofeed.domain.enums import PostState, UserRole
from photofeed.infrastructure.persistence import models  # noqa: F401  (registers tables)
from photofeed.infrastructure.persistence.database import (
    Base,
    get_db,
    get_db_transactional,
)
from photofeed.infrastructure.persistence.models import Post, PostCaption, PostImage
from photofeed.infrastructure.persistence.repositories import UserRepository
from photofeed.infrastructure.security.jwt import create_access_token

get_settings.cache_clear()

from photofeed.main import app  # noqa: E402

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Session on a fresh in-memory database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), bound to db_session."""

    async def _get_db() -> AsyncIterator[AsyncSession]:
        yield db_session

    async def _get_db_transactional() -> AsyncIterator[AsyncSession]:
        try:
            yield db_session
        except Exception:
            await db_session.rollback()
            raise
        else:
            await db_session.commit()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    limiter.enabled = False
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    limiter.enabled = True
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[UserResult]]:
    """Factory: create and commit a user; email is <username>@example.com."""

    async def _make(username: str, role: UserRole = UserRole.USER) -> UserResult:
        repo = UserRepository(db_session)
        user = await repo.create_user(
            email=f"{username}@example.com",
            username=username,
            password=TEST_PASSWORD,
            role=role,
        )
        await db_session.commit()
        return user

    return _make


@pytest.fixture
def make_post(db_session: AsyncSession) -> Callable[..., Awaitable[str]]:
    """Factory: create and commit a one-image post; returns the post id.

    Pass created_at to control listing order without relying on clock ticks.
    """

    async def _make(
        author_id: str,
        created_at: datetime | None = None,
        state: PostState = PostState.ACTIVE,
        caption: str | None = None,
    ) -> str:
        post = Post(
            user_id=author_id,
            state=state,
            images=[PostImage(image_url="https://cdn.example.com/a.jpg", order_index=0)],
            captions=[PostCaption(text=caption, order_index=0)] if caption else [],
        )
        if created_at is not None:
            post.created_at = created_at
        db_session.add(post)
        await db_session.commit()
        return post.id

    return _make


@pytest.fixture
def persist(db_session: AsyncSession) -> Callable[..., Awaitable[None]]:
    """Add ORM objects (edges, comments) and commit."""

    async def _persist(*objects: Base) -> None:
        db_session.add_all(objects)
        await db_session.commit()

    return _persist


def bearer(user: UserResult) -> dict[str, str]:
    """Authorization header for user."""
    return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}


@pytest.fixture
def auth_headers() -> Callable[[UserResult], dict[str, str]]:
    """Return a function building Authorization headers for a user."""
    return bearer
