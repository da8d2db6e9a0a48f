"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh SQLite database file; tables are created from the
SQLModel metadata. Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator, Callable, Coroutine
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

import src.commune.models  # noqa: F401 - register tables on the metadata
from src.commune.api.dependencies import get_db_session, get_otp_delivery
from src.commune.core.db import get_session
from src.commune.core.security import PrincipalClaims
from src.commune.main import create_app
from src.commune.models.enums import Role
from src.commune.models.principal import User
from src.commune.services import TokenService
from tests.factories import UserFactory
from tests.helpers import RecordingDelivery


@pytest.fixture(scope="function")
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with all tables."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'commune.db'}", poolclass=NullPool
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and inspecting data.

    Tests must call ``await db_session.commit()`` before a request can see
    their rows, and ``db_session.expire_all()`` before re-reading rows a
    request has changed.
    """
    async with get_session(engine) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine, delivery: RecordingDelivery) -> AsyncGenerator[AsyncClient]:
    """Create test client bound to the test database and recording delivery."""
    app = create_app()

    async def _db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _db_session
    app.dependency_overrides[get_otp_delivery] = lambda: delivery

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def create_user(db_session: AsyncSession) -> Callable[..., Coroutine[Any, Any, User]]:
    """Persist a principal built by UserFactory and commit it."""

    async def _create(**kwargs: Any) -> User:
        user = UserFactory.build(**kwargs)
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _create


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Bearer header for a persisted principal, minted without the OTP flow."""

    def _headers(user: User) -> dict[str, str]:
        claims = PrincipalClaims(principal_id=user.id, email=user.email, role=Role(user.role))  # type: ignore[arg-type]
        return {"Authorization": f"Bearer {TokenService().mint(claims)}"}

    return _headers
