"""Integration test fixtures for database and HTTP client operations.

Each test gets fresh tables in the SQLite test database, created from the
SQLModel metadata and dropped afterwards. The app under test shares the
same engine singleton as the fixtures.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

from src.veloria.core import db
from src.veloria.core import redis as redis_core
from src.veloria.core.health import reset_health_cache
from src.veloria.core.security import create_access_token
from src.veloria.core.shutdown import request_tracker
from src.veloria.main import create_app
from tests.factories import DEFAULT_TEST_PASSWORD, UserFactory


@pytest.fixture(autouse=True)
async def _reset_redis_between_tests() -> AsyncGenerator[None]:
    """Reset Redis state between tests to prevent event loop issues.

    Redis clients hold references to their event loop. When pytest creates
    a new event loop for each test, stale Redis clients cause
    'Event loop is closed' errors.
    """
    redis_core.reset_redis_state()
    yield
    await redis_core.close_redis()


@pytest.fixture(autouse=True)
def _reset_app_state() -> None:
    reset_health_cache()
    request_tracker.reset()


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create fresh tables on the app's engine."""
    await db.dispose_engine()
    test_engine = db.get_engine()

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await db.dispose_engine()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does NOT auto-commit. Tests must explicitly call
    `await session.commit()` to make rows visible to the app.
    """
    async with db.get_session(engine) as session:
        yield session


async def _create_user(db_session: AsyncSession, user) -> dict:
    db_session.add(user)
    await db_session.commit()
    return {
        "id": str(user.id),
        "email": user.email,
        "password": DEFAULT_TEST_PASSWORD,
        "role": user.role,
    }


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> dict:
    """Create an active admin."""
    return await _create_user(db_session, UserFactory.build())


@pytest.fixture
async def editor_user(db_session: AsyncSession) -> dict:
    """Create an active editor (no delete or finance access)."""
    return await _create_user(db_session, UserFactory.editor())


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Create an unauthenticated test client."""
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_headers(admin_user: dict) -> dict[str, str]:
    token = create_access_token(admin_user["id"], admin_user["role"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def editor_headers(editor_user: dict) -> dict[str, str]:
    token = create_access_token(editor_user["id"], editor_user["role"])
    return {"Authorization": f"Bearer {token}"}
