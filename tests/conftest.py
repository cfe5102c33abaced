"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os
import tempfile
from pathlib import Path

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
# SQLite file database; tables are created per test from the SQLModel metadata
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'veloria_test.db'}",
)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")
os.environ.pop("RESEND_API_KEY", None)
os.environ.pop("REDIS_URL", None)

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator, Generator

import pytest
from fakeredis import aioredis as fakeredis_aio
from redis.asyncio import Redis

from src.veloria.client.storage import LocalStorage
from src.veloria.core import rate_limit
from src.veloria.core import redis as redis_core
from src.veloria.core.config import get_client_settings, get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()
get_client_settings.cache_clear()

# --- Rate Limit Fixtures ---


@pytest.fixture
def reset_rate_limit_buckets() -> Generator[None]:
    """Reset rate limit in-memory state.

    Use this fixture when you need to ensure rate limit state is clean.
    """
    rate_limit.reset_buckets()
    yield
    rate_limit.reset_buckets()


# --- Redis Test Fixtures (shared) ---


@pytest.fixture
async def fake_redis() -> AsyncGenerator[Redis]:
    """Provides a fakeredis client for testing.

    Returns an in-memory Redis implementation that behaves like
    a real Redis server but doesn't require external dependencies.
    """
    client = fakeredis_aio.FakeRedis(decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
async def mock_redis(fake_redis: Redis, monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[Redis]:
    """Patches get_redis() to return fakeredis client.

    Patches both src.veloria.core.redis and src.veloria.core.cache modules
    to ensure the fake redis is used everywhere.
    """
    redis_core.reset_redis_state()

    async def _get_fake_redis() -> Redis:
        return fake_redis

    monkeypatch.setattr("src.veloria.core.redis.get_redis", _get_fake_redis)
    monkeypatch.setattr("src.veloria.core.cache.get_redis", _get_fake_redis)
    yield fake_redis
    redis_core.reset_redis_state()


@pytest.fixture
async def mock_redis_unavailable(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[None]:
    """Patches get_redis() to return None (simulates Redis unavailable)."""
    redis_core.reset_redis_state()

    async def _get_none() -> None:
        return None

    monkeypatch.setattr("src.veloria.core.redis.get_redis", _get_none)
    monkeypatch.setattr("src.veloria.core.cache.get_redis", _get_none)
    yield
    redis_core.reset_redis_state()


# --- Client Fixtures ---


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorage:
    """File-backed storage in a per-test directory."""
    return LocalStorage(tmp_path / "storage.json")
