"""Tests for the JSON response cache."""

import pytest
from redis.asyncio import Redis

from src.veloria.core.cache import get_cached, invalidate, set_cached

pytestmark = pytest.mark.unit


class TestCache:
    async def test_round_trip(self, mock_redis: Redis) -> None:
        assert await set_cached("finance:overview", {"total": 5}, 60) is True

        assert await get_cached("finance:overview") == {"total": 5}
        assert 0 < await mock_redis.ttl("finance:overview") <= 60

    async def test_miss_returns_none(self, mock_redis: Redis) -> None:
        assert await get_cached("missing") is None

    async def test_invalidate(self, mock_redis: Redis) -> None:
        await set_cached("a", 1, 60)
        await set_cached("b", 2, 60)

        assert await invalidate("a", "b", "c") == 2
        assert await get_cached("a") is None

    async def test_without_redis(self, mock_redis_unavailable: None) -> None:
        assert await set_cached("a", 1, 60) is False
        assert await get_cached("a") is None
        assert await invalidate("a") == 0
