"""Optional Redis client.

The API runs without Redis; callers receive None and skip whatever they
wanted to cache.
"""

from redis.asyncio import ConnectionPool, Redis

from src.veloria.core.config import get_settings
from src.veloria.core.logging import get_logger

logger = get_logger(__name__)

_pool: ConnectionPool | None = None
_redis: Redis | None = None
_connection_attempted: bool = False


async def get_redis() -> Redis | None:
    """Get the shared Redis client, connecting lazily on first use.

    A failed connection is not retried until close_redis() resets the state.
    """
    global _pool, _redis, _connection_attempted

    if _redis is not None:
        return _redis
    if _connection_attempted:
        return None

    _connection_attempted = True
    settings = get_settings()
    if not settings.redis_url:
        logger.info("Redis not configured (REDIS_URL not set)")
        return None

    try:
        _pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=settings.redis_pool_size,
            decode_responses=True,
        )
        _redis = Redis(connection_pool=_pool)
        await _redis.ping()  # type: ignore[misc]
        logger.info("Redis connected successfully")
        return _redis
    except Exception as e:
        logger.warning("Redis connection failed, continuing without it", error=str(e))
        await close_redis()
        _connection_attempted = True
        return None


async def close_redis() -> None:
    """Close the Redis pool. Called during application shutdown."""
    global _pool, _redis, _connection_attempted

    if _redis is not None:
        await _redis.aclose()
        logger.info("Redis connection closed")
    if _pool is not None:
        await _pool.disconnect()

    _redis = None
    _pool = None
    _connection_attempted = False


def reset_redis_state() -> None:
    """Forget the cached client. For tests only."""
    global _pool, _redis, _connection_attempted
    _redis = None
    _pool = None
    _connection_attempted = False
