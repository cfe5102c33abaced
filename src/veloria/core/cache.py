"""JSON response cache on top of the optional Redis client."""

import json
from typing import Any

from src.veloria.core.logging import get_logger
from src.veloria.core.redis import get_redis

logger = get_logger(__name__)

FINANCE_OVERVIEW_KEY = "finance:overview"


async def get_cached(key: str) -> Any | None:
    """Return the cached value, or None on a miss or when Redis is unavailable."""
    redis = await get_redis()
    if not redis:
        return None
    try:
        raw = await redis.get(key)
    except Exception as e:
        logger.warning("Cache read failed", key=key, error=str(e))
        return None
    return json.loads(raw) if raw is not None else None


async def set_cached(key: str, value: Any, ttl: int) -> bool:
    """Store a JSON-serialisable value. Returns False when Redis is unavailable."""
    redis = await get_redis()
    if not redis:
        return False
    try:
        await redis.setex(key, ttl, json.dumps(value, default=str))
    except Exception as e:
        logger.warning("Cache write failed", key=key, error=str(e))
        return False
    return True


async def invalidate(*keys: str) -> int:
    """Drop cached keys. Returns the number removed (0 without Redis)."""
    redis = await get_redis()
    if not redis or not keys:
        return 0
    try:
        return int(await redis.delete(*keys))
    except Exception as e:
        logger.warning("Cache invalidation failed", keys=list(keys), error=str(e))
        return 0
