"""Rate limiting.

Two layers:
1. A global per-IP token bucket middleware (in-process) for flood protection.
2. slowapi decorators on the public intake endpoints, stored in Redis when
   REDIS_URL is configured so limits hold across workers.

Both are disabled when APP_ENV=testing.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from src.veloria.core.config import get_settings
from src.veloria.core.logging import get_logger

logger = get_logger(__name__)

EXEMPT_PATHS = frozenset({"/health", "/metrics", "/docs", "/openapi.json", "/redoc"})

_buckets: dict[str, tuple[float, float]] = {}
_buckets_lock = asyncio.Lock()


def get_rate_limit_key(request: Request) -> str:
    """Key requests by client IP only; headers are attacker-controlled."""
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    if settings.redis_url:
        logger.info("Rate limiter using Redis backend")
        return Limiter(key_func=get_rate_limit_key, storage_uri=settings.redis_url)

    logger.info("Rate limiter using in-memory backend (not distributed)")
    return Limiter(key_func=get_rate_limit_key)


limiter = create_limiter()


async def take_token(client_ip: str, now: float | None = None) -> bool:
    """Consume one token from the client's bucket. Returns False when empty."""
    settings = get_settings()
    rate = settings.global_rate_limit_per_second
    burst = float(settings.global_rate_limit_burst)
    if now is None:
        now = time.monotonic()

    async with _buckets_lock:
        tokens, last_update = _buckets.get(client_ip, (burst, now))
        tokens = min(burst, tokens + (now - last_update) * rate)
        allowed = tokens >= 1
        if allowed:
            tokens -= 1
        _buckets[client_ip] = (tokens, now)
    return allowed


def reset_buckets() -> None:
    """Clear all buckets. For tests only."""
    _buckets.clear()


async def global_rate_limit_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Reject clients that exceed the global request rate with a 429."""
    if request.url.path in EXEMPT_PATHS or get_settings().app_env == "testing":
        return await call_next(request)

    client_ip = get_rate_limit_key(request)
    if not await take_token(client_ip):
        logger.warning("Global rate limit exceeded", client_ip=client_ip, path=request.url.path)
        return JSONResponse(
            status_code=429,
            content={
                "success": False,
                "detail": "Too many requests. Please slow down.",
                "message": "Too many requests. Please slow down.",
            },
            headers={"Retry-After": "1"},
        )

    return await call_next(request)
