"""/health and /metrics endpoints."""

import secrets
import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.veloria.core.config import get_settings
from src.veloria.core.db import get_session
from src.veloria.core.redis import get_redis
from src.veloria.core.shutdown import request_tracker

HEALTH_CACHE_TTL = 10  # seconds

_health_cache: dict[str, Any] | None = None
_health_cache_time: float = 0


def reset_health_cache() -> None:
    """Reset health cache (for testing)."""
    global _health_cache, _health_cache_time
    _health_cache = None
    _health_cache_time = 0


async def _check_dependencies(now: float) -> dict[str, Any]:
    result: dict[str, Any] = {
        "status": "healthy",
        "database": "unknown",
        "redis": "not_configured",
        "cached": False,
        "timestamp": now,
    }

    try:
        async with get_session() as session:
            await session.execute(text("SELECT 1"))
        result["database"] = "healthy"
    except Exception as e:
        result["database"] = f"unhealthy: {e!s}"
        result["status"] = "unhealthy"

    # Redis only backs caches and rate limits, so an outage is "degraded"
    redis = await get_redis()
    if redis:
        try:
            await redis.ping()  # type: ignore[misc]
            result["redis"] = "healthy"
        except Exception as e:
            result["redis"] = f"unhealthy: {e!s}"
            if result["status"] == "healthy":
                result["status"] = "degraded"

    return result


def setup_health_endpoint(app: FastAPI) -> None:
    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        """Report database and Redis health, cached for a few seconds."""
        global _health_cache, _health_cache_time

        if request_tracker.is_shutting_down:
            return JSONResponse(
                content={
                    "status": "draining",
                    "in_flight_requests": request_tracker.in_flight_count,
                    "message": "Server is shutting down",
                },
                status_code=503,
            )

        now = time.time()
        if _health_cache and (now - _health_cache_time) < HEALTH_CACHE_TTL:
            body = {
                **_health_cache,
                "cached": True,
                "cache_age_seconds": round(now - _health_cache_time, 1),
            }
        else:
            body = await _check_dependencies(now)
            _health_cache = body
            _health_cache_time = now

        status_code = 503 if body["status"] == "unhealthy" else 200
        return JSONResponse(content=body, status_code=status_code)


def setup_metrics(app: FastAPI) -> None:
    """Expose Prometheus metrics, behind X-Metrics-Key when one is configured."""
    settings = get_settings()
    instrumentator = Instrumentator(excluded_handlers=["/health", "/metrics"]).instrument(app)

    if not settings.metrics_api_key:
        instrumentator.expose(app, endpoint="/metrics", tags=["ops"])
        return

    api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
        expected = settings.metrics_api_key
        if api_key is None or expected is None or not secrets.compare_digest(api_key, expected):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(
        app, endpoint="/metrics", tags=["ops"], dependencies=[Depends(verify_metrics_key)]
    )
