from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.veloria.api.middlewares import setup_middlewares
from src.veloria.api.routes.router import api_router
from src.veloria.core.config import get_settings
from src.veloria.core.db import dispose_engine
from src.veloria.core.exceptions import setup_exception_handlers
from src.veloria.core.health import setup_health_endpoint, setup_metrics
from src.veloria.core.logging import get_logger, setup_logging
from src.veloria.core.rate_limit import limiter
from src.veloria.core.redis import close_redis
from src.veloria.core.shutdown import request_tracker

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("Starting application", app_name=settings.app_name, env=settings.app_env)

    yield

    logger.info("Shutdown initiated", in_flight=request_tracker.in_flight_count)
    await request_tracker.start_shutdown()
    await request_tracker.wait_for_drain(timeout=settings.shutdown_grace_period)

    await close_redis()
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "Dashboard login"},
    {"name": "projects", "description": "Project enquiries and project management"},
    {"name": "bookings", "description": "Discovery call bookings"},
    {"name": "contact", "description": "Contact form messages"},
    {"name": "finance", "description": "Revenue and payment overview"},
    {"name": "ops", "description": "Health and metrics"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    docs_kwargs: dict[str, Any] = {}
    if not settings.enable_openapi:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}
    app = FastAPI(
        title=settings.app_name,
        description="Veloria Studio intake and admin API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        **docs_kwargs,
    )

    setup_exception_handlers(app)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    setup_middlewares(app, settings)
    app.include_router(api_router)
    setup_metrics(app)
    setup_health_endpoint(app)

    return app


app = create_app()
