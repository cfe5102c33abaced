"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.veloria.core.config import Settings
from src.veloria.core.rate_limit import global_rate_limit_middleware
from src.veloria.core.security import SecurityHeadersMiddleware

from .logging_context import logging_context_middleware
from .request_tracking import request_tracking_middleware

__all__ = [
    "global_rate_limit_middleware",
    "logging_context_middleware",
    "request_tracking_middleware",
    "setup_middlewares",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Starlette runs the last-added middleware first, so the order below is
    outermost (correlation id) to innermost (rate limit).
    """
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Docs need the relaxed CSP; production without docs uses the strict one
    csp = None
    if not settings.enable_openapi and settings.csp_production:
        csp = settings.csp_production
    hsts = None if settings.debug else "max-age=31536000; includeSubDomains"
    app.add_middleware(
        SecurityHeadersMiddleware, content_security_policy=csp, strict_transport_security=hsts
    )

    @app.middleware("http")
    async def _logging_context(request, call_next):  # type: ignore[no-untyped-def]
        return await logging_context_middleware(request, call_next)

    @app.middleware("http")
    async def _request_tracking(request, call_next):  # type: ignore[no-untyped-def]
        return await request_tracking_middleware(request, call_next)

    @app.middleware("http")
    async def _global_rate_limit(request, call_next):  # type: ignore[no-untyped-def]
        return await global_rate_limit_middleware(request, call_next)
