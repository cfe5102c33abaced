"""Counts in-flight API requests so shutdown can drain them."""

from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.veloria.core.rate_limit import EXEMPT_PATHS
from src.veloria.core.shutdown import request_tracker


async def request_tracking_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    if request.url.path in EXEMPT_PATHS:
        return await call_next(request)

    async with request_tracker.track_request():
        return await call_next(request)
