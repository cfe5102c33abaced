"""Helmet-style response headers."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Swagger UI loads its bundle from jsdelivr
DOCS_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
    "img-src 'self' data: cdn.jsdelivr.net; "
    "frame-ancestors 'none'"
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach a fixed set of security headers to every response."""

    def __init__(
        self,
        app: ASGIApp,
        content_security_policy: str | None = None,
        strict_transport_security: str | None = "max-age=31536000; includeSubDomains",
        permissions_policy: str | None = None,
    ):
        super().__init__(app)
        headers = {
            "Content-Security-Policy": content_security_policy or DOCS_CSP,
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "strict-origin-when-cross-origin",
            # The dashboard fetches project data cross-origin
            "Cross-Origin-Resource-Policy": "cross-origin",
        }
        if strict_transport_security:
            headers["Strict-Transport-Security"] = strict_transport_security
        if permissions_policy:
            headers["Permissions-Policy"] = permissions_policy
        self.headers = headers

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers.update(self.headers)
        return response
