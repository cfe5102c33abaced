"""Async HTTP wrapper for the Veloria API."""

from typing import Any

import httpx

from src.veloria.core.config import ClientSettings, get_client_settings
from src.veloria.core.logging import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    """A failed API call.

    ``status_code`` is None when no response was received.
    """

    def __init__(self, status_code: int | None, message: str, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.payload = payload


def error_message(payload: Any, fallback: str) -> str:
    """Pick the user-facing message: ``message``, then ``detail``, then fallback."""
    if isinstance(payload, dict):
        for key in ("message", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return fallback


class ApiClient:
    """Thin JSON client; carries the bearer token once a session is set."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = settings or get_client_settings()
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_url,
            timeout=settings.request_timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    @property
    def token(self) -> str | None:
        header = self._client.headers.get("Authorization")
        return header.removeprefix("Bearer ") if header else None

    def set_token(self, token: str | None) -> None:
        if token:
            self._client.headers["Authorization"] = f"Bearer {token}"
        else:
            self._client.headers.pop("Authorization", None)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        fallback: str = "Request failed",
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ApiError: on transport failures and non-2xx responses.
        """
        try:
            response = await self._client.request(method, path, json=json, params=params)
        except httpx.HTTPError as e:
            logger.warning("API request failed", method=method, path=path, error=str(e))
            raise ApiError(None, fallback) from e

        payload: Any = None
        if response.content:
            try:
                payload = response.json()
            except ValueError:
                payload = None

        if response.is_error:
            message = error_message(payload, fallback)
            logger.info(
                "API error response",
                method=method,
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise ApiError(response.status_code, message, payload)

        return payload

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request("POST", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Any:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
