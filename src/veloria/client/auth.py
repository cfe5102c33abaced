"""Dashboard login session."""

import json
from typing import Any

from src.veloria.client.http import ApiClient, ApiError
from src.veloria.client.storage import LocalStorage
from src.veloria.core.logging import get_logger

logger = get_logger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"
LOGIN_FAILED = "Failed to login. Please check your credentials."


class AuthSession:
    """Holds the signed-in admin and keeps the client's bearer header in step."""

    def __init__(self, client: ApiClient, storage: LocalStorage):
        self.client = client
        self.storage = storage
        self.user: dict[str, Any] | None = None
        self.token: str | None = None
        self.error: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None

    def restore(self) -> bool:
        """Pick up a session saved by an earlier run; needs both keys."""
        token = self.storage.get_item(TOKEN_KEY)
        raw_user = self.storage.get_item(USER_KEY)
        if not token or not raw_user:
            return False
        try:
            user = json.loads(raw_user)
        except ValueError:
            logger.warning("Discarding unreadable stored user")
            self._forget()
            return False
        if not isinstance(user, dict):
            logger.warning("Discarding malformed stored user")
            self._forget()
            return False

        self.token = token
        self.user = user
        self.client.set_token(token)
        return True

    async def login(self, email: str, password: str) -> bool:
        self.error = None
        try:
            data = await self.client.post(
                "/auth/login",
                json={"email": email, "password": password},
                fallback=LOGIN_FAILED,
            )
        except ApiError as e:
            self.error = e.message
            logger.info("Login failed", status_code=e.status_code)
            return False

        self.token = data["token"]
        self.user = data["user"]
        self.storage.set_item(TOKEN_KEY, self.token)
        self.storage.set_item(USER_KEY, json.dumps(self.user))
        self.client.set_token(self.token)
        logger.info("Logged in", user_id=self.user.get("id"))
        return True

    def logout(self) -> None:
        self._forget()
        self.error = None

    def _forget(self) -> None:
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)
        self.token = None
        self.user = None
        self.client.set_token(None)
