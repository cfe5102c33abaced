"""Authentication service - email/password login for dashboard users."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.veloria.core.logging import get_logger
from src.veloria.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.veloria.models import User
from src.veloria.repositories import UserRepository
from src.veloria.schemas.auth import LoginResponse
from src.veloria.schemas.user import UserCreate, UserRead

logger = get_logger(__name__)


class AuthService:
    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def authenticate(self, email: str, password: str) -> LoginResponse | None:
        """Check credentials and issue a bearer token.

        Returns None for unknown emails, wrong passwords and inactive users
        alike, so callers cannot tell which check failed.
        """
        user = await self.user_repo.get_by_email(email)

        # Always verify to keep unknown-email and wrong-password timing equal
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid or not user.is_active:
            logger.info("Login failed", reason="invalid_credentials")
            return None

        token = create_access_token(user.id, user.role)
        logger.info("Login succeeded", user_id=str(user.id))
        return LoginResponse(token=token, user=UserRead.model_validate(user))

    async def get_user_for_token(self, token: str) -> User | None:
        """Resolve a bearer token to an active user, or None."""
        payload = decode_token(token)
        if payload is None or payload.get("type") != "access":
            return None

        try:
            user_id = UUID(payload.get("sub", ""))
        except ValueError:
            return None

        user = await self.user_repo.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return user

    async def create_user(self, data: UserCreate) -> User:
        """Create a dashboard user. Raises ValueError if the email is taken."""
        email = data.email.lower()
        if await self.user_repo.exists_by_email(email):
            raise ValueError("A user with this email already exists")

        user = User(
            email=email,
            hashed_password=hash_password(data.password),
            name=data.name,
            role=data.role.value,
        )
        try:
            self.user_repo.add(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return user
