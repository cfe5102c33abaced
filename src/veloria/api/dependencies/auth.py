"""Authentication and authorization dependencies."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.veloria.api.dependencies.services import AuthServiceDep
from src.veloria.core.logging import bind_user_context
from src.veloria.models import User, UserRole

BEARER_PREFIX = "Bearer "


async def get_current_user(
    auth_service: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Resolve the bearer token to an active dashboard user."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await auth_service.get_user_for_token(authorization[len(BEARER_PREFIX) :])
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, token failed",
            headers={"WWW-Authenticate": "Bearer"},
        )

    bind_user_context(user.id, user.role, user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def require_admin_role(current_user: CurrentUser) -> User:
    """Editors can work on projects; deletions and finances need an admin."""
    if current_user.role != UserRole.ADMIN.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized as an admin",
        )
    return current_user


AdminUser = Annotated[User, Depends(require_admin_role)]
