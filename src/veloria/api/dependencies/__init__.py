"""FastAPI dependency injection definitions."""

from src.veloria.api.dependencies.auth import (
    AdminUser,
    CurrentUser,
    get_current_user,
    require_admin_role,
)
from src.veloria.api.dependencies.db import DBSession, get_db_session
from src.veloria.api.dependencies.repositories import (
    BookingRepo,
    ContactRepo,
    ProjectRepo,
    UserRepo,
)
from src.veloria.api.dependencies.services import (
    AuthServiceDep,
    BookingServiceDep,
    ContactServiceDep,
    FinanceServiceDep,
    ProjectServiceDep,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "AdminUser",
    "CurrentUser",
    "get_current_user",
    "require_admin_role",
    # Repositories
    "BookingRepo",
    "ContactRepo",
    "ProjectRepo",
    "UserRepo",
    # Services
    "AuthServiceDep",
    "BookingServiceDep",
    "ContactServiceDep",
    "FinanceServiceDep",
    "ProjectServiceDep",
]
