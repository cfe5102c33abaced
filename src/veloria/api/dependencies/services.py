"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.veloria.api.dependencies.db import DBSession
from src.veloria.api.dependencies.repositories import (
    BookingRepo,
    ContactRepo,
    ProjectRepo,
    UserRepo,
)
from src.veloria.services import (
    AuthService,
    BookingService,
    ContactService,
    FinanceService,
    ProjectService,
)


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    return AuthService(user_repo, session)


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    return ProjectService(project_repo, session)


def get_booking_service(booking_repo: BookingRepo, session: DBSession) -> BookingService:
    return BookingService(booking_repo, session)


def get_contact_service(contact_repo: ContactRepo, session: DBSession) -> ContactService:
    return ContactService(contact_repo, session)


def get_finance_service(project_repo: ProjectRepo) -> FinanceService:
    return FinanceService(project_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
BookingServiceDep = Annotated[BookingService, Depends(get_booking_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
FinanceServiceDep = Annotated[FinanceService, Depends(get_finance_service)]
