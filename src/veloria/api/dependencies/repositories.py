"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.veloria.api.dependencies.db import DBSession
from src.veloria.repositories import (
    BookingRepository,
    ContactRepository,
    ProjectRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_booking_repository(session: DBSession) -> BookingRepository:
    return BookingRepository(session)


def get_contact_repository(session: DBSession) -> ContactRepository:
    return ContactRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
BookingRepo = Annotated[BookingRepository, Depends(get_booking_repository)]
ContactRepo = Annotated[ContactRepository, Depends(get_contact_repository)]
