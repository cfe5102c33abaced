"""Repository layer - data access abstraction."""

from src.veloria.repositories.base import BaseRepository
from src.veloria.repositories.booking import BookingRepository
from src.veloria.repositories.contact import ContactRepository
from src.veloria.repositories.project import ProjectRepository
from src.veloria.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "BookingRepository",
    "ContactRepository",
    "ProjectRepository",
    "UserRepository",
]
