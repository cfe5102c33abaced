from src.veloria.services.auth_service import AuthService
from src.veloria.services.booking_service import BookingNotOwnedError, BookingService
from src.veloria.services.contact_service import ContactService
from src.veloria.services.finance_service import FinanceService
from src.veloria.services.project_service import ProjectService

__all__ = [
    "AuthService",
    "BookingNotOwnedError",
    "BookingService",
    "ContactService",
    "FinanceService",
    "ProjectService",
]
