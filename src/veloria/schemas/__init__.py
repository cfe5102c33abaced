from src.veloria.schemas.auth import LoginRequest, LoginResponse
from src.veloria.schemas.base import CamelModel, DataResponse, MessageResponse
from src.veloria.schemas.booking import (
    BookingCancel,
    BookingConfirmation,
    BookingCreate,
    BookingRead,
    BookingUpdate,
)
from src.veloria.schemas.contact import ContactCreate, ContactRead, ContactUpdate
from src.veloria.schemas.finance import FinanceOverview
from src.veloria.schemas.project import (
    CalendarEvent,
    MilestoneStatusUpdate,
    PaymentStatusUpdate,
    ProjectCreate,
    ProjectRead,
    ProjectStats,
    ProjectSubmission,
    ProjectUpdate,
    WorkflowUpdate,
)
from src.veloria.schemas.user import UserCreate, UserRead

__all__ = [
    # Base
    "CamelModel",
    "DataResponse",
    "MessageResponse",
    # Auth
    "LoginRequest",
    "LoginResponse",
    # Bookings
    "BookingCancel",
    "BookingConfirmation",
    "BookingCreate",
    "BookingRead",
    "BookingUpdate",
    # Contacts
    "ContactCreate",
    "ContactRead",
    "ContactUpdate",
    # Finance
    "FinanceOverview",
    # Projects
    "CalendarEvent",
    "MilestoneStatusUpdate",
    "PaymentStatusUpdate",
    "ProjectCreate",
    "ProjectRead",
    "ProjectStats",
    "ProjectSubmission",
    "ProjectUpdate",
    "WorkflowUpdate",
    # Users
    "UserCreate",
    "UserRead",
]
