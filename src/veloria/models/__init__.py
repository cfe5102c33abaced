"""Model exports.

Import from here: `from src.veloria.models import Project, User`
"""

from src.veloria.models.booking import Booking
from src.veloria.models.contact import Contact
from src.veloria.models.enums import (
    ApprovalStatus,
    BookingStatus,
    CallType,
    ContactStatus,
    ContentProgress,
    MilestoneStatus,
    PaymentStatus,
    ProjectStatus,
    ServiceType,
    Timeline,
    UserRole,
    WorkflowStage,
)
from src.veloria.models.project import Project
from src.veloria.models.user import User

__all__ = [
    # Enums
    "ApprovalStatus",
    "BookingStatus",
    "CallType",
    "ContactStatus",
    "ContentProgress",
    "MilestoneStatus",
    "PaymentStatus",
    "ProjectStatus",
    "ServiceType",
    "Timeline",
    "UserRole",
    "WorkflowStage",
    # Tables
    "Booking",
    "Contact",
    "Project",
    "User",
]
