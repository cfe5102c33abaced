"""Shared enums for models and schemas."""

from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"


class ServiceType(str, Enum):
    ECOMMERCE = "ecommerce"
    BLOG = "blog"
    PORTFOLIO = "portfolio"
    LANDING = "landing"
    CUSTOM = "custom"


class Timeline(str, Enum):
    URGENT = "urgent"
    STANDARD = "standard"
    RELAXED = "relaxed"
    NOT_SURE = "not-sure"


class ProjectStatus(str, Enum):
    """Sales status of a project enquiry."""

    NEW = "new"
    CONTACTED = "contacted"
    IN_PROGRESS = "in-progress"
    QUOTED = "quoted"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class WorkflowStage(str, Enum):
    """Delivery stage of an accepted project, in pipeline order."""

    DISCOVERY = "discovery"
    PROPOSAL = "proposal"
    CONTRACT = "contract"
    DESIGN = "design"
    DEVELOPMENT = "development"
    TESTING = "testing"
    LAUNCH = "launch"
    POST_LAUNCH = "post_launch"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class MilestoneStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ApprovalStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    NEEDS_REVISION = "needs_revision"


class ContentProgress(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class BookingStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"


class CallType(str, Enum):
    VIDEO = "video"
    PHONE = "phone"


class ContactStatus(str, Enum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"
