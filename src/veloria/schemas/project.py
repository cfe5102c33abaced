"""Project schemas for API request/response.

The admin dashboard edits projects group by group, so every nested group has
its own model. Older projects stored palettes and fonts as plain strings; the
``coerce_*`` helpers upgrade those on read and are shared with the client.
"""

import re
from datetime import date, datetime
from typing import Annotated, Any
from uuid import UUID, uuid4

from pydantic import BeforeValidator, EmailStr, Field, field_validator, model_validator

from src.veloria.models.enums import (
    ApprovalStatus,
    ContentProgress,
    MilestoneStatus,
    PaymentStatus,
    ProjectStatus,
    ServiceType,
    Timeline,
    WorkflowStage,
)
from src.veloria.schemas.base import CamelModel

HEX_COLOR_RE = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")


def cut_iso_date(value: Any) -> Any:
    """Reduce ISO timestamps to ``YYYY-MM-DD``; empty strings become None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        return value[:10]
    return value


def coerce_color(value: Any) -> Any:
    """Upgrade a legacy hex string to a palette entry."""
    if isinstance(value, str):
        return {"color": value, "category": "primary", "name": ""}
    return value


def coerce_font(value: Any) -> Any:
    """Upgrade a legacy font family string to a font entry."""
    if isinstance(value, str):
        return {"family": value, "category": "primary", "source": ""}
    return value


FormDate = Annotated[date | None, BeforeValidator(cut_iso_date)]


def _new_item_id() -> str:
    return uuid4().hex


# --- Nested groups ---


class ColorSwatch(CamelModel):
    color: str
    category: str = "primary"
    name: str = ""

    @model_validator(mode="before")
    @classmethod
    def upgrade_legacy(cls, data: Any) -> Any:
        return coerce_color(data)

    @field_validator("color")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        if not HEX_COLOR_RE.match(v):
            raise ValueError("Please enter a valid hex color code (e.g. #FF5733)")
        return v


class FontChoice(CamelModel):
    family: str = Field(min_length=1)
    category: str = "primary"
    source: str = ""

    @model_validator(mode="before")
    @classmethod
    def upgrade_legacy(cls, data: Any) -> Any:
        return coerce_font(data)


class DesignChoices(CamelModel):
    color_palette: list[ColorSwatch] = Field(default_factory=list)
    fonts: list[FontChoice] = Field(default_factory=list)
    design_notes: str = ""
    approval_status: ApprovalStatus = ApprovalStatus.PENDING


class ContentStatus(CamelModel):
    images: ContentProgress = ContentProgress.NOT_STARTED
    text: ContentProgress = ContentProgress.NOT_STARTED
    notes: str = ""


class Hosting(CamelModel):
    provider: str = ""
    account: str = ""
    renewal_date: FormDate = None
    cost: float | None = None
    login_info: str = ""
    notes: str = ""


class Domain(CamelModel):
    name: str = ""
    registrar: str = ""
    renewal_date: FormDate = None
    cost: float | None = None
    login_info: str = ""
    notes: str = ""


class Referral(CamelModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    commission_percentage: float | None = Field(default=None, ge=0, le=100)
    notes: str = ""


class AdditionalService(CamelModel):
    name: str = Field(min_length=1)
    description: str = ""
    price: float = Field(default=0, ge=0)
    status: str = "pending"


class Payment(CamelModel):
    """One instalment of the payment schedule."""

    id: str = Field(default_factory=_new_item_id)
    name: str = Field(min_length=1)
    amount: float = Field(gt=0)
    due_date: FormDate = None
    status: PaymentStatus = PaymentStatus.PENDING
    paid_date: FormDate = None
    notes: str = ""


class Milestone(CamelModel):
    id: str = Field(default_factory=_new_item_id)
    name: str = Field(min_length=1)
    description: str = ""
    due_date: FormDate = None
    status: MilestoneStatus = MilestoneStatus.PENDING
    completed_date: FormDate = None


# --- Requests ---


def _strip_goals(goals: list[str]) -> list[str]:
    cleaned = [goal.strip() for goal in goals if goal and goal.strip()]
    if not cleaned:
        raise ValueError("At least one project goal is required")
    return cleaned


class ProjectSubmission(CamelModel):
    """Public enquiry from the marketing site's project form."""

    service_type: ServiceType
    project_name: str = Field(min_length=1, max_length=200)
    project_description: str = Field(min_length=1)
    project_goals: list[str] = Field(min_length=1)
    budget: str = Field(min_length=1, max_length=100)
    timeline: Timeline
    company_name: str = Field(min_length=1, max_length=200)
    company_website: str | None = Field(default=None, max_length=500)
    industry: str = Field(min_length=1, max_length=200)
    target_audience: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=50)

    @field_validator("project_goals")
    @classmethod
    def validate_goals(cls, v: list[str]) -> list[str]:
        return _strip_goals(v)


class ProjectFields(CamelModel):
    """Fields the admin form may send; every one optional."""

    project_name: str | None = Field(default=None, min_length=1, max_length=200)
    project_description: str | None = None
    project_goals: list[str] | None = None
    service_type: ServiceType | None = None
    industry: str | None = None
    target_audience: str | None = None
    budget: str | None = None
    timeline: Timeline | None = None
    name: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    company_name: str | None = None
    company_website: str | None = None
    project_value: float | None = Field(default=None, ge=0)
    payment_schedule: list[Payment] | None = None
    milestones: list[Milestone] | None = None
    start_date: FormDate = None
    deadline: FormDate = None
    design_choices: DesignChoices | None = None
    content_status: ContentStatus | None = None
    hosting: Hosting | None = None
    domain: Domain | None = None
    referred_by: Referral | None = None
    additional_services: list[AdditionalService] | None = None
    workflow_stage: WorkflowStage | None = None
    status: ProjectStatus | None = None
    notes: str | None = None


class ProjectCreate(ProjectFields):
    """Project created from the admin dashboard."""

    project_name: str = Field(min_length=1, max_length=200)
    project_description: str = Field(min_length=1)
    project_goals: list[str] = Field(min_length=1)
    service_type: ServiceType
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    company_name: str = Field(min_length=1, max_length=200)

    @field_validator("project_goals")
    @classmethod
    def validate_goals(cls, v: list[str]) -> list[str]:
        return _strip_goals(v)


class ProjectUpdate(ProjectFields):
    """Partial update; only keys present in the request body are applied."""

    @field_validator("project_goals")
    @classmethod
    def validate_goals(cls, v: list[str] | None) -> list[str] | None:
        return None if v is None else _strip_goals(v)


class PaymentStatusUpdate(CamelModel):
    status: PaymentStatus
    paid_date: FormDate = None


class MilestoneStatusUpdate(CamelModel):
    status: MilestoneStatus
    completed_date: FormDate = None


class WorkflowUpdate(CamelModel):
    workflow_stage: WorkflowStage


# --- Responses ---


class ProjectRead(CamelModel):
    id: UUID
    project_name: str
    project_description: str
    project_goals: list[str]
    service_type: ServiceType
    industry: str
    target_audience: str
    budget: str
    timeline: Timeline
    name: str
    email: str
    phone: str | None
    company_name: str
    company_website: str | None
    project_value: float
    payment_schedule: list[Payment]
    milestones: list[Milestone]
    start_date: date | None
    deadline: date | None
    design_choices: DesignChoices
    content_status: ContentStatus
    hosting: Hosting
    domain: Domain
    referred_by: Referral
    additional_services: list[AdditionalService]
    workflow_stage: WorkflowStage
    status: ProjectStatus
    notes: str | None
    created_at: datetime
    updated_at: datetime


class ProjectStats(CamelModel):
    total: int
    by_status: dict[str, int]
    by_stage: dict[str, int]
    pipeline_value: float


class CalendarEvent(CamelModel):
    """Event shape consumed by the dashboard calendars."""

    id: str
    title: str
    start: str
    end: str | None = None
    all_day: bool = False
    type: str
    color: str
    extended_props: dict[str, Any] = Field(default_factory=dict)
