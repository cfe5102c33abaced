"""Project model.

Grouped project data (design choices, hosting, payment schedule, ...) is
stored as JSON documents. SQLAlchemy does not track in-place mutation of
JSON values, so updates must assign a new object to the attribute.
"""

from datetime import date, datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, SQLModel

from src.veloria.models.base import utc_now
from src.veloria.models.enums import ProjectStatus, WorkflowStage


class Project(SQLModel, table=True):
    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    # Enquiry
    project_name: str = Field(max_length=200, index=True)
    project_description: str = Field(default="", sa_column=Column(Text, nullable=False))
    project_goals: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    service_type: str = Field(max_length=20)
    industry: str = Field(default="", max_length=200)
    target_audience: str = Field(default="", sa_column=Column(Text, nullable=False))
    budget: str = Field(default="", max_length=100)
    timeline: str = Field(default="not-sure", max_length=20)

    # Client
    name: str = Field(max_length=200)
    email: str = Field(max_length=255, index=True)
    phone: str | None = Field(default=None, max_length=50)
    company_name: str = Field(max_length=200)
    company_website: str | None = Field(default=None, max_length=500)

    # Commercial
    project_value: float = Field(default=0)
    payment_schedule: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    milestones: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    start_date: date | None = Field(default=None)
    deadline: date | None = Field(default=None)

    # Delivery details
    design_choices: dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSON, nullable=False)
    )
    content_status: dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSON, nullable=False)
    )
    hosting: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    domain: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    referred_by: dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSON, nullable=False)
    )
    additional_services: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )

    workflow_stage: str = Field(default=WorkflowStage.DISCOVERY.value, max_length=20)
    status: str = Field(default=ProjectStatus.NEW.value, max_length=20, index=True)
    notes: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
