"""Admin home page summary."""

import asyncio
import datetime as dt
from typing import Any

from pydantic import BaseModel, Field

from src.veloria.client.http import ApiClient

RECENT_LIMIT = 5
ACTIVE_BOOKING_STATUSES = frozenset({"scheduled", "rescheduled"})
LOAD_FAILED = "Failed to load dashboard data. Please try again."


class SectionCount(BaseModel):
    total: int = 0
    unattended: int = 0


class DashboardSummary(BaseModel):
    bookings: SectionCount
    contacts: SectionCount
    projects: SectionCount
    upcoming_bookings: int = 0
    projects_by_status: dict[str, int] = Field(default_factory=dict)
    projects_by_stage: dict[str, int] = Field(default_factory=dict)
    recent_bookings: list[dict[str, Any]] = Field(default_factory=list)
    recent_contacts: list[dict[str, Any]] = Field(default_factory=list)
    recent_projects: list[dict[str, Any]] = Field(default_factory=list)


def summarize(
    bookings: list[dict[str, Any]],
    contacts: list[dict[str, Any]],
    projects: list[dict[str, Any]],
    today: dt.date | None = None,
) -> DashboardSummary:
    today = today or dt.date.today()

    by_status: dict[str, int] = {}
    by_stage: dict[str, int] = {}
    for project in projects:
        status = project.get("status", "new")
        by_status[status] = by_status.get(status, 0) + 1
        stage = project.get("workflowStage")
        # Only accepted projects are in the pipeline
        if status == "accepted" and stage:
            by_stage[stage] = by_stage.get(stage, 0) + 1

    upcoming = sum(
        1
        for booking in bookings
        if booking.get("status") in ACTIVE_BOOKING_STATUSES
        and dt.date.fromisoformat(booking["date"][:10]) >= today
    )

    return DashboardSummary(
        bookings=SectionCount(
            total=len(bookings),
            unattended=sum(1 for b in bookings if b.get("status") == "scheduled"),
        ),
        contacts=SectionCount(
            total=len(contacts),
            unattended=sum(1 for c in contacts if c.get("status") == "new"),
        ),
        projects=SectionCount(total=len(projects), unattended=by_status.get("new", 0)),
        upcoming_bookings=upcoming,
        projects_by_status=by_status,
        projects_by_stage=by_stage,
        recent_bookings=bookings[:RECENT_LIMIT],
        recent_contacts=contacts[:RECENT_LIMIT],
        recent_projects=projects[:RECENT_LIMIT],
    )


async def load_dashboard(client: ApiClient, today: dt.date | None = None) -> DashboardSummary:
    """Fetch the three admin lists concurrently and summarise them."""
    bookings, contacts, projects = await asyncio.gather(
        client.get("/bookings/admin", fallback=LOAD_FAILED),
        client.get("/contact/admin", fallback=LOAD_FAILED),
        client.get("/projects/admin", fallback=LOAD_FAILED),
    )
    return summarize(bookings, contacts, projects, today)
