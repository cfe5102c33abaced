"""Project management - enquiries, admin edits and schedule item updates."""

from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.veloria.core.cache import FINANCE_OVERVIEW_KEY, invalidate
from src.veloria.core.logging import get_logger
from src.veloria.models import (
    MilestoneStatus,
    PaymentStatus,
    Project,
    ProjectStatus,
    WorkflowStage,
)
from src.veloria.models.base import utc_now
from src.veloria.repositories import ProjectRepository
from src.veloria.schemas.project import (
    CalendarEvent,
    MilestoneStatusUpdate,
    PaymentStatusUpdate,
    ProjectCreate,
    ProjectFields,
    ProjectStats,
    ProjectSubmission,
    ProjectUpdate,
)
from src.veloria.services.calendar_service import project_events

logger = get_logger(__name__)

# Columns that may be cleared by sending null
NULLABLE_FIELDS = frozenset({"phone", "company_website", "start_date", "deadline", "notes"})


def _column_values(data: ProjectFields, *, exclude_unset: bool) -> dict[str, Any]:
    """Dump a request to column values, JSON groups in snake_case."""
    values = data.model_dump(mode="json", exclude_unset=exclude_unset)
    # Plain date columns need date objects, not their JSON strings
    for key in ("start_date", "deadline"):
        if values.get(key):
            values[key] = getattr(data, key)
    return {k: v for k, v in values.items() if v is not None or k in NULLABLE_FIELDS}


class ProjectService:
    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def _commit(self, project: Project | None = None) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        if project is not None:
            await self.session.refresh(project)
        await invalidate(FINANCE_OVERVIEW_KEY)

    async def submit(self, data: ProjectSubmission) -> Project:
        """Store a public enquiry with status ``new``."""
        project = Project(**data.model_dump(mode="json"))
        self.project_repo.add(project)
        await self._commit(project)
        logger.info("Project enquiry received", project_id=str(project.id))
        return project

    async def create(self, data: ProjectCreate) -> Project:
        """Create a project from the admin form."""
        project = Project(**_column_values(data, exclude_unset=False))
        self.project_repo.add(project)
        await self._commit(project)
        logger.info("Project created", project_id=str(project.id))
        return project

    async def list_projects(self, status: ProjectStatus | None = None) -> list[Project]:
        return await self.project_repo.list_newest(status)

    async def get(self, project_id: UUID) -> Project | None:
        return await self.project_repo.get_by_id(project_id)

    async def update(self, project: Project, data: ProjectUpdate) -> Project:
        """Apply the fields present in the request; groups are replaced whole."""
        for field, value in _column_values(data, exclude_unset=True).items():
            setattr(project, field, value)
        project.updated_at = utc_now()
        await self._commit(project)
        return project

    async def delete(self, project: Project) -> None:
        await self.project_repo.delete(project)
        await self._commit()
        logger.info("Project deleted", project_id=str(project.id))

    async def update_payment(
        self, project: Project, payment_id: str, data: PaymentStatusUpdate
    ) -> Project | None:
        """Set a payment's status. Returns None if the payment does not exist.

        Moving to ``paid`` stamps today's date unless one is given; moving
        away from ``paid`` clears it.
        """
        paid_date: date | None = None
        if data.status == PaymentStatus.PAID:
            paid_date = data.paid_date or date.today()

        schedule = _replace_item(
            project.payment_schedule,
            payment_id,
            status=data.status.value,
            paid_date=paid_date.isoformat() if paid_date else None,
        )
        if schedule is None:
            return None
        project.payment_schedule = schedule
        project.updated_at = utc_now()
        await self._commit(project)
        return project

    async def update_milestone(
        self, project: Project, milestone_id: str, data: MilestoneStatusUpdate
    ) -> Project | None:
        """Set a milestone's status, stamping ``completed_date`` on completion."""
        completed_date: date | None = None
        if data.status == MilestoneStatus.COMPLETED:
            completed_date = data.completed_date or date.today()

        milestones = _replace_item(
            project.milestones,
            milestone_id,
            status=data.status.value,
            completed_date=completed_date.isoformat() if completed_date else None,
        )
        if milestones is None:
            return None
        project.milestones = milestones
        project.updated_at = utc_now()
        await self._commit(project)
        return project

    async def update_workflow(self, project: Project, stage: WorkflowStage) -> Project:
        project.workflow_stage = stage.value
        project.updated_at = utc_now()
        await self._commit(project)
        logger.info("Workflow stage changed", project_id=str(project.id), stage=stage.value)
        return project

    async def stats(self) -> ProjectStats:
        """Counts by status and by workflow stage of accepted projects."""
        by_status = {s.value: 0 for s in ProjectStatus}
        by_status.update(await self.project_repo.count_by("status"))

        by_stage = {s.value: 0 for s in WorkflowStage}
        pipeline_value = 0.0
        for project in await self.project_repo.list_newest(ProjectStatus.ACCEPTED):
            by_stage[project.workflow_stage] = by_stage.get(project.workflow_stage, 0) + 1
            pipeline_value += project.project_value

        return ProjectStats(
            total=sum(by_status.values()),
            by_status=by_status,
            by_stage=by_stage,
            pipeline_value=pipeline_value,
        )

    async def calendar(self, start: date | None, end: date | None) -> list[CalendarEvent]:
        events: list[CalendarEvent] = []
        for project in await self.project_repo.list_overlapping(start, end):
            events.extend(project_events(project, start, end))
        return sorted(events, key=lambda event: event.start)


def _replace_item(
    items: list[dict[str, Any]], item_id: str, **changes: Any
) -> list[dict[str, Any]] | None:
    """Copy ``items`` with one entry updated; None if no entry has ``item_id``."""
    found = False
    updated = []
    for item in items:
        if item.get("id") == item_id:
            item = {**item, **changes}
            found = True
        updated.append(item)
    return updated if found else None
