from datetime import date

from sqlalchemy import func
from sqlmodel import col, select

from src.veloria.models import Project, ProjectStatus
from src.veloria.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

    async def list_newest(self, status: ProjectStatus | None = None) -> list[Project]:
        """List projects newest first, optionally filtered by status."""
        query = select(Project).order_by(col(Project.created_at).desc())
        if status is not None:
            query = query.where(Project.status == status.value)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by(self, column: str) -> dict[str, int]:
        """Count projects grouped by a string column (``status``, ``workflow_stage``)."""
        field = getattr(Project, column)
        result = await self.session.execute(select(field, func.count()).group_by(field))
        return {key: count for key, count in result.all()}

    async def list_with_payments(self) -> list[Project]:
        """Projects that carry a value or a payment schedule, for finance views."""
        result = await self.session.execute(select(Project))
        return [p for p in result.scalars().all() if p.project_value > 0 or p.payment_schedule]

    async def list_overlapping(self, start: date | None, end: date | None) -> list[Project]:
        """Projects whose schedule may produce calendar events in the range.

        Milestones and payments live in JSON, so only the plain date columns
        are filtered here; item dates are filtered by the caller.
        """
        result = await self.session.execute(select(Project))
        projects = list(result.scalars().all())
        if start is None or end is None:
            return projects
        return [p for p in projects if _touches_range(p, start, end)]


def _touches_range(project: Project, start: date, end: date) -> bool:
    dates = [project.start_date, project.deadline]
    for group in (project.milestones, project.payment_schedule):
        dates.extend(_parse(item.get("due_date")) for item in group)
    return any(d is not None and start <= d <= end for d in dates)


def _parse(value: str | None) -> date | None:
    return date.fromisoformat(value[:10]) if value else None
