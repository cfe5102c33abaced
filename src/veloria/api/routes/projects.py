"""Project enquiries (public) and project management (dashboard)."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, HTTPException, Query, status
from starlette.requests import Request

from src.veloria.api.dependencies import AdminUser, CurrentUser, ProjectServiceDep
from src.veloria.core.notifications import send_new_project_notification, send_project_received
from src.veloria.core.rate_limit import limiter
from src.veloria.models import Project, ProjectStatus
from src.veloria.schemas import (
    CalendarEvent,
    DataResponse,
    MessageResponse,
    MilestoneStatusUpdate,
    PaymentStatusUpdate,
    ProjectCreate,
    ProjectRead,
    ProjectStats,
    ProjectSubmission,
    ProjectUpdate,
    WorkflowUpdate,
)
from src.veloria.services import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


async def _get_or_404(service: ProjectService, project_id: UUID) -> Project:
    project = await service.get(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("10/hour")
async def submit_project(
    request: Request,
    data: ProjectSubmission,
    service: ProjectServiceDep,
    background_tasks: BackgroundTasks,
) -> MessageResponse:
    """Receive a project enquiry from the website and notify both parties."""
    project = await service.submit(data)
    background_tasks.add_task(send_new_project_notification, project)
    background_tasks.add_task(send_project_received, project)
    return MessageResponse(
        message="Your project request has been received. We'll contact you shortly."
    )


@router.post(
    "/admin",
    response_model=DataResponse[ProjectRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    data: ProjectCreate, service: ProjectServiceDep, current_user: CurrentUser
) -> DataResponse[ProjectRead]:
    project = await service.create(data)
    return DataResponse[ProjectRead](data=ProjectRead.model_validate(project))


@router.get("/admin", response_model=list[ProjectRead])
async def list_projects(
    service: ProjectServiceDep,
    current_user: CurrentUser,
    status_filter: ProjectStatus | None = Query(default=None, alias="status"),
) -> list[Project]:
    """All projects, newest first."""
    return await service.list_projects(status_filter)


@router.get("/admin/stats", response_model=ProjectStats)
async def project_stats(service: ProjectServiceDep, current_user: CurrentUser) -> ProjectStats:
    return await service.stats()


@router.get("/admin/calendar", response_model=list[CalendarEvent])
async def project_calendar(
    service: ProjectServiceDep,
    current_user: CurrentUser,
    start: date | None = None,
    end: date | None = None,
) -> list[CalendarEvent]:
    """Start dates, deadlines, milestones and payment due dates within the range."""
    return await service.calendar(start, end)


@router.get("/admin/{project_id}", response_model=ProjectRead)
async def get_project(
    project_id: UUID, service: ProjectServiceDep, current_user: CurrentUser
) -> Project:
    return await _get_or_404(service, project_id)


@router.patch("/admin/{project_id}", response_model=DataResponse[ProjectRead])
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    service: ProjectServiceDep,
    current_user: CurrentUser,
) -> DataResponse[ProjectRead]:
    """Update any subset of project fields; nested groups are replaced whole."""
    project = await _get_or_404(service, project_id)
    project = await service.update(project, data)
    return DataResponse[ProjectRead](data=ProjectRead.model_validate(project))


@router.delete("/admin/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: UUID, service: ProjectServiceDep, current_user: AdminUser
) -> MessageResponse:
    project = await _get_or_404(service, project_id)
    await service.delete(project)
    return MessageResponse(message="Project deleted successfully")


@router.patch(
    "/admin/{project_id}/payments/{payment_id}", response_model=DataResponse[ProjectRead]
)
async def update_payment_status(
    project_id: UUID,
    payment_id: str,
    data: PaymentStatusUpdate,
    service: ProjectServiceDep,
    current_user: CurrentUser,
) -> DataResponse[ProjectRead]:
    project = await _get_or_404(service, project_id)
    updated = await service.update_payment(project, payment_id, data)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return DataResponse[ProjectRead](data=ProjectRead.model_validate(updated))


@router.patch(
    "/admin/{project_id}/milestones/{milestone_id}", response_model=DataResponse[ProjectRead]
)
async def update_milestone_status(
    project_id: UUID,
    milestone_id: str,
    data: MilestoneStatusUpdate,
    service: ProjectServiceDep,
    current_user: CurrentUser,
) -> DataResponse[ProjectRead]:
    project = await _get_or_404(service, project_id)
    updated = await service.update_milestone(project, milestone_id, data)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Milestone not found")
    return DataResponse[ProjectRead](data=ProjectRead.model_validate(updated))


@router.patch("/admin/{project_id}/workflow", response_model=DataResponse[ProjectRead])
async def update_workflow_stage(
    project_id: UUID,
    data: WorkflowUpdate,
    service: ProjectServiceDep,
    current_user: CurrentUser,
) -> DataResponse[ProjectRead]:
    project = await _get_or_404(service, project_id)
    project = await service.update_workflow(project, data.workflow_stage)
    return DataResponse[ProjectRead](data=ProjectRead.model_validate(project))
