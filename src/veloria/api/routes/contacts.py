"""Contact form endpoints."""

from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, HTTPException, status
from starlette.requests import Request

from src.veloria.api.dependencies import AdminUser, ContactServiceDep, CurrentUser
from src.veloria.core.notifications import send_contact_received, send_new_contact_notification
from src.veloria.core.rate_limit import limiter
from src.veloria.models import Contact
from src.veloria.schemas import (
    ContactCreate,
    ContactRead,
    ContactUpdate,
    DataResponse,
    MessageResponse,
)
from src.veloria.services import ContactService

router = APIRouter(prefix="/contact", tags=["contact"])


async def _get_or_404(service: ContactService, contact_id: UUID) -> Contact:
    contact = await service.get(contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return contact


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("10/hour")
async def submit_contact(
    request: Request,
    data: ContactCreate,
    service: ContactServiceDep,
    background_tasks: BackgroundTasks,
) -> MessageResponse:
    contact = await service.create(data)
    background_tasks.add_task(send_new_contact_notification, contact)
    background_tasks.add_task(send_contact_received, contact)
    return MessageResponse(
        message="Your message has been received. We will contact you shortly."
    )


@router.get("/admin", response_model=list[ContactRead])
async def list_contacts(service: ContactServiceDep, current_user: CurrentUser) -> list[Contact]:
    """All messages, newest first."""
    return await service.list_contacts()


@router.get("/admin/{contact_id}", response_model=ContactRead)
async def get_contact(
    contact_id: UUID, service: ContactServiceDep, current_user: CurrentUser
) -> Contact:
    return await _get_or_404(service, contact_id)


@router.patch("/admin/{contact_id}", response_model=DataResponse[ContactRead])
async def update_contact(
    contact_id: UUID,
    data: ContactUpdate,
    service: ContactServiceDep,
    current_user: CurrentUser,
) -> DataResponse[ContactRead]:
    contact = await _get_or_404(service, contact_id)
    contact = await service.update(contact, data)
    return DataResponse[ContactRead](data=ContactRead.model_validate(contact))


@router.delete("/admin/{contact_id}", response_model=MessageResponse)
async def delete_contact(
    contact_id: UUID, service: ContactServiceDep, current_user: AdminUser
) -> MessageResponse:
    contact = await _get_or_404(service, contact_id)
    await service.delete(contact)
    return MessageResponse(message="Contact deleted successfully")
