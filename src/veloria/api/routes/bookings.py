"""Discovery call booking endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, HTTPException, status
from starlette.requests import Request

from src.veloria.api.dependencies import AdminUser, BookingServiceDep, CurrentUser
from src.veloria.core.notifications import (
    send_booking_cancellation,
    send_booking_cancelled_notification,
    send_booking_confirmed,
    send_new_booking_notification,
)
from src.veloria.core.rate_limit import limiter
from src.veloria.models import Booking
from src.veloria.schemas import (
    BookingCancel,
    BookingConfirmation,
    BookingCreate,
    BookingRead,
    BookingUpdate,
    CalendarEvent,
    DataResponse,
    MessageResponse,
)
from src.veloria.services import BookingNotOwnedError, BookingService
from src.veloria.services.booking_service import booking_summary

router = APIRouter(prefix="/bookings", tags=["bookings"])


async def _get_or_404(service: BookingService, booking_id: UUID) -> Booking:
    booking = await service.get(booking_id)
    if booking is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.post("", response_model=BookingConfirmation, status_code=status.HTTP_201_CREATED)
@limiter.limit("10/hour")
async def create_booking(
    request: Request,
    data: BookingCreate,
    service: BookingServiceDep,
    background_tasks: BackgroundTasks,
) -> BookingConfirmation:
    """Schedule a discovery call and email the studio and the visitor."""
    booking = await service.create(data)
    background_tasks.add_task(send_new_booking_notification, booking)
    background_tasks.add_task(send_booking_confirmed, booking)
    return BookingConfirmation(booking=booking_summary(booking))


@router.patch(
    "/cancel/{booking_id}",
    response_model=MessageResponse,
    responses={401: {"description": "Email does not match the booking"}},
)
@limiter.limit("10/hour")
async def cancel_booking(
    request: Request,
    booking_id: UUID,
    data: BookingCancel,
    service: BookingServiceDep,
    background_tasks: BackgroundTasks,
) -> MessageResponse:
    """Cancel a booking; the visitor proves ownership with their email."""
    booking = await _get_or_404(service, booking_id)
    try:
        booking = await service.cancel(booking, data.email)
    except BookingNotOwnedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e

    background_tasks.add_task(send_booking_cancelled_notification, booking)
    background_tasks.add_task(send_booking_cancellation, booking)
    return MessageResponse(message="Your booking has been cancelled successfully.")


@router.get("/admin", response_model=list[BookingRead])
async def list_bookings(service: BookingServiceDep, current_user: CurrentUser) -> list[Booking]:
    """All bookings ordered by date."""
    return await service.list_bookings()


@router.get("/admin/calendar", response_model=list[CalendarEvent])
async def booking_calendar(
    service: BookingServiceDep,
    current_user: CurrentUser,
    start: date | None = None,
    end: date | None = None,
) -> list[CalendarEvent]:
    """One-hour events coloured by booking status."""
    return await service.calendar(start, end)


@router.get("/admin/today", response_model=list[BookingRead])
async def todays_bookings(service: BookingServiceDep, current_user: CurrentUser) -> list[Booking]:
    """Today's bookings that are not cancelled, earliest first."""
    return await service.list_today()


@router.get("/admin/{booking_id}", response_model=BookingRead)
async def get_booking(
    booking_id: UUID, service: BookingServiceDep, current_user: CurrentUser
) -> Booking:
    return await _get_or_404(service, booking_id)


@router.patch("/admin/{booking_id}", response_model=DataResponse[BookingRead])
async def update_booking(
    booking_id: UUID,
    data: BookingUpdate,
    service: BookingServiceDep,
    current_user: CurrentUser,
) -> DataResponse[BookingRead]:
    booking = await _get_or_404(service, booking_id)
    booking = await service.update(booking, data)
    return DataResponse[BookingRead](data=BookingRead.model_validate(booking))


@router.delete("/admin/{booking_id}", response_model=MessageResponse)
async def delete_booking(
    booking_id: UUID, service: BookingServiceDep, current_user: AdminUser
) -> MessageResponse:
    booking = await _get_or_404(service, booking_id)
    await service.delete(booking)
    return MessageResponse(message="Booking deleted successfully")
