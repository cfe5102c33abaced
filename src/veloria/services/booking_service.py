"""Discovery call bookings."""

from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.veloria.core.config import get_settings
from src.veloria.core.logging import get_logger
from src.veloria.models import Booking, BookingStatus, CallType
from src.veloria.repositories import BookingRepository
from src.veloria.schemas.booking import (
    BookingCreate,
    BookingSummary,
    BookingUpdate,
    MeetingDetails,
)
from src.veloria.schemas.project import CalendarEvent
from src.veloria.services.calendar_service import booking_event

logger = get_logger(__name__)


class BookingNotOwnedError(Exception):
    """The email given for a cancellation does not match the booking."""


def meeting_details(booking: Booking) -> MeetingDetails:
    settings = get_settings()
    video = booking.call_type == CallType.VIDEO
    return MeetingDetails(
        link=(booking.meeting_link or settings.meeting_video_link) if video else None,
        phone=None if video else settings.meeting_phone_number,
        datetime=f"{booking.date.strftime('%a %b %d %Y')} at {booking.time} ({booking.timezone})",
    )


def booking_summary(booking: Booking) -> BookingSummary:
    return BookingSummary(
        id=booking.id,
        date=booking.date.strftime("%a %b %d %Y"),
        time=booking.time,
        call_type=CallType(booking.call_type),
        meeting_details=meeting_details(booking),
    )


class BookingService:
    def __init__(self, booking_repo: BookingRepository, session: AsyncSession):
        self.booking_repo = booking_repo
        self.session = session

    async def _commit(self, booking: Booking | None = None) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        if booking is not None:
            await self.session.refresh(booking)

    async def create(self, data: BookingCreate) -> Booking:
        booking = Booking(**data.model_dump())
        booking.call_type = data.call_type.value
        self.booking_repo.add(booking)
        await self._commit(booking)
        logger.info("Discovery call booked", booking_id=str(booking.id), date=str(booking.date))
        return booking

    async def get(self, booking_id: UUID) -> Booking | None:
        return await self.booking_repo.get_by_id(booking_id)

    async def list_bookings(self) -> list[Booking]:
        return await self.booking_repo.list_by_date()

    async def list_today(self, today: date | None = None) -> list[Booking]:
        return await self.booking_repo.list_active_on(today or date.today())

    async def calendar(self, start: date | None, end: date | None) -> list[CalendarEvent]:
        return [booking_event(b) for b in await self.booking_repo.list_between(start, end)]

    async def update(self, booking: Booking, data: BookingUpdate) -> Booking:
        """Apply status, notes and meeting link; null values are ignored."""
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "status" in changes:
            changes["status"] = changes["status"].value
        for field, value in changes.items():
            setattr(booking, field, value)
        await self._commit(booking)
        return booking

    async def cancel(self, booking: Booking, email: str) -> Booking:
        """Cancel on behalf of the visitor who made the booking.

        Raises:
            BookingNotOwnedError: if ``email`` is not the booking's email.
        """
        if booking.email.lower() != email.lower():
            logger.warning("Cancellation email mismatch", booking_id=str(booking.id))
            raise BookingNotOwnedError("Not authorized to cancel this booking")

        booking.status = BookingStatus.CANCELLED.value
        await self._commit(booking)
        logger.info("Booking cancelled", booking_id=str(booking.id))
        return booking

    async def delete(self, booking: Booking) -> None:
        await self.booking_repo.delete(booking)
        await self._commit()
