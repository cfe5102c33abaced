from datetime import date

from sqlmodel import col, select

from src.veloria.models import Booking, BookingStatus
from src.veloria.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    model = Booking

    async def list_by_date(self) -> list[Booking]:
        result = await self.session.execute(
            select(Booking).order_by(col(Booking.date).asc(), col(Booking.time).asc())
        )
        return list(result.scalars().all())

    async def list_between(self, start: date | None, end: date | None) -> list[Booking]:
        """Bookings with start <= date <= end; unbounded when either is None."""
        query = select(Booking)
        if start is not None and end is not None:
            query = query.where(Booking.date >= start, Booking.date <= end)
        result = await self.session.execute(query.order_by(col(Booking.date).asc()))
        return list(result.scalars().all())

    async def list_active_on(self, day: date) -> list[Booking]:
        """Non-cancelled bookings on ``day``, earliest first."""
        result = await self.session.execute(
            select(Booking)
            .where(Booking.date == day, Booking.status != BookingStatus.CANCELLED.value)
            .order_by(col(Booking.time).asc())
        )
        return list(result.scalars().all())
