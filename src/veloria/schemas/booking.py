import datetime as dt
from uuid import UUID

from pydantic import EmailStr, Field

from src.veloria.models.enums import BookingStatus, CallType
from src.veloria.schemas.base import CamelModel

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class BookingCreate(CamelModel):
    """Discovery call request from the public booking page."""

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=200)
    date: dt.date
    time: str = Field(pattern=TIME_PATTERN)
    timezone: str = Field(min_length=1, max_length=64)
    call_type: CallType
    project_type: str = Field(min_length=1, max_length=100)
    additional_info: str | None = None


class BookingUpdate(CamelModel):
    status: BookingStatus | None = None
    notes: str | None = None
    meeting_link: str | None = Field(default=None, max_length=500)


class BookingCancel(CamelModel):
    email: EmailStr


class BookingRead(CamelModel):
    id: UUID
    name: str
    email: str
    phone: str | None
    company: str | None
    date: dt.date
    time: str
    timezone: str
    call_type: CallType
    project_type: str
    additional_info: str | None
    status: BookingStatus
    meeting_link: str | None
    notes: str | None
    created_at: dt.datetime


class MeetingDetails(CamelModel):
    link: str | None = None
    phone: str | None = None
    datetime: str


class BookingSummary(CamelModel):
    id: UUID
    date: str
    time: str
    call_type: CallType
    meeting_details: MeetingDetails


class BookingConfirmation(CamelModel):
    success: bool = True
    message: str = "Your discovery call has been scheduled!"
    booking: BookingSummary
