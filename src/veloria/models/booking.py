"""Discovery call bookings."""

import datetime as dt
from uuid import UUID, uuid4

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from src.veloria.models.base import utc_now
from src.veloria.models.enums import BookingStatus


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    email: str = Field(max_length=255, index=True)
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=200)
    date: dt.date = Field(index=True)
    time: str = Field(max_length=5)  # "HH:MM", 24h
    timezone: str = Field(max_length=64)
    call_type: str = Field(max_length=10)
    project_type: str = Field(max_length=100)
    additional_info: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    status: str = Field(default=BookingStatus.SCHEDULED.value, max_length=20)
    meeting_link: str | None = Field(default=None, max_length=500)
    notes: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    created_at: dt.datetime = Field(default_factory=utc_now)
