"""Contact form messages."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from src.veloria.models.base import utc_now
from src.veloria.models.enums import ContactStatus


class Contact(SQLModel, table=True):
    __tablename__ = "contacts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    email: str = Field(max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    subject: str | None = Field(default=None, max_length=300)
    message: str = Field(sa_column=Column(Text, nullable=False))
    notes: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    status: str = Field(default=ContactStatus.NEW.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now, index=True)
