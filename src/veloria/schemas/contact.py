from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from src.veloria.models.enums import ContactStatus
from src.veloria.schemas.base import CamelModel


class ContactCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=50)
    subject: str | None = Field(default=None, max_length=300)
    message: str = Field(min_length=1, max_length=5000)


class ContactUpdate(CamelModel):
    status: ContactStatus | None = None
    notes: str | None = None


class ContactRead(CamelModel):
    id: UUID
    name: str
    email: str
    phone: str | None
    subject: str | None
    message: str
    notes: str | None
    status: ContactStatus
    created_at: datetime
