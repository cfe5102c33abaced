from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.veloria.core.logging import get_logger
from src.veloria.models import Contact
from src.veloria.repositories import ContactRepository
from src.veloria.schemas.contact import ContactCreate, ContactUpdate

logger = get_logger(__name__)


class ContactService:
    def __init__(self, contact_repo: ContactRepository, session: AsyncSession):
        self.contact_repo = contact_repo
        self.session = session

    async def _commit(self, contact: Contact | None = None) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        if contact is not None:
            await self.session.refresh(contact)

    async def create(self, data: ContactCreate) -> Contact:
        contact = Contact(**data.model_dump())
        self.contact_repo.add(contact)
        await self._commit(contact)
        logger.info("Contact message received", contact_id=str(contact.id))
        return contact

    async def get(self, contact_id: UUID) -> Contact | None:
        return await self.contact_repo.get_by_id(contact_id)

    async def list_contacts(self) -> list[Contact]:
        return await self.contact_repo.list_newest()

    async def update(self, contact: Contact, data: ContactUpdate) -> Contact:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "status" in changes:
            changes["status"] = changes["status"].value
        for field, value in changes.items():
            setattr(contact, field, value)
        await self._commit(contact)
        return contact

    async def delete(self, contact: Contact) -> None:
        await self.contact_repo.delete(contact)
        await self._commit()
