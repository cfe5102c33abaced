from sqlmodel import col, select

from src.veloria.models import Contact
from src.veloria.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    model = Contact

    async def list_newest(self) -> list[Contact]:
        result = await self.session.execute(
            select(Contact).order_by(col(Contact.created_at).desc())
        )
        return list(result.scalars().all())
