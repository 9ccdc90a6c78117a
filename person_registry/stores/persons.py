"""Person store: data access for the person table.

No business logic here - existence rules belong in services.
"""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from person_registry.models import Person


class PersonStore:
    """Repository over the person table, bound to one session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, person_id: str) -> bool:
        result = await self.session.execute(select(Person.id).where(Person.id == person_id))
        return result.scalar_one_or_none() is not None

    async def get(self, person_id: str) -> Person | None:
        """Get a person by id, or None if no such record."""
        return await self.session.get(Person, person_id)

    async def get_all(self) -> Sequence[Person]:
        result = await self.session.scalars(select(Person).order_by(Person.id))
        return result.all()

    async def put(self, person: Person) -> Person:
        """Insert or fully overwrite the record with the same id.

        Every column must be set on `person`; merge only copies loaded attributes.
        """
        merged = await self.session.merge(person)
        await self.session.flush()
        return merged

    async def delete_by_id(self, person_id: str) -> None:
        """Delete a person if present; missing ids are ignored."""
        person = await self.session.get(Person, person_id)
        if person is None:
            return
        await self.session.delete(person)
        await self.session.flush()
