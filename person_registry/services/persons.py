"""Person service.

Orchestrates PersonStore calls and converts between the form/view schemas
and the ORM model.

Rules:
- create is an upsert: saving an existing id overwrites it
- remove checks existence first and reports whether anything was deleted
- modify requires the record to exist and copies name and age unconditionally
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import logging

from person_registry.models import Person
from person_registry.schemas import PersonIn, PersonOut
from person_registry.stores.database import Database
from person_registry.stores.persons import PersonStore

logger = logging.getLogger("uvicorn.error")

# Sample record written by GET /test
TEST_PERSON = PersonIn(id="abcde", name="김길동", age=30)


class PersonNotFoundError(LookupError):
    """Raised when updating a person whose id does not exist."""

    def __init__(self, person_id: str) -> None:
        super().__init__(f"Person {person_id} not found")
        self.person_id = person_id


def _to_out(person: Person) -> PersonOut:
    return PersonOut.model_validate(person)


class PersonService:
    """CRUD operations over person records."""

    def __init__(self, store: PersonStore) -> None:
        self.store = store

    async def create(self, person_in: PersonIn) -> PersonOut:
        """Save a person, overwriting any record with the same id."""
        person = Person(id=person_in.id, name=person_in.name, age=person_in.age)
        saved = await self.store.put(person)
        logger.info(f"[persons] saved id={saved.id}")
        return _to_out(saved)

    async def seed_test_record(self) -> PersonOut:
        return await self.create(TEST_PERSON)

    async def fetch(self, person_id: str) -> PersonOut | None:
        """Get a person by id.

        Returns:
            The person, or None if no record has this id.
        """
        person = await self.store.get(person_id)
        if person is None:
            return None
        return _to_out(person)

    async def remove(self, person_id: str) -> bool:
        """Delete a person if it exists.

        Returns:
            True if a record was deleted, False if the id was unknown.
        """
        if not await self.store.exists(person_id):
            return False
        await self.store.delete_by_id(person_id)
        logger.info(f"[persons] deleted id={person_id}")
        return True

    async def list_all(self) -> list[PersonOut]:
        return [_to_out(person) for person in await self.store.get_all()]

    async def modify(self, person_in: PersonIn) -> PersonOut:
        """Overwrite name and age of an existing person.

        Raises:
            PersonNotFoundError: If no record has this id.
        """
        person = await self.store.get(person_in.id)
        if person is None:
            raise PersonNotFoundError(person_in.id)

        # A blank age clears the stored one.
        person.name = person_in.name
        person.age = person_in.age
        saved = await self.store.put(person)
        logger.info(f"[persons] updated id={saved.id}")
        return _to_out(saved)


@asynccontextmanager
async def person_service(database: Database) -> AsyncGenerator[PersonService, None]:
    """Service bound to a fresh session; commits when the block exits cleanly.

    Usage:
        async with person_service(database) as service:
            await service.create(person_in)
    """
    async with database.session() as session:
        yield PersonService(PersonStore(session))
