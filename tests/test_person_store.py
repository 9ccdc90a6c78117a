"""Tests for the person store against SQLite."""

import pytest

from person_registry.models import Person
from person_registry.stores.database import Database
from person_registry.stores.persons import PersonStore


async def test_put_then_get_and_exists(database: Database) -> None:
    async with database.session() as session:
        store = PersonStore(session)
        await store.put(Person(id="kim01", name="Kim", age=30))

    async with database.session() as session:
        store = PersonStore(session)
        assert await store.exists("kim01")
        person = await store.get("kim01")
        assert person is not None
        assert (person.id, person.name, person.age) == ("kim01", "Kim", 30)


async def test_get_missing_returns_none(database: Database) -> None:
    async with database.session() as session:
        store = PersonStore(session)
        assert await store.get("nobody") is None
        assert not await store.exists("nobody")


async def test_put_overwrites_existing_record(database: Database) -> None:
    async with database.session() as session:
        await PersonStore(session).put(Person(id="kim01", name="Kim", age=30))

    async with database.session() as session:
        await PersonStore(session).put(Person(id="kim01", name="Lee", age=None))

    async with database.session() as session:
        people = await PersonStore(session).get_all()
        assert len(people) == 1
        assert people[0].name == "Lee"
        assert people[0].age is None


async def test_get_all_returns_every_record(database: Database) -> None:
    async with database.session() as session:
        store = PersonStore(session)
        for person_id in ("c", "a", "b"):
            await store.put(Person(id=person_id, name=person_id.upper(), age=None))

    async with database.session() as session:
        people = await PersonStore(session).get_all()
        assert {p.id for p in people} == {"a", "b", "c"}


async def test_delete_by_id_is_idempotent(database: Database) -> None:
    async with database.session() as session:
        await PersonStore(session).put(Person(id="kim01", name="Kim", age=30))

    async with database.session() as session:
        store = PersonStore(session)
        await store.delete_by_id("kim01")
        await store.delete_by_id("kim01")
        await store.delete_by_id("never-existed")
        assert await store.get("kim01") is None

    async with database.session() as session:
        assert await PersonStore(session).get_all() == []


async def test_file_database_rollback_does_not_discard_other_session_writes(tmp_path) -> None:
    """Each session on a file database gets its own connection and transaction."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'persons.db'}")
    await database.create_tables()
    try:
        async with database.session() as writer:
            await PersonStore(writer).put(Person(id="kim01", name="Kim", age=30))

            with pytest.raises(RuntimeError):
                async with database.session() as failing:
                    await PersonStore(failing).get_all()
                    raise RuntimeError("request failed")

        async with database.session() as session:
            person = await PersonStore(session).get("kim01")
            assert person is not None
            assert person.name == "Kim"
    finally:
        await database.dispose()
