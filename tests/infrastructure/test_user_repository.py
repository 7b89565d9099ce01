"""SQL User Repository — CRUD against an in-memory SQLite database.

Tests cover:
    - Round-trip: add then find returns an equal record
    - Update replaces fields of one row only
    - Delete finality: find after remove returns a zero-valued record, not an error
    - Row-count invariant: duplicate add, update/remove of a missing user raise
      RowCountError and leave the table unchanged
    - ensure_schema is idempotent; list_all on an empty table is []
"""

import pytest

from userapp.core.errors import RowCountError
from userapp.infrastructure.user_repository import SqlUserRepository
from userapp.schemas.user import UserRecord


async def test_list_all_on_empty_table_returns_empty_list(repository):
    assert await repository.list_all() == []


async def test_add_then_find_round_trips(repository, lou):
    await repository.add(lou)

    found = await repository.find("test")

    assert found == lou


async def test_list_all_returns_every_user(seeded_repository, lou):
    other = UserRecord(username="other", first_name="ann")
    await seeded_repository.add(other)

    users = await seeded_repository.list_all()

    assert sorted(u.username for u in users) == ["other", "test"]
    assert lou in users


async def test_find_missing_user_returns_zero_valued_record(repository):
    found = await repository.find("nobody")
    assert found == UserRecord()
    assert found.is_empty


async def test_update_replaces_fields(seeded_repository, lou):
    changed = lou.model_copy(update={"last_name": "updateski", "email": ""})

    await seeded_repository.update(changed)

    found = await seeded_repository.find("test")
    assert found.last_name == "updateski"
    assert found.email == ""
    assert found.first_name == "lou"


async def test_update_leaves_other_rows_untouched(seeded_repository, lou):
    other = UserRecord(username="other", password="x", first_name="ann")
    await seeded_repository.add(other)

    await seeded_repository.update(lou.model_copy(update={"password": "new"}))

    assert await seeded_repository.find("other") == other


async def test_remove_then_find_returns_zero_valued_record(seeded_repository):
    await seeded_repository.remove("test")

    assert await seeded_repository.find("test") == UserRecord()


async def test_duplicate_add_raises_and_keeps_original(seeded_repository, lou):
    duplicate = lou.model_copy(update={"password": "other"})

    with pytest.raises(RowCountError) as exc_info:
        await seeded_repository.add(duplicate)

    assert exc_info.value.message == "user not inserted"
    assert await seeded_repository.list_all() == [lou]


async def test_update_missing_user_raises(seeded_repository, lou):
    with pytest.raises(RowCountError) as exc_info:
        await seeded_repository.update(UserRecord(username="ghost", password="x"))

    assert exc_info.value.message == "user not updated"
    assert exc_info.value.rows_affected == 0
    assert await seeded_repository.list_all() == [lou]


async def test_remove_missing_user_raises(seeded_repository, lou):
    with pytest.raises(RowCountError) as exc_info:
        await seeded_repository.remove("ghost")

    assert exc_info.value.message == "wrong number of rows affected"
    assert await seeded_repository.list_all() == [lou]


async def test_second_remove_of_same_user_raises(seeded_repository):
    await seeded_repository.remove("test")

    with pytest.raises(RowCountError):
        await seeded_repository.remove("test")


async def test_ensure_schema_is_idempotent(db_manager, lou):
    repository = SqlUserRepository(db_manager)
    await repository.add(lou)

    await repository.ensure_schema()
    await repository.ensure_schema()

    assert await repository.schema_exists()
    assert await repository.find("test") == lou


async def test_schema_exists_is_false_before_ensure_schema():
    from sqlalchemy.pool import StaticPool
    from userapp.infrastructure.database import DatabaseSessionManager

    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    repository = SqlUserRepository(manager)
    try:
        assert not await repository.schema_exists()
        await repository.ensure_schema()
        assert await repository.schema_exists()
    finally:
        await manager.dispose()
