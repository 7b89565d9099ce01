"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Tests never touch a real database server: DATABASE_URL points at SQLite
    - Every db_manager fixture is a fresh in-memory database with the users table
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from sqlalchemy.pool import StaticPool

from userapp.core.errors import RowCountError
from userapp.infrastructure.database import DatabaseSessionManager
from userapp.infrastructure.user_repository import SqlUserRepository
from userapp.schemas.user import UserRecord
from userapp.services.user_service import UserService


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
async def repository(db_manager):
    return SqlUserRepository(db_manager)


@pytest.fixture
def lou():
    return UserRecord(
        username="test", password="pwd", first_name="lou",
        last_name="garwood", email="louis@mail.com",
    )


@pytest.fixture
async def seeded_repository(repository, lou):
    await repository.add(lou)
    return repository


# ─── In-memory repository ───────────────────────────────────────
# Honours the SqlUserRepository contract: zero-valued find on a miss,
# RowCountError unless exactly one row changes. Calls recorded in .calls.

class FakeUserRepository:
    """Dict-backed UserRepository for tests without a database."""

    def __init__(self, users: list[UserRecord] | None = None):
        self.rows: dict[str, UserRecord] = {u.username: u for u in users or []}
        self.calls: list[tuple[str, object]] = []

    async def list_all(self) -> list[UserRecord]:
        self.calls.append(("list_all", None))
        return list(self.rows.values())

    async def find(self, username: str) -> UserRecord:
        self.calls.append(("find", username))
        return self.rows.get(username, UserRecord())

    async def add(self, user: UserRecord) -> None:
        self.calls.append(("add", user))
        if user.username in self.rows:
            raise RowCountError("user not inserted", 0)
        self.rows[user.username] = user

    async def update(self, user: UserRecord) -> None:
        self.calls.append(("update", user))
        if user.username not in self.rows:
            raise RowCountError("user not updated", 0)
        self.rows[user.username] = user

    async def remove(self, username: str) -> None:
        self.calls.append(("remove", username))
        if username not in self.rows:
            raise RowCountError("wrong number of rows affected", 0)
        del self.rows[username]


@pytest.fixture
def fake_repository(lou):
    return FakeUserRepository([lou])


@pytest.fixture
def service(fake_repository):
    return UserService(fake_repository)
