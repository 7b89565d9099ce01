"""SQL User Repository — parameterized CRUD statements against the users table.

Invariants:
    - One statement per operation, one session per operation, no cross-statement transaction
    - add/update/remove verify rowcount == 1 before commit; anything else rolls back
      and raises RowCountError (zero rows == "no such user")
    - find() on a missing username returns UserRecord() (all fields ""), never None
    - list_all() on an empty table returns []
    - NULL columns read back as ""

Design Decisions:
    - Core statements on User.__table__ over ORM unit-of-work: rowcount is the
      driver's own count, nothing is flushed implicitly
    - Duplicate usernames surface as RowCountError, same as the other row-count
      failures, instead of the generic integrity DatabaseError
"""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from userapp.core.domain_types import Username
from userapp.core.errors import ErrorContext, RowCountError
from userapp.infrastructure.database import DatabaseSessionManager
from userapp.models.user import User
from userapp.schemas.user import UserRecord

logger = logging.getLogger(__name__)

users_table = User.__table__


def _row_to_record(row) -> UserRecord:
    return UserRecord(
        username=row.username or "",
        password=row.password or "",
        first_name=row.firstname or "",
        last_name=row.lastname or "",
        email=row.email or "",
    )


class SqlUserRepository:
    """UserRepository backed by a relational database."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def ensure_schema(self) -> None:
        """Create the users table if it does not exist. Safe to call repeatedly."""
        await self._db.create_all()
        logger.info("users table ready")

    async def schema_exists(self) -> bool:
        return await self._db.has_table(users_table.name)

    async def list_all(self) -> list[UserRecord]:
        async with self._db.session() as session:
            result = await session.execute(select(users_table))
            return [_row_to_record(row) for row in result]

    async def find(self, username: Username) -> UserRecord:
        """Return the user, or a zero-valued UserRecord if there is none."""
        async with self._db.session() as session:
            result = await session.execute(
                select(users_table).where(users_table.c.username == username),
            )
            row = result.first()
        if row is None:
            return UserRecord()
        return _row_to_record(row)

    async def add(self, user: UserRecord) -> None:
        statement = insert(users_table).values(
            username=user.username,
            password=user.password,
            firstname=user.first_name,
            lastname=user.last_name,
            email=user.email,
        )
        async with self._db.session() as session:
            try:
                result = await session.execute(statement)
            except IntegrityError as e:
                logger.warning(
                    f"Insert rejected for '{user.username}': {e.orig}",
                    extra={"username": user.username},
                )
                raise RowCountError(
                    "user not inserted", 0,
                    ErrorContext(username=user.username),
                )
            _check_single_row(result.rowcount, "user not inserted", user.username)
            await session.commit()
        logger.info("user added", extra={"username": user.username})

    async def update(self, user: UserRecord) -> None:
        """Replace every mutable field of the row keyed by user.username."""
        statement = (
            update(users_table)
            .where(users_table.c.username == user.username)
            .values(
                password=user.password,
                firstname=user.first_name,
                lastname=user.last_name,
                email=user.email,
            )
        )
        async with self._db.session() as session:
            result = await session.execute(statement)
            _check_single_row(result.rowcount, "user not updated", user.username)
            await session.commit()
        logger.info("user updated", extra={"username": user.username})

    async def remove(self, username: Username) -> None:
        statement = delete(users_table).where(users_table.c.username == username)
        async with self._db.session() as session:
            result = await session.execute(statement)
            _check_single_row(
                result.rowcount, "wrong number of rows affected", username,
            )
            await session.commit()
        logger.info("user removed", extra={"username": username})


def _check_single_row(rows_affected: int, message: str, username: str) -> None:
    if rows_affected != 1:
        logger.warning(
            f"{message}: {rows_affected} rows affected",
            extra={"username": username},
        )
        raise RowCountError(message, rows_affected, ErrorContext(username=username))
