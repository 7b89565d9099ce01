"""Boundary Protocols — contracts between the service layer and storage.

Invariants:
    - Services and the dispatcher depend on UserRepository, never on a concrete class
    - find() never signals absence: a missing username yields a zero-valued record
    - add/update/remove raise RowCountError unless exactly one row is affected

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests pass an in-memory fake
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from userapp.core.domain_types import Username
from userapp.schemas.user import UserRecord


class UserRepository(Protocol):
    """Contract for User persistence — implemented by infrastructure/."""
    async def list_all(self) -> list[UserRecord]: ...
    async def find(self, username: Username) -> UserRecord: ...
    async def add(self, user: UserRecord) -> None: ...
    async def update(self, user: UserRecord) -> None: ...
    async def remove(self, username: Username) -> None: ...
