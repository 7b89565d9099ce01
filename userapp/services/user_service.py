"""User Service — the seam between HTTP dispatch and storage.

Invariants:
    - Every method delegates to the repository contract unchanged
    - The dispatcher reaches storage only through this class
"""

from userapp.core.domain_types import Username
from userapp.core.repository_protocols import UserRepository
from userapp.schemas.user import UserRecord


class UserService:
    """Pass-through facade over a UserRepository."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def list_users(self) -> list[UserRecord]:
        return await self._repository.list_all()

    async def find_user(self, username: Username) -> UserRecord:
        return await self._repository.find(username)

    async def add_user(self, user: UserRecord) -> None:
        await self._repository.add(user)

    async def update_user(self, user: UserRecord) -> None:
        await self._repository.update(user)

    async def remove_user(self, username: Username) -> None:
        await self._repository.remove(username)
