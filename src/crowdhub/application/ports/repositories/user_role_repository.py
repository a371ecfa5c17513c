"""User-role assignment repository port."""

from typing import Protocol
from uuid import UUID

from crowdhub.domain.entities import UserRole


class UserRoleRepository(Protocol):
    """Port for user-role assignments."""

    async def get(self, user_id: str, role_id: UUID) -> UserRole | None: ...

    async def create(self, user_role: UserRole) -> UserRole: ...

    async def delete(self, user_id: str, role_id: UUID) -> None: ...
