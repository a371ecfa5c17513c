"""User permission override repository port."""

from typing import Protocol
from uuid import UUID

from crowdhub.domain.entities import UserPermissionOverride


class UserPermissionRepository(Protocol):
    """Port for user-level permission overrides."""

    async def get(self, user_id: str, permission_id: UUID) -> UserPermissionOverride | None: ...

    async def list_by_user(self, user_id: str) -> list[UserPermissionOverride]: ...

    async def upsert(self, override: UserPermissionOverride) -> UserPermissionOverride: ...

    async def delete(self, user_id: str, permission_id: UUID) -> None: ...
