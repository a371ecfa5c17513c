"""Permission repository port."""

from typing import Protocol
from uuid import UUID

from crowdhub.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for permission reference data."""

    async def get_by_id(self, permission_id: UUID) -> Permission | None: ...

    async def get_by_resource_action(self, resource: str, action: str) -> Permission | None: ...

    async def list_all(self) -> list[Permission]: ...
