"""Role permission rule repository port."""

from typing import Protocol
from uuid import UUID

from crowdhub.domain.entities import RolePermission


class RolePermissionRepository(Protocol):
    """Port for role-level allow/deny rules."""

    async def list_for_roles(
        self, role_ids: list[UUID], permission_id: UUID | None = None
    ) -> list[RolePermission]: ...
