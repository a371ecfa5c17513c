"""PostgreSQL role permission rule repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from crowdhub.domain.entities import RolePermission
from crowdhub.domain.value_objects import PermissionEffect


class PostgresRolePermissionRepository:
    """Role permission rule repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_roles(
        self, role_ids: list[UUID], permission_id: UUID | None = None
    ) -> list[RolePermission]:
        """List rules for any of the roles, optionally for one permission."""
        if not role_ids:
            return []
        if permission_id is None:
            cur = await self._conn.execute(
                "SELECT role_id, permission_id, effect FROM rbac_role_permissions "
                "WHERE role_id = ANY(%s)",
                (role_ids,),
            )
        else:
            cur = await self._conn.execute(
                "SELECT role_id, permission_id, effect FROM rbac_role_permissions "
                "WHERE role_id = ANY(%s) AND permission_id = %s",
                (role_ids, permission_id),
            )
        rows = await cur.fetchall()
        return [
            RolePermission(role_id=r[0], permission_id=r[1], effect=PermissionEffect(r[2]))
            for r in rows
        ]
