"""PostgreSQL permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from crowdhub.domain.entities import Permission


def _row_to_permission(r: tuple) -> Permission:
    return Permission(id=r[0], resource=r[1], action=r[2], description=r[3])


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        """Get permission by id."""
        cur = await self._conn.execute(
            "SELECT id, resource, action, description FROM rbac_permissions WHERE id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def get_by_resource_action(self, resource: str, action: str) -> Permission | None:
        """Get permission by exact (resource, action)."""
        cur = await self._conn.execute(
            "SELECT id, resource, action, description FROM rbac_permissions "
            "WHERE resource = %s AND action = %s",
            (resource, action),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def list_all(self) -> list[Permission]:
        """List all permissions ordered by resource and action."""
        cur = await self._conn.execute(
            "SELECT id, resource, action, description FROM rbac_permissions "
            "ORDER BY resource, action"
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]
