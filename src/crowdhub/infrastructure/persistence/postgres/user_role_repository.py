"""PostgreSQL user-role assignment repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from crowdhub.domain.entities import UserRole


class PostgresUserRoleRepository:
    """User-role assignment repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, user_id: str, role_id: UUID) -> UserRole | None:
        """Get single assignment."""
        cur = await self._conn.execute(
            "SELECT user_id, role_id, created_at FROM rbac_user_roles "
            "WHERE user_id = %s AND role_id = %s",
            (user_id, role_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return UserRole(user_id=r[0], role_id=r[1], created_at=r[2])

    async def create(self, user_role: UserRole) -> UserRole:
        """Create assignment."""
        await self._conn.execute(
            "INSERT INTO rbac_user_roles (user_id, role_id, created_at) VALUES (%s, %s, %s) "
            "ON CONFLICT (user_id, role_id) DO NOTHING",
            (user_role.user_id, user_role.role_id, user_role.created_at),
        )
        return user_role

    async def delete(self, user_id: str, role_id: UUID) -> None:
        """Delete assignment."""
        await self._conn.execute(
            "DELETE FROM rbac_user_roles WHERE user_id = %s AND role_id = %s",
            (user_id, role_id),
        )
