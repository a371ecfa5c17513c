"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection

from crowdhub.domain.entities import Role


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(
            "SELECT id, name, description FROM rbac_roles WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Role(id=r[0], name=r[1], description=r[2])

    async def list_for_user(self, user_id: str) -> list[Role]:
        """List roles held by user."""
        cur = await self._conn.execute(
            "SELECT r.id, r.name, r.description FROM rbac_roles r "
            "JOIN rbac_user_roles ur ON ur.role_id = r.id "
            "WHERE ur.user_id = %s ORDER BY r.name",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [Role(id=r[0], name=r[1], description=r[2]) for r in rows]
