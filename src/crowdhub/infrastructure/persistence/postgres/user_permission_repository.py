"""PostgreSQL user permission override repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from crowdhub.domain.entities import UserPermissionOverride
from crowdhub.domain.value_objects import PermissionEffect


def _row_to_override(r: tuple) -> UserPermissionOverride:
    return UserPermissionOverride(
        user_id=r[0],
        permission_id=r[1],
        effect=PermissionEffect(r[2]),
        created_at=r[3],
        created_by=r[4],
    )


class PostgresUserPermissionRepository:
    """User permission override repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, user_id: str, permission_id: UUID) -> UserPermissionOverride | None:
        """Get override for user on permission."""
        cur = await self._conn.execute(
            "SELECT user_id, permission_id, effect, created_at, created_by "
            "FROM rbac_user_permissions WHERE user_id = %s AND permission_id = %s",
            (user_id, permission_id),
        )
        r = await cur.fetchone()
        return _row_to_override(r) if r else None

    async def list_by_user(self, user_id: str) -> list[UserPermissionOverride]:
        """List overrides for user."""
        cur = await self._conn.execute(
            "SELECT user_id, permission_id, effect, created_at, created_by "
            "FROM rbac_user_permissions WHERE user_id = %s",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    async def upsert(self, override: UserPermissionOverride) -> UserPermissionOverride:
        """Create override or replace its effect."""
        await self._conn.execute(
            "INSERT INTO rbac_user_permissions "
            "(user_id, permission_id, effect, created_at, created_by) "
            "VALUES (%s, %s, %s, %s, %s) "
            "ON CONFLICT (user_id, permission_id) DO UPDATE "
            "SET effect = EXCLUDED.effect, created_at = EXCLUDED.created_at, "
            "created_by = EXCLUDED.created_by",
            (
                override.user_id,
                override.permission_id,
                override.effect.value,
                override.created_at,
                override.created_by,
            ),
        )
        return override

    async def delete(self, user_id: str, permission_id: UUID) -> None:
        """Delete override."""
        await self._conn.execute(
            "DELETE FROM rbac_user_permissions WHERE user_id = %s AND permission_id = %s",
            (user_id, permission_id),
        )
