"""PostgreSQL profile repository implementation."""

from psycopg import AsyncConnection

from crowdhub.domain.entities import Profile


class PostgresProfileRepository:
    """Profile repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> Profile | None:
        """Get profile by user id."""
        cur = await self._conn.execute(
            "SELECT id, email, full_name, is_active FROM profiles WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Profile(id=r[0], email=r[1], full_name=r[2], is_active=r[3])
