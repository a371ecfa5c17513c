"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool, PoolTimeout

from crowdhub.domain.exceptions import StoreUnavailable
from crowdhub.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from crowdhub.infrastructure.persistence.postgres.profile_repository import (
    PostgresProfileRepository,
)
from crowdhub.infrastructure.persistence.postgres.role_permission_repository import (
    PostgresRolePermissionRepository,
)
from crowdhub.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from crowdhub.infrastructure.persistence.postgres.user_permission_repository import (
    PostgresUserPermissionRepository,
)
from crowdhub.infrastructure.persistence.postgres.user_role_repository import (
    PostgresUserRoleRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: psycopg.AsyncConnection | None = None
        self._conn_cm = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._profiles = PostgresProfileRepository(self._conn)
        self._permissions = PostgresPermissionRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._user_roles = PostgresUserRoleRepository(self._conn)
        self._role_permissions = PostgresRolePermissionRepository(self._conn)
        self._user_permissions = PostgresUserPermissionRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def profiles(self) -> PostgresProfileRepository:
        return self._profiles

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def user_roles(self) -> PostgresUserRoleRepository:
        return self._user_roles

    @property
    def role_permissions(self) -> PostgresRolePermissionRepository:
        return self._role_permissions

    @property
    def user_permissions(self) -> PostgresUserPermissionRepository:
        return self._user_permissions

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Connectivity failures surface as StoreUnavailable so callers never
    mistake an outage for a deny.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with PostgresUnitOfWork(pool) as uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except (PoolTimeout, psycopg.OperationalError) as e:
            logger.warning("Permission store unavailable: %s", e)
            raise StoreUnavailable(f"Permission store unavailable: {e}") from e

    return factory
