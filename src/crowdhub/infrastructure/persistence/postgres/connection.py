"""PostgreSQL async connection pool."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool, PoolTimeout

from crowdhub.domain.exceptions import StoreUnavailable


def create_pool(
    conninfo: str,
    min_size: int = 1,
    max_size: int = 10,
    timeout: float = 5.0,
) -> AsyncConnectionPool:
    """Create the permission store pool.

    Created with open=False; PoolLifespanMiddleware opens it on ASGI startup.
    ``timeout`` bounds how long a check waits for a free connection.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        open=False,
    )


@asynccontextmanager
async def get_connection(pool: AsyncConnectionPool) -> AsyncIterator[psycopg.AsyncConnection]:
    """Borrow a connection, raising StoreUnavailable when none can be obtained."""
    try:
        async with pool.connection() as conn:
            yield conn
    except (PoolTimeout, psycopg.OperationalError) as e:
        raise StoreUnavailable(f"Permission store unavailable: {e}") from e


async def ping(pool: AsyncConnectionPool) -> None:
    """Round trip to the database; raises StoreUnavailable on failure."""
    async with get_connection(pool) as conn:
        await conn.execute("SELECT 1")
