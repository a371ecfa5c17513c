"""ASGI lifespan hooks for the permission store pool."""

import logging

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the pool on ASGI startup and closes it on shutdown.

    Startup does not wait for the database; checks made while it is down
    fail with StoreUnavailable and /v1/health/ready reports 503.
    """

    def __init__(self, pool: AsyncConnectionPool, wait: bool = False) -> None:
        self._pool = pool
        self._wait = wait

    async def process_startup(self, scope, event) -> None:
        await self._pool.open(wait=self._wait)
        logger.info("Permission store pool opened (max_size=%s)", self._pool.max_size)

    async def process_shutdown(self, scope, event) -> None:
        await self._pool.close()
        logger.info("Permission store pool closed")
