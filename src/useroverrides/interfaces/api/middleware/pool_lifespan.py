"""Pool lifespan middleware - opens pool and loads the cache on startup."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from useroverrides.application.override_store import OverrideStore

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the connection pool and loads overrides on startup, closes the pool on shutdown."""

    def __init__(self, pool: AsyncConnectionPool, store: OverrideStore) -> None:
        self._pool = pool
        self._store = store

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool and load the override cache when ASGI server starts."""
        await self._pool.open()
        await self._store.load()

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        await self._pool.close()
        logger.info("Connection pool closed")
