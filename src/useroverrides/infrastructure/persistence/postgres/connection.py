"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from useroverrides.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Create the async connection pool described by settings.

    Pool is created with open=False. Caller must call await pool.open()
    before use (e.g. via PoolLifespanMiddleware in ASGI lifespan).
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        name="useroverrides",
        open=False,
    )
