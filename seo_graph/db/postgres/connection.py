"""PostgreSQL connection pool management for the SEO analytics store.

This module provides the asyncpg pool used by the query executor for all
cluster reads.
"""

import asyncpg

from seo_graph.core.settings import get_settings

_pool: asyncpg.Pool | None = None


async def get_db_pool() -> asyncpg.Pool:
    """Get the database connection pool as a dependency."""
    global _pool
    if _pool is None:
        settings = get_settings()
        _pool = await asyncpg.create_pool(
            user=settings.postgres_user,
            password=settings.postgres_password,
            host=settings.postgres_host,
            port=settings.postgres_port,
            database=settings.database_name,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )

    return _pool


async def close_db_pool() -> None:
    """Close the database connection pool."""
    global _pool
    if _pool:
        await _pool.close()
        _pool = None
