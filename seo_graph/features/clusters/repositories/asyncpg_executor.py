"""asyncpg implementation of the query executor protocol."""

from collections.abc import Mapping
from typing import Any, cast

from typing_extensions import override

import asyncpg

from seo_graph.features.clusters.repositories.protocols import QueryExecutor


class AsyncpgQueryExecutor(QueryExecutor):
    """Runs read queries on a pooled PostgreSQL connection."""

    pool: asyncpg.Pool

    def __init__(self, pool: asyncpg.Pool):
        """Initialize the executor with a database connection pool."""
        self.pool = pool

    @override
    async def fetch(self, query: str, *args: Any) -> list[Mapping[str, Any]]:
        async with self.pool.acquire() as conn:
            conn = cast(asyncpg.Connection, conn)
            records = await conn.fetch(query, *args)

        return [dict(record) for record in records]
