"""Script to set up the PostgreSQL schema read by the SEO cluster service."""

import asyncio

from seo_graph.db.postgres.connection import close_db_pool, get_db_pool
from seo_graph.db.postgres.schema import SCHEMA_STATEMENTS


async def setup_schema() -> None:
    """Create the SEO tables and indexes if they don't exist."""
    pool = await get_db_pool()
    async with pool.acquire() as connection:
        for statement in SCHEMA_STATEMENTS:
            await connection.execute(statement)
    print(f"Applied {len(SCHEMA_STATEMENTS)} schema statements.")


async def main() -> None:
    try:
        await setup_schema()
    finally:
        await close_db_pool()


if __name__ == "__main__":
    asyncio.run(main())
