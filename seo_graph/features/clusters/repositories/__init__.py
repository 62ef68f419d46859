"""Cluster repositories package."""

from .asyncpg_executor import AsyncpgQueryExecutor
from .protocols import QueryExecutor

__all__ = [
    # Implementation
    "AsyncpgQueryExecutor",
    # Protocol
    "QueryExecutor",
]
