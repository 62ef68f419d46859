"""Repository protocols for the clusters feature."""

from .query_executor import QueryExecutor

__all__ = ["QueryExecutor"]
