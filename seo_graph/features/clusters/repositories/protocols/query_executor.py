"""Protocol definition for executing read queries against the SEO store."""

from collections.abc import Mapping
from typing import Any, Protocol


class QueryExecutor(Protocol):
    """Protocol for a read-only SQL executor.

    Implementations run a statement with bound ``$n`` parameters and return
    the resulting rows as mappings from column name to value. Failures are
    raised, never returned as empty results.
    """

    async def fetch(self, query: str, *args: Any) -> list[Mapping[str, Any]]:
        """Run ``query`` with ``args`` bound and return every row."""
        ...
