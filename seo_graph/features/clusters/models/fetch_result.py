"""Typed outcome of a cluster data read."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Shown to API clients in place of the store error, which is only logged.
PUBLIC_FETCH_ERROR = "the SEO data store is unavailable"


class FetchStatus(enum.Enum):
    """Whether a read produced data, produced nothing, or failed."""

    LOADED = "loaded"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class FetchResult(Generic[T]):
    """Value of a read together with how it was obtained.

    ``value`` is always usable: a failed read carries the same empty or
    all-zero default an empty read would, so callers that only render can
    ignore ``status``. Callers that must tell "no data" from "fetch failed"
    check ``status`` instead of inspecting the value.

    ``error`` holds the underlying exception message for logs and tests;
    responses use ``public_error``.
    """

    status: FetchStatus
    value: T
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.status is FetchStatus.FAILED

    @property
    def public_error(self) -> str | None:
        return PUBLIC_FETCH_ERROR if self.failed else None

    @classmethod
    def loaded(cls, value: T, is_empty: bool = False) -> FetchResult[T]:
        return cls(FetchStatus.EMPTY if is_empty else FetchStatus.LOADED, value)

    @classmethod
    def failure(cls, default: T, error: BaseException) -> FetchResult[T]:
        return cls(FetchStatus.FAILED, default, str(error) or type(error).__name__)
