"""Application middleware."""

from __future__ import annotations

import contextvars
import logging
import uuid
from collections.abc import Awaitable, Callable
from time import perf_counter

from fastapi import Request, Response

logger = logging.getLogger(__name__)

request_id_var: contextvars.ContextVar[uuid.UUID | None] = contextvars.ContextVar(
    "request_id", default=None
)


def get_request_id() -> uuid.UUID | None:
    return request_id_var.get()


async def request_context_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Attach a request_id to the context and log the request's duration.

    Also adds `X-Request-Id` to the response.
    """
    request_id = uuid.uuid4()
    token = request_id_var.set(request_id)
    started_at = perf_counter()

    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        response.headers["X-Request-Id"] = str(request_id)
        return response
    finally:
        duration_ms = (perf_counter() - started_at) * 1000.0
        logger.info(
            "%s %s -> %d (%.1f ms) [%s]",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
            request_id,
        )
        request_id_var.reset(token)
