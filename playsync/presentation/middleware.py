"""HTTP middleware."""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log slow and failed requests and tag every response with a request ID."""
    start_time = time.perf_counter()
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex

    try:
        response = await call_next(request)
    except Exception:
        logger.exception(
            "[%s] %s %s - unhandled error", request_id, request.method, request.url.path
        )
        raise

    process_time = time.perf_counter() - start_time
    if process_time > SLOW_REQUEST_SECONDS or response.status_code >= 400:
        logger.info(
            "[%s] %s %s - %d - %.2fs",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )
    response.headers["X-Request-ID"] = request_id
    return response
