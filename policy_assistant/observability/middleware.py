"""
Request observability middleware.

CorrelationMiddleware tags each request with an X-Correlation-ID (taken from
the client or generated) that every log line of the request carries.
RequestLoggingMiddleware writes one line per request with status and timing;
uploads also report their declared body size.

Dependencies: starlette
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from policy_assistant.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one completion line per request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        context = {
            "method": request.method,
            "path": request.url.path,
            "content_length": request.headers.get("content-length"),
        }

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{request.method} {request.url.path} failed",
                extra={**context, "process_time_ms": _elapsed_ms(start), "error_type": type(e).__name__},
            )
            raise

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={**context, "status_code": response.status_code, "process_time_ms": _elapsed_ms(start)},
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID to the request context and echo it back."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
