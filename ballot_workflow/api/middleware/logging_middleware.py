"""Request logging middleware with correlation ID propagation.

- Reads the correlation ID from the X-Correlation-ID header, or generates one
- Binds it and the X-Voter-Id caller into structlog contextvars, so every
  log entry of the request carries both
- Echoes it in the response headers
- Logs request start and end with timing

Usage:
    from fastapi import FastAPI
    from ballot_workflow.api.middleware.logging_middleware import LoggingMiddleware

    app = FastAPI()
    app.add_middleware(LoggingMiddleware)
"""

import time
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ballot_workflow.infrastructure.observability.logging import (
    bind_request_context,
    generate_correlation_id,
)

CORRELATION_HEADER = "X-Correlation-ID"
VOTER_ID_HEADER = "X-Voter-Id"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID propagation and request logging.

    The caller identity from X-Voter-Id is bound as caller_id when present.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request with correlation ID and logging.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware or route handler.

        Returns:
            HTTP response with correlation ID header added.
        """
        correlation_id = (
            request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        )
        bind_request_context(correlation_id, request.headers.get(VOTER_ID_HEADER))

        log = structlog.get_logger().bind(
            method=request.method,
            path=request.url.path,
        )
        log.info("request_started")

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            log.exception(
                "request_failed",
                duration_ms=round(duration_ms, 2),
                error_type=type(exc).__name__,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
