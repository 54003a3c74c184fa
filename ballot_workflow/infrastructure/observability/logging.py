"""Structured logging configuration with structlog.

Centralized structlog setup for the voting service, with JSON output
for production and colored console output for development. Request
context (correlation ID and caller identity) lives in structlog's
contextvars and is merged into every entry logged while handling the
request, including entries from the workflow service and the stubs.

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "voting_operation_committed",
        "correlation_id": "uuid",
        "caller_id": "0xabc",
        "operation": "set_vote",
        ...additional context
    }

Usage:
    from ballot_workflow.infrastructure.observability import (
        bind_request_context,
        configure_structlog,
    )

    configure_structlog(environment="production")  # JSON output
    bind_request_context(correlation_id, caller_id="0xabc")
"""

import logging
import os
from uuid import uuid4

import structlog
from structlog.typing import Processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
DEVELOPMENT_ENVIRONMENT = "development"
PRODUCTION_ENVIRONMENT = "production"


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4 string)."""
    return str(uuid4())


def bind_request_context(correlation_id: str, caller_id: str | None = None) -> None:
    """Replace the request context merged into log entries.

    Context left over from a previous request in the same task is
    cleared first. A missing caller_id is not bound.

    Args:
        correlation_id: ID echoed back to the client in X-Correlation-ID.
        caller_id: Identity from the X-Voter-Id header, when sent.
    """
    structlog.contextvars.clear_contextvars()
    context: dict[str, str] = {"correlation_id": correlation_id}
    if caller_id:
        context["caller_id"] = caller_id
    structlog.contextvars.bind_contextvars(**context)


def clear_request_context() -> None:
    """Drop all request context from the current task."""
    structlog.contextvars.clear_contextvars()


def get_correlation_id() -> str:
    """Correlation ID bound for the current request, or "" outside one."""
    return str(structlog.contextvars.get_contextvars().get("correlation_id", ""))


def _get_log_level() -> int:
    """Get the configured log level from the LOG_LEVEL variable.

    Unknown level names fall back to INFO.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(environment: str = PRODUCTION_ENVIRONMENT) -> None:
    """Configure structlog for the voting service.

    Should be called once at application startup. Any environment other
    than "development" renders JSON.

    Args:
        environment: 'production' for JSON output, 'development' for console.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == DEVELOPMENT_ENVIRONMENT:
        final_processor: Processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        final_processor = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger_for_service(
    service_name: str, component: str = "voting"
) -> structlog.BoundLogger:
    """Get a logger with service and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "voting").

    Returns:
        A BoundLogger with service and component bound.
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
