"""Observability infrastructure: structured logging and request context.

Usage:
    from ballot_workflow.infrastructure.observability import (
        bind_request_context,
        configure_structlog,
    )

    # At startup
    configure_structlog(environment="production")

    # In request handling
    bind_request_context(correlation_id, caller_id=voter_id)
"""

from ballot_workflow.infrastructure.observability.logging import (
    bind_request_context,
    clear_request_context,
    configure_structlog,
    generate_correlation_id,
    get_correlation_id,
    get_logger_for_service,
)

__all__: list[str] = [
    "bind_request_context",
    "clear_request_context",
    "configure_structlog",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
]
