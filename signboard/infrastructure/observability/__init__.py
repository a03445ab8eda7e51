"""Observability infrastructure: structured logging.

Usage:
    from signboard.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

from signboard.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_service",
]
