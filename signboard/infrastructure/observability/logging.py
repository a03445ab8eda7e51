"""Structured logging configuration with structlog.

Production output is one JSON object per line; development output is a
coloured console rendering. The level comes from ``LOG_LEVEL``.

Usage:
    from signboard.infrastructure.observability import configure_structlog

    configure_structlog(environment="development")

    log = structlog.get_logger(__name__)
    log.info("announcement_created", announcement_id="42")
"""

import logging
import os

import structlog
from structlog.typing import FilteringBoundLogger, Processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog once at startup.

    Args:
        environment: 'production' for JSON output, anything else for the
            console renderer.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "signage"
) -> FilteringBoundLogger:
    """Get a logger with the service and component already bound.

    Args:
        service_name: Name of the service (typically the class name).
        component: Component type.
    """
    return structlog.get_logger().bind(service=service_name, component=component)
