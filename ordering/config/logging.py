"""Structured Logging Configuration.

- JSON format for production (easy parsing by log aggregators)
- Human-readable format for development
- Request correlation IDs

Usage:
    from ordering.config.logging import setup_logging, get_logger

    setup_logging()  # Call once at startup
    logger = get_logger(__name__)
    logger.info("purchase_order.approved", order_id=21)
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.typing import EventDict

from ordering.config.settings import get_settings

SERVICE_NAME = "ordering-api"
SERVICE_VERSION = "1.0.0"


# ============================================================================
# CUSTOM PROCESSORS
# ============================================================================


def add_timestamp(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add ISO format timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add service context to log events."""
    event_dict["service"] = SERVICE_NAME
    event_dict["environment"] = get_settings().environment
    event_dict["version"] = SERVICE_VERSION
    return event_dict


# ============================================================================
# LOGGING SETUP
# ============================================================================


def setup_logging() -> None:
    """Configure structured logging for the application.

    Call this once at application startup (in main.py).

    Configuration based on settings.log_format:
    - console: Console output with colors
    - json: JSON output for log aggregation
    """
    settings = get_settings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_timestamp,
        add_service_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    # Rendering happens once, in the handler's formatter, for both structlog
    # and stdlib records.
    if settings.log_format == "json":
        renderers: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=True)]

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *renderers,
        ],
        # stdlib loggers pass their fields via extra={...}
        foreign_pre_chain=shared_processors + [structlog.stdlib.ExtraAdder()],
    )

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, settings.log_level))

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured structlog logger.
    """
    return structlog.get_logger(name)


# ============================================================================
# REQUEST CONTEXT (for correlation IDs)
# ============================================================================


def bind_request_context(request_id: str, **extra: Any) -> None:
    """Bind request context to all subsequent log calls.

    Call this at the start of request handling (middleware).

    Args:
        request_id: Unique request/correlation ID.
        **extra: Additional context to bind.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **extra)


def clear_request_context() -> None:
    """Clear request context (call at end of request)."""
    structlog.contextvars.clear_contextvars()
