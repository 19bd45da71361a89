"""FastAPI application - Purchase Ordering API.

Process bootstrap:
- Configuration from environment variables
- Structured logging
- EventBus + seeded in-memory repository, created once in lifespan
- Background dispatcher draining the bus to in-process subscribers
"""

import asyncio
import contextlib
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ordering import __version__
from ordering.config import (
    bind_request_context,
    clear_request_context,
    get_logger,
    get_settings,
    setup_logging,
)
from ordering.domain.shared import (
    AggregateNotFound,
    BusinessRuleViolation,
    DomainException,
    InvalidStateTransition,
)
from ordering.domain.purchasing import (
    PurchaseOrderApprovedEvent,
    PurchaseOrderDeclinedEvent,
    PurchaseOrderEvent,
    PurchaseOrderSubmittedEvent,
)
from ordering.infrastructure.messaging import EventBus
from ordering.infrastructure.persistence.memory import create_purchase_order_repository
from ordering.presentation.api import dependencies
from ordering.presentation.api.v1.routes import purchase_orders_router

settings = get_settings()

setup_logging()
logger = get_logger(__name__)


# ============================================================================
# EVENT SUBSCRIBERS
# ============================================================================


async def log_purchase_order_event(event: PurchaseOrderEvent) -> None:
    """Audit trail: кожен committed event потрапляє в structured log."""
    logger.info("purchase_order.event_committed", **event.to_dict())


# ============================================================================
# LIFESPAN EVENTS (startup/shutdown)
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager для FastAPI.

    Startup:
    - Create event bus + seeded repository
    - Initialize dependencies
    - Start event dispatcher

    Shutdown:
    - Stop dispatcher
    - Drop dependencies
    """
    logger.info("application.startup.started")

    event_bus = EventBus()
    for event_type in (
        PurchaseOrderSubmittedEvent,
        PurchaseOrderApprovedEvent,
        PurchaseOrderDeclinedEvent,
    ):
        event_bus.subscribe(event_type, log_purchase_order_event)

    repository = await create_purchase_order_repository(event_bus, settings)
    dependencies.init_dependencies(repository=repository, event_bus=event_bus)

    dispatcher: asyncio.Task | None = None
    if settings.event_dispatch_enabled:
        dispatcher = asyncio.create_task(event_bus.run_dispatcher())

    logger.info("application.startup.completed", seeded_orders=settings.seed_order_count)

    yield  # Application running

    logger.info("application.shutdown.started")

    if dispatcher is not None:
        dispatcher.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await dispatcher

    dependencies.reset_dependencies()

    logger.info("application.shutdown.completed")


# ============================================================================
# CREATE FASTAPI APPLICATION
# ============================================================================


app = FastAPI(
    title=settings.app_name,
    description="""
    Purchase order lifecycle: submit → approve | decline.

    Every state change is recorded as a domain event and published,
    in order, to the event bus when the order is saved.
    """,
    version=__version__,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
    lifespan=lifespan,
)


# ============================================================================
# MIDDLEWARE
# ============================================================================


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to add request correlation ID to all log messages."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        bind_request_context(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_request_context()


app.add_middleware(RequestContextMiddleware)


# ============================================================================
# ERROR HANDLERS
# ============================================================================


def _domain_error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "context": {k: str(v) for k, v in exc.context.items()},
        },
    )


@app.exception_handler(AggregateNotFound)
async def not_found_handler(request: Request, exc: AggregateNotFound) -> JSONResponse:
    logger.info("api.not_found", path=request.url.path, error=str(exc))
    return _domain_error_response(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(BusinessRuleViolation)
async def business_rule_handler(
    request: Request, exc: BusinessRuleViolation
) -> JSONResponse:
    logger.warning("api.business_rule_violation", path=request.url.path, error=str(exc))
    return _domain_error_response(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(InvalidStateTransition)
async def state_transition_handler(
    request: Request, exc: InvalidStateTransition
) -> JSONResponse:
    logger.warning("api.invalid_state_transition", path=request.url.path, error=str(exc))
    return _domain_error_response(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors."""
    logger.warning(
        "api.validation_error",
        path=request.url.path,
        errors=exc.errors(),
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(
        "api.unhandled_exception",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "InternalServerError",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


# ============================================================================
# ROUTES
# ============================================================================


@app.get("/health", tags=["Health"], summary="Health check (liveness)")
async def health_check() -> dict:
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.environment,
        "pending_events": dependencies.get_event_bus().pending_count,
    }


app.include_router(purchase_orders_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    # Run with: python -m ordering.main
    uvicorn.run(
        "ordering.main:app",
        host="0.0.0.0",
        port=8000,
        log_level="info",
    )
