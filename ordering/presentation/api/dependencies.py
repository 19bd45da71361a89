"""Dependency injection for FastAPI.

Provides dependencies для API routes:
- Purchase order repository (created once at startup)
- Event bus
- Handlers
"""

from typing import Annotated

from fastapi import Depends

from ordering.application.purchasing.handlers import (
    ApprovePurchaseOrderHandler,
    DeclinePurchaseOrderHandler,
    GetPurchaseOrderHandler,
    SubmitPurchaseOrderHandler,
)
from ordering.domain.purchasing import PurchaseOrderRepository
from ordering.infrastructure.messaging import EventBus

# ============================================================================
# GLOBAL DEPENDENCIES (будуть initialized в main.py lifespan)
# ============================================================================

_repository: PurchaseOrderRepository | None = None
_event_bus: EventBus | None = None


def init_dependencies(
    repository: PurchaseOrderRepository,
    event_bus: EventBus,
) -> None:
    """Initialize global dependencies.

    Note:
        Викликається при FastAPI startup (в main.py).
    """
    global _repository, _event_bus
    _repository = repository
    _event_bus = event_bus


def reset_dependencies() -> None:
    """Drop dependencies (called on shutdown)."""
    global _repository, _event_bus
    _repository = None
    _event_bus = None


def get_repository() -> PurchaseOrderRepository:
    """Get purchase order repository.

    Raises:
        RuntimeError: If dependencies not initialized.
    """
    if _repository is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies() first.")
    return _repository


def get_event_bus() -> EventBus:
    """Get event bus.

    Raises:
        RuntimeError: If dependencies not initialized.
    """
    if _event_bus is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies() first.")
    return _event_bus


RepositoryDep = Annotated[PurchaseOrderRepository, Depends(get_repository)]


# ============================================================================
# HANDLERS
# ============================================================================


def get_submit_handler(repository: RepositoryDep) -> SubmitPurchaseOrderHandler:
    return SubmitPurchaseOrderHandler(repository)


def get_approve_handler(repository: RepositoryDep) -> ApprovePurchaseOrderHandler:
    return ApprovePurchaseOrderHandler(repository)


def get_decline_handler(repository: RepositoryDep) -> DeclinePurchaseOrderHandler:
    return DeclinePurchaseOrderHandler(repository)


def get_purchase_order_handler(repository: RepositoryDep) -> GetPurchaseOrderHandler:
    return GetPurchaseOrderHandler(repository)


SubmitHandlerDep = Annotated[SubmitPurchaseOrderHandler, Depends(get_submit_handler)]
ApproveHandlerDep = Annotated[ApprovePurchaseOrderHandler, Depends(get_approve_handler)]
DeclineHandlerDep = Annotated[DeclinePurchaseOrderHandler, Depends(get_decline_handler)]
GetHandlerDep = Annotated[GetPurchaseOrderHandler, Depends(get_purchase_order_handler)]
