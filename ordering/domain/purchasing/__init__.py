"""Purchasing Bounded Context - Domain Layer.

Exports:
    Entities: PurchaseOrder (Aggregate Root), PurchaseOrderState
    Value Objects: PurchaseOrderStatus
    Exceptions: InvalidPurchaseOrderOperation, PurchaseOrderNotFoundError
    Events: PurchaseOrderSubmittedEvent, PurchaseOrderApprovedEvent, PurchaseOrderDeclinedEvent
    Repositories: PurchaseOrderRepository (interface)
"""

# Entities (Aggregate Roots)
from .entities import PurchaseOrder, PurchaseOrderState

# Value Objects
from .value_objects import PurchaseOrderStatus

# Exceptions
from .exceptions import (
    InvalidPurchaseOrderOperation,
    PurchaseOrderNotFoundError,
)

# Events
from .events import (
    PurchaseOrderApprovedEvent,
    PurchaseOrderDeclinedEvent,
    PurchaseOrderEvent,
    PurchaseOrderSubmittedEvent,
)

# Repository interfaces
from .repositories import PurchaseOrderRepository

__all__ = [
    # Entities
    "PurchaseOrder",
    "PurchaseOrderState",
    # Value Objects
    "PurchaseOrderStatus",
    # Exceptions
    "InvalidPurchaseOrderOperation",
    "PurchaseOrderNotFoundError",
    # Events
    "PurchaseOrderEvent",
    "PurchaseOrderSubmittedEvent",
    "PurchaseOrderApprovedEvent",
    "PurchaseOrderDeclinedEvent",
    # Repositories
    "PurchaseOrderRepository",
]
