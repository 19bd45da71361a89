"""Events для Purchasing bounded context."""

from .purchase_order_events import (
    PurchaseOrderApprovedEvent,
    PurchaseOrderDeclinedEvent,
    PurchaseOrderEvent,
    PurchaseOrderSubmittedEvent,
)

__all__ = [
    "PurchaseOrderEvent",
    "PurchaseOrderSubmittedEvent",
    "PurchaseOrderApprovedEvent",
    "PurchaseOrderDeclinedEvent",
]
