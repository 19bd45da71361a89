"""Purchasing handlers."""

from .purchase_order_handlers import (
    ApprovePurchaseOrderHandler,
    DeclinePurchaseOrderHandler,
    GetPurchaseOrderHandler,
    SubmitPurchaseOrderHandler,
)

__all__ = [
    "SubmitPurchaseOrderHandler",
    "ApprovePurchaseOrderHandler",
    "DeclinePurchaseOrderHandler",
    "GetPurchaseOrderHandler",
]
