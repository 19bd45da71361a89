"""Purchasing commands."""

from .purchase_order_commands import (
    ApprovePurchaseOrderCommand,
    DeclinePurchaseOrderCommand,
    SubmitPurchaseOrderCommand,
)

__all__ = [
    "SubmitPurchaseOrderCommand",
    "ApprovePurchaseOrderCommand",
    "DeclinePurchaseOrderCommand",
]
