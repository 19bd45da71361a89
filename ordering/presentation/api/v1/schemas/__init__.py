"""API v1 schemas."""

from .purchase_order_schemas import (
    DeclinePurchaseOrderRequest,
    ErrorResponse,
    PurchaseOrderResponse,
    SubmitPurchaseOrderRequest,
)

__all__ = [
    "SubmitPurchaseOrderRequest",
    "DeclinePurchaseOrderRequest",
    "PurchaseOrderResponse",
    "ErrorResponse",
]
