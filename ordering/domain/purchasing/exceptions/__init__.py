"""Exceptions для Purchasing bounded context."""

from .purchasing_exceptions import (
    InvalidPurchaseOrderOperation,
    PurchaseOrderNotFoundError,
)

__all__ = [
    "InvalidPurchaseOrderOperation",
    "PurchaseOrderNotFoundError",
]
