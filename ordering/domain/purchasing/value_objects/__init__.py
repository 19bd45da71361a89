"""Value objects для Purchasing bounded context."""

from .enums import PurchaseOrderStatus

__all__ = ["PurchaseOrderStatus"]
