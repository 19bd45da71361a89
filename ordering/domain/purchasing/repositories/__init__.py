"""Repository ports (interfaces) для Purchasing bounded context."""

from .purchase_order_repository import PurchaseOrderRepository

__all__ = ["PurchaseOrderRepository"]
