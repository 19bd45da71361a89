"""Entities (Aggregate Roots) для Purchasing bounded context."""

from .purchase_order import PurchaseOrder, PurchaseOrderState

__all__ = ["PurchaseOrder", "PurchaseOrderState"]
