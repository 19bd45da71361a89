"""Purchasing queries."""

from .get_purchase_order import GetPurchaseOrderQuery

__all__ = ["GetPurchaseOrderQuery"]
