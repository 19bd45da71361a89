"""Purchasing DTOs."""

from .purchase_order_dto import PurchaseOrderDTO

__all__ = ["PurchaseOrderDTO"]
