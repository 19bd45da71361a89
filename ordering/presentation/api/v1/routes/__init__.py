"""API v1 routes."""

from .purchase_orders import router as purchase_orders_router

__all__ = ["purchase_orders_router"]
