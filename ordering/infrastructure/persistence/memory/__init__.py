"""In-memory persistence (stands in for a durable store)."""

from .purchase_order_repository import InMemoryPurchaseOrderRepository
from .seeding import (
    create_purchase_order_repository,
    seed_product_code,
    seed_purchase_orders,
)

__all__ = [
    "InMemoryPurchaseOrderRepository",
    "create_purchase_order_repository",
    "seed_product_code",
    "seed_purchase_orders",
]
