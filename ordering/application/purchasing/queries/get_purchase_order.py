"""GetPurchaseOrder Query - поточний стан одного order."""

from dataclasses import dataclass

from ordering.application.shared import Query


@dataclass(frozen=True)
class GetPurchaseOrderQuery(Query):
    """Query: поточний стан одного order."""

    order_id: int
