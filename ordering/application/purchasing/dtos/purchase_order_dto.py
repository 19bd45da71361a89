"""Purchase order DTO - data transfer object for API responses."""

from dataclasses import dataclass

from ordering.domain.purchasing import PurchaseOrderState


@dataclass
class PurchaseOrderDTO:
    """Purchase order data transfer object."""

    id: int
    status: str
    product_code: str | None
    quantity: int

    @classmethod
    def from_state(cls, state: PurchaseOrderState) -> "PurchaseOrderDTO":
        return cls(
            id=state.id,
            status=state.status.value,
            product_code=state.product_code,
            quantity=state.quantity,
        )
