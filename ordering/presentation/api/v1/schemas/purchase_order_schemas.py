"""Pydantic schemas for Purchase Order API requests/responses.

JSON на wire - camelCase (productCode), Python fields - snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ordering.application.purchasing.dtos import PurchaseOrderDTO


class CamelModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# REQUEST SCHEMAS
# ============================================================================


class SubmitPurchaseOrderRequest(CamelModel):
    """Request schema для submit.

    Example:
        {"productCode": "Product-99", "quantity": 42}
    """

    product_code: str = Field(..., description="Product code (e.g., Product-07)")
    quantity: int = Field(..., description="Ordered quantity")


class DeclinePurchaseOrderRequest(CamelModel):
    """Request schema для decline.

    Reason валідує aggregate, тому тут він optional: порожній або відсутній
    reason повертає 400 з domain error, а не 422.
    """

    reason: str | None = Field(default=None, description="Why the order is declined")


# ============================================================================
# RESPONSE SCHEMAS
# ============================================================================


class PurchaseOrderResponse(CamelModel):
    """Purchase order state."""

    id: int
    status: str = Field(..., description="Submitted | Approved | Declined")
    product_code: str | None
    quantity: int

    @classmethod
    def from_dto(cls, dto: PurchaseOrderDTO) -> "PurchaseOrderResponse":
        return cls(
            id=dto.id,
            status=dto.status,
            product_code=dto.product_code,
            quantity=dto.quantity,
        )


class ErrorResponse(BaseModel):
    """Error response body."""

    error: str
    message: str
    context: dict = Field(default_factory=dict)
