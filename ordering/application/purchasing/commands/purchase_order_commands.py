"""Commands для purchase order lifecycle."""

from dataclasses import dataclass

from ordering.application.shared import Command


@dataclass(frozen=True)
class SubmitPurchaseOrderCommand(Command):
    """Command: подати order (створює його, якщо ще не існує).

    Example:
        >>> command = SubmitPurchaseOrderCommand(
        ...     order_id=21,
        ...     product_code="Product-99",
        ...     quantity=42,
        ... )
    """

    order_id: int
    product_code: str
    quantity: int


@dataclass(frozen=True)
class ApprovePurchaseOrderCommand(Command):
    """Command: схвалити order."""

    order_id: int


@dataclass(frozen=True)
class DeclinePurchaseOrderCommand(Command):
    """Command: відхилити order з причиною."""

    order_id: int
    reason: str | None
