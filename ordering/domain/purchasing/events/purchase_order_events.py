"""Domain Events для Purchasing bounded context.

PurchaseOrderEvent - закритий union з трьох variants, щоб subscribers могли
exhaustively match через `match event:`.
"""

from dataclasses import dataclass
from typing import TypeAlias

from ordering.domain.shared import DomainEvent


@dataclass(frozen=True)
class PurchaseOrderSubmittedEvent(DomainEvent):
    """Event: Purchase order поданий.

    Subscribers можуть:
    - Зарезервувати stock для product_code
    - Поставити order в чергу на approval
    """

    order_id: int
    product_code: str | None
    quantity: int


@dataclass(frozen=True)
class PurchaseOrderApprovedEvent(DomainEvent):
    """Event: Purchase order схвалений."""

    order_id: int


@dataclass(frozen=True)
class PurchaseOrderDeclinedEvent(DomainEvent):
    """Event: Purchase order відхилений.

    Reason завжди non-empty (aggregate перевіряє до emit).
    """

    order_id: int
    reason: str


PurchaseOrderEvent: TypeAlias = (
    PurchaseOrderSubmittedEvent | PurchaseOrderApprovedEvent | PurchaseOrderDeclinedEvent
)
