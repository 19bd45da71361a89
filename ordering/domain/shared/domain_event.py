"""Base DomainEvent class for event-driven architecture.

DomainEvent - щось важливе що сталось в domain, про що треба повідомити інші частини системи.
Events дозволяють decoupling: domain logic не знає хто і як обробляє events.
"""

from abc import ABC
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent(ABC):
    """Base class for all domain events.

    DomainEvent репрезентує факт що щось сталося в domain.
    Events іменуються в минулому часі (PurchaseOrderSubmitted, PurchaseOrderApproved).

    Характеристики:
    - **Immutable**: Events не змінюються після створення
    - **Past tense naming**: PurchaseOrderApproved, not ApprovePurchaseOrder
    - **Timestamped**: Коли подія сталась
    - **Unique**: Кожна подія має унікальний ID

    Example:
        >>> @dataclass(frozen=True)
        ... class PurchaseOrderApprovedEvent(DomainEvent):
        ...     order_id: int

        >>> event = PurchaseOrderApprovedEvent(order_id=21)
        >>> event.to_dict()
        {'event_type': 'PurchaseOrderApprovedEvent', 'event_id': '...', 'occurred_at': '...', 'order_id': 21}
    """

    event_id: UUID = field(default_factory=uuid4, init=False)
    """Унікальний ID події (auto-generated)."""

    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), init=False
    )
    """Час коли подія сталась (auto-generated, UTC)."""

    @property
    def event_name(self) -> str:
        """Get event name (class name, e.g. "PurchaseOrderApprovedEvent")."""
        return self.__class__.__name__

    def payload(self) -> dict[str, Any]:
        """Get the domain payload without envelope fields.

        Returns:
            Mapping of the variant's own fields.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("event_id", "occurred_at")
        }

    def to_dict(self) -> dict[str, Any]:
        """Render event as a plain key/value record for external serialization."""
        return {
            "event_type": self.event_name,
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
            **self.payload(),
        }
