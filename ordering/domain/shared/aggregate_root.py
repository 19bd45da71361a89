"""Base AggregateRoot class for domain model.

AggregateRoot - головний Entity в Aggregate. Він контролює всі зміни стану
та накопичує uncommitted domain events, які repository публікує при save.
"""

from typing import Iterator, List

from .domain_event import DomainEvent
from .entity import Entity


class AggregateRoot(Entity):
    """Base class for aggregate roots in DDD.

    AggregateRoot - це:
    - **Consistency boundary**: Всі бізнес-правила перевіряються в методах root
    - **Event producer**: Кожна зміна стану додає event в uncommitted buffer
    - **Transient view**: Instance живе один request, repository володіє станом

    Uncommitted buffer тільки росте (append-only), доки repository не
    опублікує events і не викличе clear_domain_events().

    Example:
        >>> order = await repository.create(21)
        >>> order.submit("Product-99", 42)
        >>> list(order)  # [PurchaseOrderSubmittedEvent(...)]
        >>> await repository.save(order)
        >>> list(order)  # []
    """

    def __init__(self, id: int) -> None:
        """Initialize aggregate root.

        Args:
            id: Unique identifier.
        """
        super().__init__(id)
        self._domain_events: List[DomainEvent] = []

    def add_domain_event(self, event: DomainEvent) -> None:
        """Append domain event to the uncommitted buffer.

        Events не публікуються одразу, а тільки коли repository зберігає aggregate.

        Args:
            event: Domain event to add.
        """
        self._domain_events.append(event)

    def get_domain_events(self) -> List[DomainEvent]:
        """Get snapshot of all uncommitted domain events.

        Returns:
            Copy of the buffer, in append order.
        """
        return self._domain_events.copy()

    def clear_domain_events(self) -> None:
        """Clear all uncommitted domain events.

        Викликається repository після того як events потрапили на bus,
        щоб вони не публікувались повторно.
        """
        self._domain_events.clear()

    @property
    def has_domain_events(self) -> bool:
        """Check if aggregate has uncommitted domain events."""
        return len(self._domain_events) > 0

    def __iter__(self) -> Iterator[DomainEvent]:
        """Iterate uncommitted events in append order.

        Iteration не змінює buffer: повторний прохід дає ті самі events
        до наступного save.
        """
        return iter(tuple(self._domain_events))
