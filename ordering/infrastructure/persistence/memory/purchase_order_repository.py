"""In-memory implementation of PurchaseOrderRepository."""

import asyncio
import logging

from ordering.domain.purchasing.entities import PurchaseOrder, PurchaseOrderState
from ordering.domain.purchasing.exceptions import PurchaseOrderNotFoundError
from ordering.domain.purchasing.repositories import PurchaseOrderRepository
from ordering.infrastructure.messaging import EventBus

logger = logging.getLogger(__name__)


class InMemoryPurchaseOrderRepository(PurchaseOrderRepository):
    """Repository over a process-wide dict store.

    Store тримає PurchaseOrderState by reference: aggregate, отриманий з
    get_by_id(), мутує той самий об'єкт, що лежить в store.

    Один asyncio.Lock серіалізує доступ до store та bus, тому events
    різних save() ніколи не перемішуються на bus.

    Example:
        >>> repository = InMemoryPurchaseOrderRepository(event_bus)
        >>> order = await repository.create(21)
        >>> order.submit("Product-99", 42)
        >>> await repository.save(order)
    """

    def __init__(self, event_bus: EventBus, enforce_transitions: bool = False) -> None:
        """Initialize repository.

        Args:
            event_bus: Bus, на який save() публікує committed events.
            enforce_transitions: Передається в кожен aggregate.
        """
        self._bus = event_bus
        self._enforce_transitions = enforce_transitions
        self._store: dict[int, PurchaseOrderState] = {}
        self._lock = asyncio.Lock()

    async def get_by_id(self, order_id: int) -> PurchaseOrder:
        async with self._lock:
            state = self._store.get(order_id)

        if state is None:
            raise PurchaseOrderNotFoundError(
                "Purchase order not found",
                order_id=order_id,
            )
        return self._wrap(state)

    async def create(self, order_id: int) -> PurchaseOrder:
        return self._wrap(PurchaseOrderState(id=order_id))

    async def save(self, order: PurchaseOrder) -> None:
        state = order.state

        async with self._lock:
            inserted = False
            if state.id not in self._store:
                self._store[state.id] = state
                inserted = True

            events = order.get_domain_events()
            for event in events:
                self._bus.enqueue(event)
            order.clear_domain_events()

        logger.info(
            "purchase_order_repository.saved",
            extra={
                "order_id": state.id,
                "status": state.status.value,
                "inserted": inserted,
                "events_published": len(events),
            },
        )

    async def get_or_create(self, order_id: int) -> PurchaseOrder:
        async with self._lock:
            state = self._store.get(order_id)
            if state is None:
                state = PurchaseOrderState(id=order_id)
                self._store[order_id] = state
                logger.info(
                    "purchase_order_repository.registered",
                    extra={"order_id": order_id},
                )
        return self._wrap(state)

    async def exists(self, order_id: int) -> bool:
        async with self._lock:
            return order_id in self._store

    async def count(self) -> int:
        """Number of stored orders."""
        async with self._lock:
            return len(self._store)

    async def list_ids(self) -> list[int]:
        """Stored order IDs in insertion order."""
        async with self._lock:
            return list(self._store)

    def _wrap(self, state: PurchaseOrderState) -> PurchaseOrder:
        return PurchaseOrder(state, enforce_transitions=self._enforce_transitions)
