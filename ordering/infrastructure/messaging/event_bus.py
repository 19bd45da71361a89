"""Event Bus - ordered hand-off of committed domain events.

- Repository.save() кладе events в кінець черги (enqueue)
- Subscribers забирають events з голови (FIFO), без replay
- In-process dispatcher викликає async handlers, subscribed на event type
"""

import asyncio
import logging
from collections import defaultdict
from typing import Awaitable, Callable, Type

from ordering.domain.shared import DomainEvent

logger = logging.getLogger(__name__)

# Event handler signature: async function that takes DomainEvent
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusEmpty(Exception):
    """Raised by dequeue_nowait() коли в черзі немає events."""


class EventBus:
    """Unbounded FIFO bus для committed domain events.

    Один instance на процес, створюється при bootstrap і inject-иться
    в repository та dispatcher.

    Example:
        >>> bus = EventBus()
        >>> bus.subscribe(PurchaseOrderApprovedEvent, notify_warehouse)
        >>> bus.enqueue(PurchaseOrderApprovedEvent(order_id=7))
        >>> await bus.dispatch_pending()  # викликає notify_warehouse
    """

    def __init__(self) -> None:
        """Initialize event bus."""
        self._queue: asyncio.Queue[DomainEvent] = asyncio.Queue()
        # Map: event_type → list of handlers
        self._subscribers: dict[Type[DomainEvent], list[EventHandler]] = defaultdict(list)
        logger.info("event_bus.initialized")

    # ==================== Queue ====================

    def enqueue(self, event: DomainEvent) -> None:
        """Append event to the tail. Never blocks, never rejects.

        Args:
            event: Committed domain event.
        """
        self._queue.put_nowait(event)
        logger.debug(
            "event_bus.enqueued",
            extra={
                "event_type": event.event_name,
                "event_id": str(event.event_id),
                "pending": self._queue.qsize(),
            },
        )

    async def dequeue(self) -> DomainEvent:
        """Remove and return the head event, waiting until one is available."""
        return await self._queue.get()

    def dequeue_nowait(self) -> DomainEvent:
        """Remove and return the head event.

        Raises:
            EventBusEmpty: Якщо черга порожня.
        """
        try:
            return self._queue.get_nowait()
        except asyncio.QueueEmpty:
            raise EventBusEmpty("No pending events") from None

    def drain(self) -> list[DomainEvent]:
        """Remove and return all pending events in FIFO order."""
        events: list[DomainEvent] = []
        while not self._queue.empty():
            events.append(self._queue.get_nowait())
        return events

    @property
    def pending_count(self) -> int:
        """Number of events waiting in the queue."""
        return self._queue.qsize()

    # ==================== Subscribers ====================

    def subscribe(
        self, event_type: Type[DomainEvent], handler: EventHandler
    ) -> None:
        """Subscribe handler to event type.

        Args:
            event_type: Type of event (e.g., PurchaseOrderApprovedEvent).
            handler: Async function to call when event dispatched.
        """
        self._subscribers[event_type].append(handler)
        logger.info(
            "event_bus.subscription_added",
            extra={
                "event_type": event_type.__name__,
                "handler": handler.__name__,
            },
        )

    def unsubscribe(
        self, event_type: Type[DomainEvent], handler: EventHandler
    ) -> None:
        """Unsubscribe handler from event type."""
        if handler in self._subscribers[event_type]:
            self._subscribers[event_type].remove(handler)
            logger.info(
                "event_bus.subscription_removed",
                extra={
                    "event_type": event_type.__name__,
                    "handler": handler.__name__,
                },
            )

    def get_subscribers_count(self, event_type: Type[DomainEvent]) -> int:
        """Get number of subscribers for event type."""
        return len(self._subscribers.get(event_type, []))

    # ==================== Dispatch ====================

    async def dispatch_pending(self) -> int:
        """Dequeue every pending event and hand it to its subscribers.

        Returns:
            Number of events dequeued.
        """
        dispatched = 0
        while not self._queue.empty():
            event = self._queue.get_nowait()
            await self._dispatch(event)
            dispatched += 1
        return dispatched

    async def run_dispatcher(self) -> None:
        """Dispatch events forever, in arrival order.

        Запускається як background task при startup, cancel при shutdown.
        """
        logger.info("event_bus.dispatcher_started")
        try:
            while True:
                event = await self._queue.get()
                await self._dispatch(event)
        finally:
            logger.info("event_bus.dispatcher_stopped")

    async def _dispatch(self, event: DomainEvent) -> None:
        event_type = type(event)
        handlers = self._subscribers.get(event_type, [])

        if not handlers:
            logger.debug(
                "event_bus.no_subscribers",
                extra={"event_type": event_type.__name__},
            )
            return

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                # Log error but continue with other handlers
                logger.error(
                    "event_bus.handler_failed",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": handler.__name__,
                        "error": str(e),
                    },
                    exc_info=True,
                )
