"""Tests для EventBus (FIFO queue + subscriber dispatch)."""

import asyncio

import pytest

from ordering.domain.purchasing import (
    PurchaseOrderApprovedEvent,
    PurchaseOrderDeclinedEvent,
    PurchaseOrderSubmittedEvent,
)
from ordering.infrastructure.messaging import EventBus, EventBusEmpty


class TestEventBusQueue:
    """Tests для ordered hand-off."""

    def test_enqueue_then_drain_is_fifo(self, event_bus: EventBus):
        events = [
            PurchaseOrderSubmittedEvent(order_id=1, product_code="P", quantity=1),
            PurchaseOrderApprovedEvent(order_id=1),
            PurchaseOrderDeclinedEvent(order_id=2, reason="r"),
        ]

        for event in events:
            event_bus.enqueue(event)

        assert event_bus.pending_count == 3
        assert event_bus.drain() == events
        assert event_bus.pending_count == 0

    def test_dequeue_nowait_removes_head(self, event_bus: EventBus):
        first = PurchaseOrderApprovedEvent(order_id=1)
        second = PurchaseOrderApprovedEvent(order_id=2)
        event_bus.enqueue(first)
        event_bus.enqueue(second)

        assert event_bus.dequeue_nowait() is first
        assert event_bus.pending_count == 1

    def test_dequeue_nowait_on_empty_bus_raises(self, event_bus: EventBus):
        with pytest.raises(EventBusEmpty):
            event_bus.dequeue_nowait()

    def test_enqueue_is_unbounded(self, event_bus: EventBus):
        for i in range(5000):
            event_bus.enqueue(PurchaseOrderApprovedEvent(order_id=i))

        assert event_bus.pending_count == 5000

    @pytest.mark.asyncio
    async def test_dequeue_waits_for_event(self, event_bus: EventBus):
        """Test: dequeue() чекає, доки event не з'явиться."""
        event = PurchaseOrderApprovedEvent(order_id=7)

        waiter = asyncio.create_task(event_bus.dequeue())
        await asyncio.sleep(0)
        assert not waiter.done()

        event_bus.enqueue(event)

        assert await asyncio.wait_for(waiter, timeout=1) is event


class TestEventBusDispatch:
    """Tests для subscriber dispatch."""

    @pytest.mark.asyncio
    async def test_dispatch_pending_calls_subscribers_in_order(self, event_bus: EventBus):
        calls = []

        async def on_submitted(event):
            calls.append(("submitted", event.order_id))

        async def on_approved(event):
            calls.append(("approved", event.order_id))

        event_bus.subscribe(PurchaseOrderSubmittedEvent, on_submitted)
        event_bus.subscribe(PurchaseOrderApprovedEvent, on_approved)

        event_bus.enqueue(
            PurchaseOrderSubmittedEvent(order_id=1, product_code="P", quantity=1)
        )
        event_bus.enqueue(PurchaseOrderApprovedEvent(order_id=1))
        event_bus.enqueue(PurchaseOrderDeclinedEvent(order_id=2, reason="r"))

        dispatched = await event_bus.dispatch_pending()

        assert dispatched == 3
        assert calls == [("submitted", 1), ("approved", 1)]
        assert event_bus.pending_count == 0

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self, event_bus: EventBus):
        """Test: Bus продовжує роботу навіть якщо handler failed."""
        calls = []

        async def failing_handler(event):
            raise RuntimeError("Handler error")

        async def working_handler(event):
            calls.append("working")

        event_bus.subscribe(PurchaseOrderApprovedEvent, failing_handler)
        event_bus.subscribe(PurchaseOrderApprovedEvent, working_handler)
        event_bus.enqueue(PurchaseOrderApprovedEvent(order_id=1))

        await event_bus.dispatch_pending()

        assert calls == ["working"]

    def test_subscribe_and_unsubscribe(self, event_bus: EventBus):
        async def handler(event):
            pass

        event_bus.subscribe(PurchaseOrderApprovedEvent, handler)
        assert event_bus.get_subscribers_count(PurchaseOrderApprovedEvent) == 1

        event_bus.unsubscribe(PurchaseOrderApprovedEvent, handler)
        assert event_bus.get_subscribers_count(PurchaseOrderApprovedEvent) == 0

    @pytest.mark.asyncio
    async def test_run_dispatcher_processes_until_cancelled(self, event_bus: EventBus):
        received = asyncio.Event()
        seen = []

        async def handler(event):
            seen.append(event.order_id)
            if len(seen) == 2:
                received.set()

        event_bus.subscribe(PurchaseOrderApprovedEvent, handler)
        dispatcher = asyncio.create_task(event_bus.run_dispatcher())

        event_bus.enqueue(PurchaseOrderApprovedEvent(order_id=1))
        event_bus.enqueue(PurchaseOrderApprovedEvent(order_id=2))
        await asyncio.wait_for(received.wait(), timeout=1)

        dispatcher.cancel()
        with pytest.raises(asyncio.CancelledError):
            await dispatcher

        assert seen == [1, 2]
