"""Tests для bootstrap seeding."""

import random
import re

import pytest

from ordering.config import Settings
from ordering.domain.purchasing import PurchaseOrderStatus, PurchaseOrderSubmittedEvent
from ordering.domain.shared import InvalidStateTransition
from ordering.infrastructure.persistence.memory import (
    InMemoryPurchaseOrderRepository,
    create_purchase_order_repository,
    seed_product_code,
    seed_purchase_orders,
)


class TestSeedProductCode:
    @pytest.mark.parametrize(
        "order_id, expected",
        [(1, "Product-01"), (9, "Product-09"), (10, "Product-10"), (20, "Product-20")],
    )
    def test_zero_padded(self, order_id, expected):
        assert seed_product_code(order_id) == expected


class TestSeedPurchaseOrders:
    """Tests для seed_purchase_orders()."""

    @pytest.mark.asyncio
    async def test_seeds_twenty_submitted_orders(self, repository, event_bus, seeded_rng):
        await seed_purchase_orders(repository, rng=seeded_rng)

        assert await repository.count() == 20
        assert await repository.list_ids() == list(range(1, 21))

        for order_id in range(1, 21):
            order = await repository.get_by_id(order_id)
            assert order.status == PurchaseOrderStatus.SUBMITTED
            assert order.state.product_code == f"Product-{order_id:02d}"
            assert 10 <= order.state.quantity < 100

    @pytest.mark.asyncio
    async def test_seeding_publishes_submitted_events(self, repository, event_bus, seeded_rng):
        """Test: Seeding іде через save, тому bus отримує 20 Submitted events."""
        await seed_purchase_orders(repository, rng=seeded_rng)

        events = event_bus.drain()
        assert len(events) == 20
        assert all(isinstance(e, PurchaseOrderSubmittedEvent) for e in events)
        assert [e.order_id for e in events] == list(range(1, 21))
        assert all(re.fullmatch(r"Product-\d{2}", e.product_code) for e in events)
        assert all(10 <= e.quantity < 100 for e in events)

    @pytest.mark.asyncio
    async def test_same_seed_same_quantities(self, event_bus):
        first = InMemoryPurchaseOrderRepository(event_bus)
        second = InMemoryPurchaseOrderRepository(event_bus)

        await seed_purchase_orders(first, rng=random.Random(7))
        await seed_purchase_orders(second, rng=random.Random(7))

        for order_id in range(1, 21):
            a = await first.get_by_id(order_id)
            b = await second.get_by_id(order_id)
            assert a.state.quantity == b.state.quantity


class TestCreatePurchaseOrderRepository:
    """Tests для bootstrap function."""

    @pytest.mark.asyncio
    async def test_uses_settings(self, event_bus):
        settings = Settings(seed_order_count=5, seed_random_seed=99, enforce_transitions=True)

        repository = await create_purchase_order_repository(event_bus, settings)

        assert await repository.count() == 5
        assert event_bus.pending_count == 5
        order = await repository.get_by_id(1)
        order.approve()
        with pytest.raises(InvalidStateTransition):
            order.approve()

    @pytest.mark.asyncio
    async def test_seed_from_settings_is_reproducible(self, event_bus):
        settings = Settings(seed_random_seed=99)

        first = await create_purchase_order_repository(event_bus, settings)
        second = await create_purchase_order_repository(event_bus, settings)

        for order_id in range(1, 21):
            a = await first.get_by_id(order_id)
            b = await second.get_by_id(order_id)
            assert a.state.quantity == b.state.quantity

    @pytest.mark.asyncio
    async def test_explicit_rng_wins(self, event_bus):
        settings = Settings(seed_order_count=3, seed_random_seed=1)
        rng = random.Random(5)
        expected = random.Random(5).randrange(10, 100)

        repository = await create_purchase_order_repository(event_bus, settings, rng=rng)

        first = await repository.get_by_id(1)
        assert first.state.quantity == expected
