"""Pytest configuration and fixtures."""

import os

# Settings читаються при import ordering.main, тому env задаємо до імпортів
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("SEED_RANDOM_SEED", "1234")

import random

import pytest

from ordering.domain.purchasing import PurchaseOrder, PurchaseOrderState
from ordering.infrastructure.messaging import EventBus
from ordering.infrastructure.persistence.memory import InMemoryPurchaseOrderRepository


@pytest.fixture
def event_bus():
    """Fresh event bus per test."""
    return EventBus()


@pytest.fixture
def repository(event_bus):
    """Empty in-memory repository wired to event_bus."""
    return InMemoryPurchaseOrderRepository(event_bus)


@pytest.fixture
def strict_repository(event_bus):
    """Repository whose aggregates enforce the state machine."""
    return InMemoryPurchaseOrderRepository(event_bus, enforce_transitions=True)


@pytest.fixture
def new_order():
    """Unsaved order id=21 with default state."""
    return PurchaseOrder(PurchaseOrderState(id=21))


@pytest.fixture
def seeded_rng():
    """Deterministic random source для seeding."""
    return random.Random(42)
