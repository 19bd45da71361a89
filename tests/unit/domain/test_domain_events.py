"""Tests для Domain Events.

Перевіряємо immutability, envelope fields та plain-record rendering.
"""

import dataclasses
from datetime import datetime

import pytest

from ordering.domain.purchasing import (
    PurchaseOrderApprovedEvent,
    PurchaseOrderDeclinedEvent,
    PurchaseOrderEvent,
    PurchaseOrderSubmittedEvent,
)


class TestEventEnvelope:
    """Tests для auto-generated event_id / occurred_at."""

    def test_events_get_unique_ids(self):
        first = PurchaseOrderApprovedEvent(order_id=1)
        second = PurchaseOrderApprovedEvent(order_id=1)

        assert first.event_id != second.event_id
        assert first != second

    def test_occurred_at_is_utc(self):
        event = PurchaseOrderApprovedEvent(order_id=1)

        assert isinstance(event.occurred_at, datetime)
        assert event.occurred_at.tzinfo is not None

    def test_events_are_immutable(self):
        """Test: Events не змінюються після створення."""
        event = PurchaseOrderDeclinedEvent(order_id=1, reason="no stock")

        with pytest.raises(dataclasses.FrozenInstanceError):
            event.reason = "other"  # type: ignore[misc]

    def test_event_name(self):
        assert PurchaseOrderApprovedEvent(order_id=1).event_name == "PurchaseOrderApprovedEvent"


class TestEventSerialization:
    """Tests для to_dict() / payload()."""

    def test_submitted_to_dict(self):
        event = PurchaseOrderSubmittedEvent(
            order_id=21, product_code="Product-99", quantity=42
        )

        data = event.to_dict()

        assert data["event_type"] == "PurchaseOrderSubmittedEvent"
        assert data["event_id"] == str(event.event_id)
        assert data["occurred_at"] == event.occurred_at.isoformat()
        assert data["order_id"] == 21
        assert data["product_code"] == "Product-99"
        assert data["quantity"] == 42

    def test_payload_excludes_envelope(self):
        event = PurchaseOrderDeclinedEvent(order_id=4, reason="duplicate")

        assert event.payload() == {"order_id": 4, "reason": "duplicate"}


class TestEventUnion:
    """Tests для exhaustive matching по variants."""

    @staticmethod
    def describe(event: PurchaseOrderEvent) -> str:
        match event:
            case PurchaseOrderSubmittedEvent(order_id=oid, quantity=qty):
                return f"submitted {oid} x{qty}"
            case PurchaseOrderApprovedEvent(order_id=oid):
                return f"approved {oid}"
            case PurchaseOrderDeclinedEvent(order_id=oid, reason=reason):
                return f"declined {oid}: {reason}"
        raise AssertionError("unreachable")

    def test_match_each_variant(self):
        assert (
            self.describe(
                PurchaseOrderSubmittedEvent(order_id=1, product_code="P", quantity=3)
            )
            == "submitted 1 x3"
        )
        assert self.describe(PurchaseOrderApprovedEvent(order_id=2)) == "approved 2"
        assert (
            self.describe(PurchaseOrderDeclinedEvent(order_id=3, reason="late"))
            == "declined 3: late"
        )
