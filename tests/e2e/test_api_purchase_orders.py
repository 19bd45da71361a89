"""E2E tests for Purchase Order API endpoints.

TestClient як context manager запускає lifespan: bus + seeded repository.
"""

import pytest
from fastapi.testclient import TestClient

from ordering.main import app
from ordering.presentation.api import dependencies


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestPurchaseOrderAPI:
    """E2E tests для Purchase Order API."""

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["pending_events"] >= 0

    def test_get_seeded_order(self, client):
        response = client.get("/api/purchaseorders/7")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 7
        assert data["status"] == "Submitted"
        assert data["productCode"] == "Product-07"
        assert 10 <= data["quantity"] < 100

    def test_get_missing_order_returns_404(self, client):
        response = client.get("/api/purchaseorders/404")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "PurchaseOrderNotFoundError"
        assert data["context"]["order_id"] == "404"

    def test_submit_then_approve(self, client):
        response = client.post(
            "/api/purchaseorders/21/submit",
            json={"productCode": "Product-99", "quantity": 42},
        )
        assert response.status_code == 200
        assert response.json() == {
            "id": 21,
            "status": "Submitted",
            "productCode": "Product-99",
            "quantity": 42,
        }

        response = client.post("/api/purchaseorders/21/approve")
        assert response.status_code == 200
        assert response.json()["status"] == "Approved"

        response = client.get("/api/purchaseorders/21")
        assert response.json()["status"] == "Approved"
        assert response.json()["quantity"] == 42

    def test_decline_with_reason(self, client):
        response = client.post(
            "/api/purchaseorders/3/decline",
            json={"reason": "Budget exceeded"},
        )

        assert response.status_code == 200
        assert response.json()["status"] == "Declined"

    @pytest.mark.parametrize("body", [None, {}, {"reason": ""}])
    def test_decline_without_reason_returns_400(self, client, body):
        response = client.post("/api/purchaseorders/4/decline", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "InvalidPurchaseOrderOperation"
        assert client.get("/api/purchaseorders/4").json()["status"] == "Submitted"

    def test_approve_missing_order_returns_404(self, client):
        response = client.post("/api/purchaseorders/999/approve")

        assert response.status_code == 404

    def test_submit_invalid_body_returns_422(self, client):
        response = client.post(
            "/api/purchaseorders/30/submit",
            json={"productCode": "Product-30", "quantity": "many"},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "ValidationError"

    def test_dependencies_reset_after_shutdown(self):
        with TestClient(app):
            assert dependencies.get_repository() is not None

        with pytest.raises(RuntimeError):
            dependencies.get_repository()
