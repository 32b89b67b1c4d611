"""
Tests for payment API endpoints.
"""

import pytest


def seed_agreement(store, status="checked"):
    return store.seed(
        "agreements", user_email="test@example.com", apartment_no="A-101", status=status
    )


class TestPaymentHistory:
    """Tests for GET /payments"""

    def test_requires_token(self, client):
        response = client.get("/payments", params={"email": "test@example.com"})
        assert response.status_code == 401

    def test_invalid_token(self, client):
        response = client.get(
            "/payments",
            params={"email": "test@example.com"},
            headers={"Authorization": "Bearer garbage"},
        )
        assert response.status_code == 403

    def test_other_users_email_forbidden(self, client, auth_headers):
        response = client.get(
            "/payments", params={"email": "someone@example.com"}, headers=auth_headers
        )
        assert response.status_code == 403
        assert response.json()["message"] == "forbidden access"

    def test_own_history(self, client, store, auth_headers):
        agreement_id = seed_agreement(store)
        client.post(
            "/payments",
            json={"agreementId": agreement_id, "userEmail": "test@example.com", "amount": 1200},
        )

        response = client.get("/payments", params={"email": "test@example.com"}, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["data"][0]["agreement_id"] == agreement_id


class TestRecordPayment:
    """Tests for POST /payments"""

    def test_record(self, client, store):
        agreement_id = seed_agreement(store)

        response = client.post(
            "/payments",
            json={
                "agreementId": agreement_id,
                "userEmail": "test@example.com",
                "amount": 1200,
                "month": "May",
                "transactionId": "pi_test",
                "paymentMethod": "card",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Payment successful & agreement marked as paid"
        assert store.get("payments", body["payment_id"])["month"] == "May"
        assert store.get("agreements", agreement_id)["status"] == "paid"

    def test_second_payment_is_404(self, client, store):
        agreement_id = seed_agreement(store)
        body = {"agreementId": agreement_id, "userEmail": "test@example.com", "amount": 1200}
        client.post("/payments", json=body)

        response = client.post("/payments", json=body)

        assert response.status_code == 404
        assert response.json()["message"] == "Agreement not found or already paid"
        assert len(store.all("payments")) == 1

    def test_missing_fields(self, client):
        response = client.post("/payments", json={"amount": 1200})
        assert response.status_code == 400
        assert response.json()["message"] == "Missing required payment fields"


class TestCreatePaymentIntent:
    """Tests for POST /create-payment-intent"""

    def test_returns_client_secret(self, client, payment_gateway):
        response = client.post("/create-payment-intent", json={"amount": 1500})

        assert response.status_code == 200
        assert response.json() == {"success": True, "client_secret": "pi_test_secret_xyz"}
        payment_gateway.create_payment_intent.assert_awaited_once_with(1500, "usd")

    def test_missing_amount(self, client, payment_gateway):
        response = client.post("/create-payment-intent", json={})
        assert response.status_code == 400
        assert response.json()["message"] == "Amount is required"
        payment_gateway.create_payment_intent.assert_not_called()
