"""Integration tests for the notification endpoint through the FastAPI app.

Tests cover:
- Booking events answered with the JSON summary and 200/502
- Unknown types and malformed bodies answered with 500 {"error": ...}
- The get_user_email and send_appointment_reminder actions
- CORS preflight and CORS headers on every response
- Both mount paths and the health check
- Empty or free-text fields rendered with placeholders instead of rejected
"""

from __future__ import annotations

import pytest

from app.config import ADMIN_NOTIFICATION_EMAIL
from tests.fixtures.doubles import (
    FakeResendError,
    doctor_appointment_payload,
    emergency_payload,
    lab_order_payload,
)

ENDPOINT = "/send-admin-notification"


@pytest.mark.integration
class TestBookingEvents:
    """POST booking events."""

    def test_lab_order(self, client, fake_sender) -> None:
        response = client.post(ENDPOINT, json=lab_order_payload())

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["pdfGenerated"] is True
        assert body["providerEmailsCount"] == 0
        assert body["adminEmail"]["primary"]["data"] == {"id": "email-1"}
        assert body["customerEmail"]["primary"]["error"] is None
        assert fake_sender.calls[0]["to"] == [ADMIN_NOTIFICATION_EMAIL]
        assert response.headers["access-control-allow-origin"] == "*"

    def test_root_path_is_the_same_endpoint(self, client) -> None:
        response = client.post("/", json=doctor_appointment_payload())

        assert response.status_code == 200
        assert response.json()["providerEmailsCount"] == 1

    def test_emergency_count(self, client) -> None:
        response = client.post(ENDPOINT, json=emergency_payload())

        assert response.status_code == 200
        assert response.json()["providerEmailsCount"] == 2
        assert response.json()["customerEmail"] is None

    def test_admin_failure_is_502(self, client, fake_sender) -> None:
        fake_sender.failures = (
            lambda params: FakeResendError("Internal error", code=500)
            if params["to"] == [ADMIN_NOTIFICATION_EMAIL]
            else None
        )

        response = client.post(ENDPOINT, json=lab_order_payload())

        assert response.status_code == 502
        body = response.json()
        assert body["success"] is False
        assert body["adminEmail"]["primary"]["error"]["message"] == "Internal error"

    def test_unknown_type_is_500(self, client, fake_sender) -> None:
        response = client.post(ENDPOINT, json={"type": "refund"})

        assert response.status_code == 500
        assert response.json() == {"error": "Unknown notification type: refund"}
        assert fake_sender.calls == []

    def test_missing_type_is_500(self, client) -> None:
        response = client.post(ENDPOINT, json={"patientName": "Usman"})

        assert response.status_code == 500
        assert "error" in response.json()

    def test_invalid_json_is_500(self, client) -> None:
        response = client.post(
            ENDPOINT, content=b"{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 500
        assert "error" in response.json()
        assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.integration
class TestActions:
    """POST auxiliary actions."""

    def test_get_user_email(self, client, fake_sender) -> None:
        response = client.post(ENDPOINT, json={"action": "get_user_email", "userId": "user-1"})

        assert response.status_code == 200
        assert response.json() == {"email": "usman@example.com"}
        assert fake_sender.calls == []

    def test_get_user_email_unknown_user(self, client) -> None:
        response = client.post(ENDPOINT, json={"action": "get_user_email", "userId": "nobody"})

        assert response.status_code == 200
        assert response.json() == {"email": None}

    def test_appointment_reminder(self, client, fake_sender) -> None:
        response = client.post(
            ENDPOINT,
            json={
                "action": "send_appointment_reminder",
                "appointmentId": "apt-1",
                "patientEmail": "usman@example.com",
                "doctorEmail": "dr.ayesha@example.com",
                "doctorName": "Ayesha Khan",
                "minutesUntil": 30,
            },
        )

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert len(fake_sender.calls) == 2


@pytest.mark.integration
class TestCorsAndHealth:
    """Preflight and health."""

    @pytest.mark.parametrize("path", [ENDPOINT, "/"])
    def test_options_returns_cors_headers(self, client, path) -> None:
        response = client.options(path)

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "POST, OPTIONS"
        assert "x-client-info" in response.headers["access-control-allow-headers"]

    def test_health(self, client) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


@pytest.mark.integration
class TestIncompleteFields:
    """Fields the booking pages send empty or as free text are rendered, not rejected."""

    def test_null_line_item_price(self, client) -> None:
        payload = lab_order_payload(
            tests=[{"name": "CBC", "originalPrice": None, "discountedPrice": 500}]
        )

        response = client.post(ENDPOINT, json=payload)

        assert response.status_code == 200
        assert response.json()["pdfGenerated"] is True

    def test_free_text_age(self, client) -> None:
        payload = doctor_appointment_payload(patientAge="32 years", status="confirmed")

        response = client.post(ENDPOINT, json=payload)

        assert response.status_code == 200
        assert response.json()["pdfGenerated"] is True

    def test_free_text_money_and_validity(self, client) -> None:
        payload = lab_order_payload(
            totalAmount="about 1500",
            totalOriginal="n/a",
            validityDays="one week",
            tests=[{"name": "CBC", "originalPrice": "Rs. 800", "discountedPrice": "500"}],
        )

        response = client.post(ENDPOINT, json=payload)

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_null_list_elements(self, client) -> None:
        response = client.post(
            ENDPOINT, json=emergency_payload(services=["Injection", None, "IV Drip"])
        )

        assert response.status_code == 200
        assert response.json()["providerEmailsCount"] == 2

    def test_null_test_names(self, client) -> None:
        payload = {"type": "prescription", "patientName": "Usman", "testNames": [None, "CBC"]}

        response = client.post(ENDPOINT, json=payload)

        assert response.status_code == 200

    def test_numeric_text_fields(self, client, fake_sender) -> None:
        payload = lab_order_payload(orderId=1001, patientPhone=3001234567)

        response = client.post(ENDPOINT, json=payload)

        assert response.status_code == 200
        assert fake_sender.calls[0]["subject"] == "🛒 New Lab Order - 1001"


@pytest.mark.integration
class TestBrowserPreflight:
    """Preflights answered by the CORS middleware."""

    def test_any_requested_header_is_allowed(self, client) -> None:
        response = client.options(
            ENDPOINT,
            headers={
                "Origin": "https://mypaklab.lovable.app",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type, x-request-id",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "x-request-id" in response.headers["access-control-allow-headers"].lower()
