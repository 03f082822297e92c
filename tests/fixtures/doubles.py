"""Test doubles and sample booking events shared across test modules."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

PRIMARY_SENDER = "MyPakLabs <support@mypaklabs.com>"
FALLBACK_SENDER = "MyPakLabs <onboarding@resend.dev>"
ADMIN_INBOX = "admin@mypaklabs.test"


class FakeResendError(Exception):
    """Carries the same attributes as resend's API exceptions."""

    def __init__(self, message: str, code: int = 400, error_type: str = "application_error"):
        super().__init__(message)
        self.message = message
        self.code = code
        self.error_type = error_type


def domain_not_verified_error() -> FakeResendError:
    return FakeResendError(
        "The mypaklabs.com domain is not verified. Please, add and verify your domain.",
        code=403,
        error_type="validation_error",
    )


class FakeSender:
    """Records every Resend params dict and replays scripted outcomes.

    ``failures`` decides per call whether to raise: it receives the params and
    returns an exception to raise, or None to succeed.
    """

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.failures: Optional[Callable[[Dict[str, Any]], Optional[Exception]]] = None

    def __call__(self, params: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(params)
        if self.failures is not None:
            error = self.failures(params)
            if error is not None:
                raise error
        return {"id": f"email-{len(self.calls)}"}

    def sent_to(self, address: str) -> List[Dict[str, Any]]:
        return [call for call in self.calls if address in call["to"]]


def lab_order_payload(**overrides: Any) -> Dict[str, Any]:
    """A lab order with two priced tests: Rs. 2,000 down to Rs. 1,400."""
    payload: Dict[str, Any] = {
        "type": "order",
        "orderId": "ORD-1001",
        "labName": "Chughtai Lab",
        "patientName": "Usman Tariq",
        "patientPhone": "+92 300 1234567",
        "patientEmail": "usman@example.com",
        "patientAge": 34,
        "patientGender": "Male",
        "patientCity": "Lahore",
        "bookingDate": "2026-03-01T10:00:00",
        "validityDays": 7,
        "tests": [
            {"name": "CBC", "originalPrice": 800, "discountedPrice": 500},
            {"name": "Lipid Profile", "originalPrice": 1200, "discountedPrice": 900},
        ],
    }
    payload.update(overrides)
    return payload


def doctor_appointment_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": "doctor_appointment",
        "doctorId": "doc-1",
        "doctorName": "Ayesha Khan",
        "patientName": "Usman Tariq",
        "patientEmail": "usman@example.com",
        "appointmentDate": "2026-03-05",
        "appointmentTime": "11:30 AM",
        "consultationType": "online",
        "appointmentFee": 2500,
    }
    payload.update(overrides)
    return payload


def nurse_booking_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": "nurse_booking",
        "nurseId": "nurse-1",
        "nurseName": "Sara",
        "patientName": "Usman Tariq",
        "patientEmail": "usman@example.com",
        "serviceNeeded": "Wound dressing",
        "preferredDate": "2026-03-06",
        "preferredTime": "09:00 AM",
        "serviceFee": 1500,
    }
    payload.update(overrides)
    return payload


def emergency_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": "emergency_request",
        "patientName": "Usman Tariq",
        "patientPhone": "+92 300 1234567",
        "city": "Lahore",
        "urgency": "critical",
        "services": ["Injection", "IV Drip"],
    }
    payload.update(overrides)
    return payload


def medicine_order_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "type": "medicine_order",
        "orderId": "MED-77",
        "pharmacyId": "store-1",
        "pharmacyName": "City Pharmacy",
        "patientName": "Usman Tariq",
        "patientEmail": "usman@example.com",
        "deliveryAddress": "12 Mall Road, Lahore",
        "totalAmount": 1850,
    }
    payload.update(overrides)
    return payload
