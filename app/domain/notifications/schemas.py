"""Notification domain schemas - Pydantic models for booking events and delivery results"""

import math
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class NotificationType(str, Enum):
    PRESCRIPTION = "prescription"
    ORDER = "order"
    DOCTOR_APPOINTMENT = "doctor_appointment"
    NURSE_BOOKING = "nurse_booking"
    EMERGENCY_REQUEST = "emergency_request"
    MEDICINE_ORDER = "medicine_order"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Booking pages send whatever the user typed. Values that don't fit a field
# become None (or plain text) and are rendered with placeholders later.


def lenient_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def lenient_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def lenient_int(value: Any) -> Optional[int]:
    number = lenient_number(value)
    return int(number) if number is not None else None


def lenient_text_list(value: Any) -> Optional[list[str]]:
    """A list of strings; a single string becomes a one-item list, None items are dropped"""
    if value is None:
        return None
    if not isinstance(value, list):
        value = [value]
    return [text for text in (lenient_text(v) for v in value) if text is not None]


class LabTestItem(BaseModel):
    """A priced test line-item on a lab booking"""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    originalPrice: Optional[float] = None
    discountedPrice: Optional[float] = None

    @field_validator("name", mode="before")
    @classmethod
    def parse_name(cls, v: Any) -> Optional[str]:
        return lenient_text(v)

    @field_validator("originalPrice", "discountedPrice", mode="before")
    @classmethod
    def parse_price(cls, v: Any) -> Optional[float]:
        return lenient_number(v)


TEXT_FIELDS = (
    "type",
    "status",
    "adminEmail",
    "patientId",
    "patientName",
    "patientPhone",
    "patientEmail",
    "patientGender",
    "patientCity",
    "doctorId",
    "doctorName",
    "appointmentDate",
    "appointmentTime",
    "consultationType",
    "nurseId",
    "nurseName",
    "serviceNeeded",
    "preferredDate",
    "preferredTime",
    "notes",
    "city",
    "urgency",
    "pharmacyId",
    "pharmacyName",
    "deliveryAddress",
    "orderId",
    "labName",
    "bookingDate",
)

MONEY_FIELDS = (
    "appointmentFee",
    "serviceFee",
    "totalAmount",
    "totalOriginal",
    "totalDiscounted",
    "totalSavings",
    "discountPercentage",
)


class NotificationRequest(BaseModel):
    """
    A booking event. Only ``type`` is required; it stays a plain string so an
    unrecognised value reaches the dispatcher and fails there instead of at
    parse time. Every other field may be missing and is rendered as a default.
    """

    model_config = ConfigDict(extra="ignore")

    type: str
    status: Optional[str] = None
    adminEmail: Optional[str] = None

    # Patient
    patientId: Optional[str] = None
    patientName: Optional[str] = None
    patientPhone: Optional[str] = None
    patientEmail: Optional[str] = None
    patientAge: Optional[Union[int, str]] = None
    patientGender: Optional[str] = None
    patientCity: Optional[str] = None

    # Doctor appointment
    doctorId: Optional[str] = None
    doctorName: Optional[str] = None
    appointmentDate: Optional[str] = None
    appointmentTime: Optional[str] = None
    consultationType: Optional[str] = None
    appointmentFee: Optional[float] = None

    # Nurse booking
    nurseId: Optional[str] = None
    nurseName: Optional[str] = None
    serviceNeeded: Optional[str] = None
    preferredDate: Optional[str] = None
    preferredTime: Optional[str] = None
    serviceFee: Optional[float] = None
    notes: Optional[str] = None

    # Emergency request
    city: Optional[str] = None
    urgency: Optional[str] = None
    services: Optional[list[str]] = None

    # Medicine order
    pharmacyId: Optional[str] = None
    pharmacyName: Optional[str] = None
    deliveryAddress: Optional[str] = None

    # Lab order / prescription
    orderId: Optional[str] = None
    labName: Optional[str] = None
    testNames: Optional[list[str]] = None
    tests: Optional[list[LabTestItem]] = None
    totalAmount: Optional[float] = None
    totalOriginal: Optional[float] = None
    totalDiscounted: Optional[float] = None
    totalSavings: Optional[float] = None
    discountPercentage: Optional[float] = None
    validityDays: Optional[int] = None
    bookingDate: Optional[str] = None

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def parse_text(cls, v: Any) -> Optional[str]:
        return lenient_text(v)

    @field_validator(*MONEY_FIELDS, mode="before")
    @classmethod
    def parse_money(cls, v: Any) -> Optional[float]:
        return lenient_number(v)

    @field_validator("validityDays", mode="before")
    @classmethod
    def parse_validity_days(cls, v: Any) -> Optional[int]:
        days = lenient_int(v)
        return days if days is not None and days > 0 else None

    @field_validator("patientAge", mode="before")
    @classmethod
    def parse_age(cls, v: Any) -> Optional[Union[int, str]]:
        """Whole-number ages stay numbers; free text such as '32 years' is kept as typed"""
        if isinstance(v, str):
            v = v.strip()
            return int(v) if v.isdigit() else (v or None)
        number = lenient_number(v)
        if number is None:
            return None
        return int(number) if number.is_integer() else str(v)

    @field_validator("services", "testNames", mode="before")
    @classmethod
    def parse_text_list(cls, v: Any) -> Optional[list[str]]:
        return lenient_text_list(v)

    @field_validator("tests", mode="before")
    @classmethod
    def parse_tests(cls, v: Any) -> Optional[list[Any]]:
        """Keep object line-items; a bare string is a test with no prices"""
        if not isinstance(v, list):
            return None
        tests = []
        for item in v:
            if isinstance(item, dict):
                tests.append(item)
            elif isinstance(item, str):
                tests.append({"name": item})
        return tests

    @property
    def is_confirmation(self) -> bool:
        return self.status == BookingStatus.CONFIRMED.value


class AppointmentReminderRequest(BaseModel):
    """Reminder sent shortly before a doctor appointment starts"""

    model_config = ConfigDict(extra="ignore")

    action: str = "send_appointment_reminder"
    appointmentId: Optional[str] = None
    patientEmail: Optional[str] = None
    patientName: Optional[str] = None
    doctorEmail: Optional[str] = None
    doctorName: Optional[str] = None
    appointmentDate: Optional[str] = None
    appointmentTime: Optional[str] = None
    consultationType: Optional[str] = None
    minutesUntil: Optional[int] = None

    @field_validator(
        "appointmentId",
        "patientEmail",
        "patientName",
        "doctorEmail",
        "doctorName",
        "appointmentDate",
        "appointmentTime",
        "consultationType",
        mode="before",
    )
    @classmethod
    def parse_text(cls, v: Any) -> Optional[str]:
        return lenient_text(v)

    @field_validator("minutesUntil", mode="before")
    @classmethod
    def parse_minutes(cls, v: Any) -> Optional[int]:
        return lenient_int(v)


class GetUserEmailRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    action: str = "get_user_email"
    userId: Optional[str] = None

    @field_validator("userId", mode="before")
    @classmethod
    def parse_user_id(cls, v: Any) -> Optional[str]:
        return lenient_text(v)


class DeliveryAttempt(BaseModel):
    """Outcome of a single Resend call"""

    sender: str
    data: Optional[dict[str, Any]] = None
    error: Optional[dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DeliveryResult(BaseModel):
    """Primary attempt plus the domain-fallback attempt, if one was made"""

    primary: DeliveryAttempt
    fallback: Optional[DeliveryAttempt] = None

    @property
    def ok(self) -> bool:
        final = self.fallback or self.primary
        return final.ok


class NotificationSummary(BaseModel):
    success: bool
    adminEmail: Optional[DeliveryResult] = None
    customerEmail: Optional[DeliveryResult] = None
    providerEmail: Optional[DeliveryResult] = None
    pdfGenerated: bool = False
    providerEmailsCount: int = 0
    status: Optional[str] = None


class ReminderSummary(BaseModel):
    success: bool
    patientEmail: Optional[DeliveryResult] = None
    doctorEmail: Optional[DeliveryResult] = None
