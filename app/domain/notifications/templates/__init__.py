"""
Template registries mapping booking events to pure renderers returning RenderedEmail.
"""

from typing import Optional

from ..schemas import NotificationRequest, NotificationType
from .admin import ADMIN_TEMPLATES
from .base import RenderedEmail
from .customer import CUSTOMER_TEMPLATES
from .provider import PROVIDER_TEMPLATES
from .reminder import doctor_reminder, patient_reminder

KNOWN_TYPES = {t.value for t in NotificationType}
STATUS_VARIANT_TYPES = {"prescription", "doctor_appointment", "nurse_booking"}


class UnknownNotificationType(ValueError):
    """Raised for a booking event type no template handles"""

    def __init__(self, notification_type: str):
        super().__init__(f"Unknown notification type: {notification_type}")
        self.notification_type = notification_type


def ensure_known_type(notification_type: str) -> None:
    if notification_type not in KNOWN_TYPES:
        raise UnknownNotificationType(notification_type)


def customer_variant(data: NotificationRequest) -> str:
    """Template variant for the customer email of this (type, status)"""
    if data.type not in STATUS_VARIANT_TYPES:
        return "default"
    if data.status in (None, "", "pending"):
        return "pending"
    if data.status == "confirmed":
        return "confirmed"
    return "update"


def render_admin_email(data: NotificationRequest) -> RenderedEmail:
    ensure_known_type(data.type)
    renderer = ADMIN_TEMPLATES.get((data.type, data.is_confirmation)) or ADMIN_TEMPLATES[
        (data.type, False)
    ]
    return renderer(data)


def render_provider_email(data: NotificationRequest) -> Optional[RenderedEmail]:
    ensure_known_type(data.type)
    renderer = PROVIDER_TEMPLATES.get(data.type)
    return renderer(data) if renderer else None


def render_customer_email(data: NotificationRequest) -> RenderedEmail:
    ensure_known_type(data.type)
    return CUSTOMER_TEMPLATES[(data.type, customer_variant(data))](data)


__all__ = [
    "RenderedEmail",
    "UnknownNotificationType",
    "customer_variant",
    "doctor_reminder",
    "patient_reminder",
    "render_admin_email",
    "render_customer_email",
    "render_provider_email",
]
