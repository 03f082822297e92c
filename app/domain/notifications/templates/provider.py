"""
Provider alerts for newly created bookings. Providers never receive attachments.
"""

from ....config import FRONTEND_URL
from ..formatting import joined, rupees, safe, text
from ..schemas import NotificationRequest
from .base import THEME, RenderedEmail, callout, detail_rows, get_base_template, paragraph, urgency_style


def doctor_new_appointment(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"Dear Dr. {safe(data.doctorName)}, you have a new appointment request on MyPakLabs."
    )
    content += detail_rows(
        [
            ("Patient", safe(data.patientName)),
            ("Date", safe(data.appointmentDate)),
            ("Time", safe(data.appointmentTime)),
            ("Consultation Type", safe(data.consultationType, "Physical Visit")),
            ("Fee", rupees(data.appointmentFee)),
        ],
        accent=THEME["doctor"],
    )
    content += callout(
        "Please review the request in your dashboard and confirm or reschedule it.",
        "#ede9fe",
        THEME["doctor"],
        "#5b21b6",
    )
    mjml = get_base_template(
        title="New Appointment Request",
        preview_text=f"New appointment from {text(data.patientName)}",
        content_sections=content,
        accent=THEME["doctor"],
        cta_url=f"{FRONTEND_URL}/doctor-dashboard",
        cta_label="Open Dashboard",
    )
    return RenderedEmail(f"📅 New Appointment Request - {text(data.patientName)}", mjml)


def nurse_new_booking(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"Dear {safe(data.nurseName)}, a patient has requested your nursing services."
    )
    content += detail_rows(
        [
            ("Patient", safe(data.patientName)),
            ("Service", safe(data.serviceNeeded)),
            ("Preferred Date", safe(data.preferredDate)),
            ("Preferred Time", safe(data.preferredTime)),
            ("City", safe(data.patientCity)),
        ],
        accent=THEME["nurse"],
    )
    content += callout(
        "Please accept or decline the booking from your dashboard so the patient can plan ahead.",
        "#fce7f3",
        THEME["nurse"],
        "#9d174d",
    )
    mjml = get_base_template(
        title="New Nurse Booking",
        preview_text=f"New booking from {text(data.patientName)}",
        content_sections=content,
        accent=THEME["nurse"],
        cta_url=f"{FRONTEND_URL}/nurse-dashboard",
        cta_label="Open Dashboard",
    )
    return RenderedEmail(f"👩‍⚕️ New Booking Request - {text(data.patientName)}", mjml)


def pharmacy_new_order(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"{safe(data.pharmacyName, 'Your pharmacy')} has received a new medicine order."
    )
    content += detail_rows(
        [
            ("Order ID", safe(data.orderId)),
            ("Patient", safe(data.patientName)),
            ("Delivery Address", safe(data.deliveryAddress)),
        ],
        accent=THEME["pharmacy"],
    )
    content += callout(
        "Please check availability and update the order status from your dashboard.",
        "#ccfbf1",
        THEME["pharmacy"],
        "#134e4a",
    )
    mjml = get_base_template(
        title="New Medicine Order",
        preview_text=f"New medicine order {text(data.orderId)}",
        content_sections=content,
        accent=THEME["pharmacy"],
        cta_url=f"{FRONTEND_URL}/pharmacy-dashboard",
        cta_label="Open Dashboard",
    )
    return RenderedEmail(f"💊 New Medicine Order - {text(data.orderId)}", mjml)


def emergency_broadcast(data: NotificationRequest) -> RenderedEmail:
    accent, label = urgency_style(data.urgency)
    content = paragraph(
        "A patient near you needs emergency nursing care. "
        "Send an offer if you are available."
    )
    content += detail_rows(
        [
            ("Urgency", label),
            ("Location", safe(data.city)),
            ("Services Needed", safe(joined(data.services))),
        ],
        accent=accent,
    )
    mjml = get_base_template(
        title=f"{label} Emergency Request",
        preview_text=f"{label} emergency nursing request in {text(data.city)}",
        content_sections=content,
        accent=accent,
        cta_url=f"{FRONTEND_URL}/nurse-emergency-feed",
        cta_label="View Request",
    )
    return RenderedEmail(f"🚨 {label} Emergency Nursing Request - {text(data.city)}", mjml)


PROVIDER_TEMPLATES = {
    "doctor_appointment": doctor_new_appointment,
    "nurse_booking": nurse_new_booking,
    "medicine_order": pharmacy_new_order,
    "emergency_request": emergency_broadcast,
}
