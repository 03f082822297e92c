"""
Customer emails, keyed by (type, variant).

Variants: "pending" (status missing or pending), "confirmed", "update"
(completed or cancelled). Types without status-specific content use "default".
"""

from ....config import FRONTEND_URL
from ..formatting import joined, rupees, safe, text
from ..schemas import NotificationRequest
from .base import (
    THEME,
    RenderedEmail,
    callout,
    detail_rows,
    get_base_template,
    lab_items_section,
    paragraph,
    urgency_style,
)

STATUS_LABELS = {
    "completed": "Completed",
    "cancelled": "Cancelled",
}

SERVICE_LABELS = {
    "prescription": "Prescription Booking",
    "doctor_appointment": "Doctor Appointment",
    "nurse_booking": "Nurse Booking",
}


def _greeting(data: NotificationRequest) -> str:
    return paragraph(f"Dear <strong>{safe(data.patientName, 'Customer')}</strong>,")


def lab_order(data: NotificationRequest) -> RenderedEmail:
    content = _greeting(data)
    content += paragraph("Your lab test booking has been confirmed! Here are your booking details:")
    content += detail_rows(
        [
            ("Booking ID", safe(data.orderId)),
            ("Lab", safe(data.labName)),
            ("Total Amount", rupees(data.totalAmount)),
        ],
        accent="#0ea5e9",
    )
    content += lab_items_section(data)
    content += callout(
        "💡 <strong>Next Steps:</strong> Please visit the lab with your booking ID and a valid ID. "
        "Our team will assist you with the sample collection.",
        "#fef3c7",
        "#fbbf24",
        "#92400e",
    )
    mjml = get_base_template(
        title="🎉 Booking Confirmed!",
        preview_text=f"Your lab test booking {text(data.orderId)} is confirmed",
        content_sections=content,
        accent=THEME["lab"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Bookings",
    )
    return RenderedEmail(f"✅ Your Lab Test Booking Confirmed - {text(data.orderId)}", mjml)


def prescription_received(data: NotificationRequest) -> RenderedEmail:
    content = _greeting(data)
    content += paragraph(
        "We have received your prescription. Our team will review it and get back to you "
        "with the recommended tests and prices shortly."
    )
    content += callout(
        "💡 <strong>Note:</strong> You will receive another email with your booking voucher "
        "once the prescription has been reviewed.",
        "#e0f2fe",
        THEME["prescription"],
        "#075985",
    )
    mjml = get_base_template(
        title="📋 Prescription Received",
        preview_text="We have received your prescription",
        content_sections=content,
        accent=THEME["prescription"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Bookings",
    )
    return RenderedEmail("📋 Prescription Received - We're Reviewing It", mjml)


def prescription_confirmed(data: NotificationRequest) -> RenderedEmail:
    content = _greeting(data)
    content += paragraph(
        "Your prescription has been reviewed and your lab tests are booked. "
        "Your booking voucher is attached to this email."
    )
    content += detail_rows(
        [
            ("Booking ID", safe(data.orderId)),
            ("Lab", safe(data.labName)),
        ],
        accent=THEME["prescription"],
    )
    content += lab_items_section(data)
    content += callout(
        "💡 <strong>Next Steps:</strong> Show the attached voucher at the lab before it expires.",
        "#fef3c7",
        "#fbbf24",
        "#92400e",
    )
    mjml = get_base_template(
        title="✅ Lab Tests Booked!",
        preview_text="Your prescription booking is confirmed",
        content_sections=content,
        accent=THEME["prescription"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Bookings",
    )
    return RenderedEmail(f"✅ Your Prescription Booking Confirmed - {text(data.orderId)}", mjml)


def appointment_received(data: NotificationRequest) -> RenderedEmail:
    content = _greeting(data)
    content += paragraph(
        f"Your appointment request with Dr. {safe(data.doctorName)} has been received. "
        "You will be notified once the doctor confirms it."
    )
    content += detail_rows(
        [
            ("Doctor", f"Dr. {safe(data.doctorName)}"),
            ("📅 Date", safe(data.appointmentDate)),
            ("🕐 Time", safe(data.appointmentTime)),
            ("Consultation Type", safe(data.consultationType, "Physical Visit")),
        ],
        accent=THEME["doctor"],
    )
    mjml = get_base_template(
        title="📅 Appointment Request Received",
        preview_text=f"Your appointment request with Dr. {text(data.doctorName)}",
        content_sections=content,
        accent=THEME["doctor"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Appointments",
    )
    return RenderedEmail(f"📅 Appointment Request Received - Dr. {text(data.doctorName)}", mjml)


def appointment_confirmed(data: NotificationRequest) -> RenderedEmail:
    content = _greeting(data)
    content += paragraph("Your appointment has been confirmed! Here are the details:")
    content += detail_rows(
        [
            ("Doctor", f"Dr. {safe(data.doctorName)}"),
            ("📅 Date", safe(data.appointmentDate)),
            ("🕐 Time", safe(data.appointmentTime)),
            ("Consultation Type", safe(data.consultationType, "Physical Visit")),
            ("Consultation Fee", rupees(data.appointmentFee)),
        ],
        accent=THEME["doctor"],
    )
    content += callout(
        "💡 <strong>Reminder:</strong> Please arrive 10 minutes before your scheduled time. "
        "Bring any previous medical records or prescriptions. "
        "Your confirmation slip is attached.",
        "#dbeafe",
        "#3b82f6",
        "#1e40af",
    )
    mjml = get_base_template(
        title="👨‍⚕️ Appointment Confirmed!",
        preview_text=f"Your appointment with Dr. {text(data.doctorName)} is confirmed",
        content_sections=content,
        accent=THEME["doctor"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Appointments",
    )
    return RenderedEmail(f"✅ Appointment Confirmed with Dr. {text(data.doctorName)}", mjml)


def nurse_booking_received(data: NotificationRequest) -> RenderedEmail:
    content = _greeting(data)
    content += paragraph("Your nurse booking request has been submitted! Here are the details:")
    content += detail_rows(
        [
            ("Nurse", safe(data.nurseName)),
            ("Service", safe(data.serviceNeeded)),
            ("📅 Preferred Date", safe(data.preferredDate)),
            ("🕐 Preferred Time", safe(data.preferredTime)),
        ],
        accent=THEME["nurse"],
    )
    content += callout(
        "💡 <strong>Note:</strong> The nurse will contact you shortly to confirm the visit details.",
        "#fce7f3",
        THEME["nurse"],
        "#9d174d",
    )
    mjml = get_base_template(
        title="👩‍⚕️ Nurse Booking Received",
        preview_text=f"Your nurse booking with {text(data.nurseName)}",
        content_sections=content,
        accent=THEME["nurse"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Bookings",
    )
    return RenderedEmail(f"👩‍⚕️ Nurse Booking Request Received - {text(data.nurseName)}", mjml)


def nurse_booking_confirmed(data: NotificationRequest) -> RenderedEmail:
    content = _greeting(data)
    content += paragraph("Your nurse booking has been confirmed! Here are the details:")
    content += detail_rows(
        [
            ("Nurse", safe(data.nurseName)),
            ("Service", safe(data.serviceNeeded)),
            ("📅 Date", safe(data.preferredDate)),
            ("🕐 Time", safe(data.preferredTime)),
            ("Fee", rupees(data.serviceFee)),
        ],
        accent=THEME["nurse"],
    )
    if data.notes and data.notes.strip():
        content += detail_rows([("Notes", safe(data.notes))])
    content += callout(
        "💡 <strong>Note:</strong> Your confirmation slip is attached. "
        "The nurse will contact you before the visit.",
        "#fce7f3",
        THEME["nurse"],
        "#9d174d",
    )
    mjml = get_base_template(
        title="👩‍⚕️ Nurse Booking Confirmed!",
        preview_text=f"Your nurse booking with {text(data.nurseName)} is confirmed",
        content_sections=content,
        accent=THEME["nurse"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Bookings",
    )
    return RenderedEmail(f"✅ Nurse Booking Confirmed - {text(data.nurseName)}", mjml)


def emergency_received(data: NotificationRequest) -> RenderedEmail:
    accent, label = urgency_style(data.urgency)
    content = _greeting(data)
    content += paragraph(
        "Your emergency nursing request has been received. Nurses in your area are being notified."
    )
    content += detail_rows(
        [
            ("Urgency Level", label),
            ("Location", safe(data.city)),
            ("Services Needed", safe(joined(data.services))),
        ],
        accent=accent,
    )
    content += callout(
        "⏰ <strong>What's Next:</strong> Available nurses will start sending you offers. "
        "You can track your request status in real-time.",
        "#fef2f2",
        "#ef4444",
        "#991b1b",
    )
    mjml = get_base_template(
        title="🚨 Emergency Request Received!",
        preview_text="Nurses in your area are being notified",
        content_sections=content,
        accent=accent,
        cta_url=f"{FRONTEND_URL}/emergency-request-status",
        cta_label="Track Request Status",
    )
    return RenderedEmail(f"🚨 Emergency Request Submitted - {label}", mjml)


def medicine_order(data: NotificationRequest) -> RenderedEmail:
    content = _greeting(data)
    content += paragraph("Your medicine order has been placed! Here are the details:")
    content += detail_rows(
        [
            ("Order ID", safe(data.orderId)),
            ("Pharmacy", safe(data.pharmacyName)),
            ("Delivery Address", safe(data.deliveryAddress)),
        ],
        accent=THEME["pharmacy"],
    )
    content += callout(
        "💡 <strong>Note:</strong> The pharmacy will review your order and confirm availability. "
        "You will receive updates on your order status.",
        "#ccfbf1",
        THEME["pharmacy"],
        "#134e4a",
    )
    mjml = get_base_template(
        title="💊 Order Confirmed!",
        preview_text=f"Your medicine order {text(data.orderId)}",
        content_sections=content,
        accent=THEME["pharmacy"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="Track My Order",
    )
    return RenderedEmail(f"✅ Medicine Order Confirmed - {text(data.orderId)}", mjml)


def booking_status_update(data: NotificationRequest) -> RenderedEmail:
    """Completed or cancelled bookings"""
    status_label = STATUS_LABELS.get(data.status or "", text(data.status).title())
    service = SERVICE_LABELS.get(data.type, "Booking")
    content = _greeting(data)
    content += paragraph(
        f"The status of your {service.lower()} has changed to <strong>{safe(status_label)}</strong>."
    )
    content += detail_rows(
        [
            ("Status", safe(status_label)),
            ("Booking ID", safe(data.orderId)),
        ],
        accent=THEME["primary"],
    )
    mjml = get_base_template(
        title=f"{service} {status_label}",
        preview_text=f"Your {service.lower()} is {status_label.lower()}",
        content_sections=content,
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Bookings",
    )
    return RenderedEmail(f"{service} {status_label} - MyPakLabs", mjml)


CUSTOMER_TEMPLATES = {
    ("order", "default"): lab_order,
    ("prescription", "pending"): prescription_received,
    ("prescription", "confirmed"): prescription_confirmed,
    ("prescription", "update"): booking_status_update,
    ("doctor_appointment", "pending"): appointment_received,
    ("doctor_appointment", "confirmed"): appointment_confirmed,
    ("doctor_appointment", "update"): booking_status_update,
    ("nurse_booking", "pending"): nurse_booking_received,
    ("nurse_booking", "confirmed"): nurse_booking_confirmed,
    ("nurse_booking", "update"): booking_status_update,
    ("emergency_request", "default"): emergency_received,
    ("medicine_order", "default"): medicine_order,
}
