"""
Admin notification templates, keyed by (type, is_confirmation).
"""

from ....config import FRONTEND_URL
from ..formatting import joined, rupees, safe, text
from ..schemas import NotificationRequest
from .base import (
    THEME,
    RenderedEmail,
    detail_rows,
    get_base_template,
    lab_items_section,
    paragraph,
    urgency_style,
)


def new_prescription(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"<strong>{safe(data.patientName)}</strong> has uploaded a new prescription "
        "that requires your review."
    )
    content += detail_rows(
        [
            ("Patient Name", safe(data.patientName)),
            ("Patient Phone", safe(data.patientPhone)),
            ("City", safe(data.patientCity)),
        ]
    )
    mjml = get_base_template(
        title="New Prescription Uploaded",
        preview_text=f"{text(data.patientName)} uploaded a prescription",
        content_sections=content,
        accent=THEME["prescription"],
        cta_url=f"{FRONTEND_URL}/admin/prescriptions",
        cta_label="Review Prescription",
        is_admin_email=True,
    )
    return RenderedEmail("📋 New Prescription Uploaded - Action Required", mjml)


def confirmed_prescription(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"The prescription for <strong>{safe(data.patientName)}</strong> has been "
        "reviewed and the lab booking is confirmed."
    )
    content += detail_rows(
        [
            ("Booking ID", safe(data.orderId)),
            ("Lab", safe(data.labName)),
            ("Patient Phone", safe(data.patientPhone)),
        ],
        accent=THEME["prescription"],
    )
    content += lab_items_section(data)
    mjml = get_base_template(
        title="Prescription Booking Confirmed",
        preview_text=f"Prescription booking confirmed for {text(data.patientName)}",
        content_sections=content,
        accent=THEME["prescription"],
        cta_url=f"{FRONTEND_URL}/admin/prescriptions",
        cta_label="View Prescriptions",
        is_admin_email=True,
    )
    return RenderedEmail(
        f"✅ Prescription Booking Confirmed - {text(data.patientName)}", mjml
    )


def new_lab_order(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"<strong>{safe(data.patientName)}</strong> has placed a new order for lab tests."
    )
    content += detail_rows(
        [
            ("Order ID", safe(data.orderId)),
            ("Lab", safe(data.labName)),
            ("Patient Phone", safe(data.patientPhone)),
            ("Total Amount", rupees(data.totalAmount)),
        ]
    )
    content += lab_items_section(data)
    mjml = get_base_template(
        title="New Lab Order Placed",
        preview_text=f"New lab order {text(data.orderId)}",
        content_sections=content,
        accent=THEME["lab"],
        cta_url=f"{FRONTEND_URL}/admin/orders",
        cta_label="View Order",
        is_admin_email=True,
    )
    return RenderedEmail(f"🛒 New Lab Order - {text(data.orderId)}", mjml)


def confirmed_lab_order(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"The lab order for <strong>{safe(data.patientName)}</strong> has been confirmed."
    )
    content += detail_rows(
        [
            ("Order ID", safe(data.orderId)),
            ("Lab", safe(data.labName)),
            ("Total Amount", rupees(data.totalAmount)),
        ],
        accent=THEME["lab"],
    )
    content += lab_items_section(data)
    mjml = get_base_template(
        title="Lab Order Confirmed",
        preview_text=f"Lab order {text(data.orderId)} confirmed",
        content_sections=content,
        accent=THEME["lab"],
        cta_url=f"{FRONTEND_URL}/admin/orders",
        cta_label="View Order",
        is_admin_email=True,
    )
    return RenderedEmail(f"✅ Lab Order Confirmed - {text(data.orderId)}", mjml)


def new_doctor_appointment(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(f"<strong>{safe(data.patientName)}</strong> has booked an appointment.")
    content += detail_rows(
        [
            ("Doctor", safe(data.doctorName)),
            ("Date &amp; Time", f"{safe(data.appointmentDate)} at {safe(data.appointmentTime)}"),
            ("Consultation Type", safe(data.consultationType, "Physical")),
            ("Fee", rupees(data.appointmentFee)),
            ("Patient Phone", safe(data.patientPhone)),
        ]
    )
    mjml = get_base_template(
        title="New Doctor Appointment",
        preview_text=f"New appointment from {text(data.patientName)}",
        content_sections=content,
        accent=THEME["doctor"],
        cta_url=f"{FRONTEND_URL}/admin/doctor-appointments",
        cta_label="View Appointments",
        is_admin_email=True,
    )
    return RenderedEmail(f"👨‍⚕️ New Doctor Appointment - {text(data.patientName)}", mjml)


def confirmed_doctor_appointment(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"The appointment for <strong>{safe(data.patientName)}</strong> has been confirmed. "
        "The confirmation slip is attached."
    )
    content += detail_rows(
        [
            ("Doctor", f"Dr. {safe(data.doctorName)}"),
            ("Date &amp; Time", f"{safe(data.appointmentDate)} at {safe(data.appointmentTime)}"),
            ("Consultation Type", safe(data.consultationType, "Physical")),
            ("Fee", rupees(data.appointmentFee)),
        ],
        accent=THEME["doctor"],
    )
    mjml = get_base_template(
        title="Doctor Appointment Confirmed",
        preview_text=f"Appointment confirmed for {text(data.patientName)}",
        content_sections=content,
        accent=THEME["doctor"],
        cta_url=f"{FRONTEND_URL}/admin/doctor-appointments",
        cta_label="View Appointments",
        is_admin_email=True,
    )
    return RenderedEmail(
        f"✅ Doctor Appointment Confirmed - {text(data.patientName)}", mjml
    )


def new_nurse_booking(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"<strong>{safe(data.patientName)}</strong> has requested a nurse booking."
    )
    content += detail_rows(
        [
            ("Nurse", safe(data.nurseName)),
            ("Service Needed", safe(data.serviceNeeded)),
            ("Preferred Date", safe(data.preferredDate)),
            ("Preferred Time", safe(data.preferredTime)),
            ("Patient Phone", safe(data.patientPhone)),
        ]
    )
    mjml = get_base_template(
        title="New Nurse Booking",
        preview_text=f"New nurse booking from {text(data.patientName)}",
        content_sections=content,
        accent=THEME["nurse"],
        cta_url=f"{FRONTEND_URL}/admin/nurse-bookings",
        cta_label="View Bookings",
        is_admin_email=True,
    )
    return RenderedEmail(f"👩‍⚕️ New Nurse Booking - {text(data.patientName)}", mjml)


def confirmed_nurse_booking(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(
        f"The nurse booking for <strong>{safe(data.patientName)}</strong> has been confirmed. "
        "The confirmation slip is attached."
    )
    content += detail_rows(
        [
            ("Nurse", safe(data.nurseName)),
            ("Service", safe(data.serviceNeeded)),
            ("Date &amp; Time", f"{safe(data.preferredDate)} at {safe(data.preferredTime)}"),
            ("Fee", rupees(data.serviceFee)),
        ],
        accent=THEME["nurse"],
    )
    mjml = get_base_template(
        title="Nurse Booking Confirmed",
        preview_text=f"Nurse booking confirmed for {text(data.patientName)}",
        content_sections=content,
        accent=THEME["nurse"],
        cta_url=f"{FRONTEND_URL}/admin/nurse-bookings",
        cta_label="View Bookings",
        is_admin_email=True,
    )
    return RenderedEmail(f"✅ Nurse Booking Confirmed - {text(data.patientName)}", mjml)


def new_emergency_request(data: NotificationRequest) -> RenderedEmail:
    accent, label = urgency_style(data.urgency)
    content = paragraph(
        f"<strong>{safe(data.patientName)}</strong> has submitted an emergency nursing request."
    )
    content += detail_rows(
        [
            ("Urgency", label),
            ("Location", safe(data.city)),
            ("Services Needed", safe(joined(data.services))),
            ("Patient Phone", safe(data.patientPhone)),
        ],
        accent=accent,
    )
    mjml = get_base_template(
        title=f"{label} Emergency Request",
        preview_text=f"Emergency nursing request from {text(data.patientName)}",
        content_sections=content,
        accent=accent,
        cta_url=f"{FRONTEND_URL}/admin/emergency-requests",
        cta_label="View Emergency Requests",
        is_admin_email=True,
    )
    icon = {"Critical": "🚨", "Urgent": "⏰"}.get(label, "📅")
    return RenderedEmail(
        f"{icon} {label.upper()} Emergency Nursing Request - {text(data.patientName)}", mjml
    )


def new_medicine_order(data: NotificationRequest) -> RenderedEmail:
    content = paragraph(f"<strong>{safe(data.patientName)}</strong> has placed a medicine order.")
    content += detail_rows(
        [
            ("Order ID", safe(data.orderId)),
            ("Pharmacy", safe(data.pharmacyName)),
            ("Delivery Address", safe(data.deliveryAddress)),
            ("Patient Phone", safe(data.patientPhone)),
        ]
    )
    mjml = get_base_template(
        title="New Medicine Order",
        preview_text=f"New medicine order {text(data.orderId)}",
        content_sections=content,
        accent=THEME["pharmacy"],
        cta_url=f"{FRONTEND_URL}/admin/medicine-orders",
        cta_label="View Medicine Orders",
        is_admin_email=True,
    )
    return RenderedEmail(f"💊 New Medicine Order - {text(data.orderId)}", mjml)


ADMIN_TEMPLATES = {
    ("prescription", False): new_prescription,
    ("prescription", True): confirmed_prescription,
    ("order", False): new_lab_order,
    ("order", True): confirmed_lab_order,
    ("doctor_appointment", False): new_doctor_appointment,
    ("doctor_appointment", True): confirmed_doctor_appointment,
    ("nurse_booking", False): new_nurse_booking,
    ("nurse_booking", True): confirmed_nurse_booking,
    ("emergency_request", False): new_emergency_request,
    ("medicine_order", False): new_medicine_order,
}
