"""Appointment reminder emails for the patient and the doctor"""

from ....config import FRONTEND_URL
from ..formatting import safe, text
from ..schemas import AppointmentReminderRequest
from .base import THEME, RenderedEmail, callout, detail_rows, get_base_template, paragraph


def _starts_in(data: AppointmentReminderRequest) -> str:
    if data.minutesUntil is None:
        return "soon"
    return f"in {data.minutesUntil} minutes"


def patient_reminder(data: AppointmentReminderRequest) -> RenderedEmail:
    content = paragraph(f"Dear <strong>{safe(data.patientName, 'Patient')}</strong>,")
    content += paragraph(
        f"Your appointment with Dr. {safe(data.doctorName)} starts {_starts_in(data)}."
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
    content += callout(
        "💡 <strong>Reminder:</strong> Keep your previous reports and prescriptions at hand.",
        "#dbeafe",
        "#3b82f6",
        "#1e40af",
    )
    mjml = get_base_template(
        title="⏰ Appointment Reminder",
        preview_text=f"Your appointment starts {_starts_in(data)}",
        content_sections=content,
        accent=THEME["doctor"],
        cta_url=f"{FRONTEND_URL}/my-bookings",
        cta_label="View My Appointments",
    )
    return RenderedEmail(
        f"⏰ Reminder: Appointment with Dr. {text(data.doctorName)} starts {_starts_in(data)}",
        mjml,
    )


def doctor_reminder(data: AppointmentReminderRequest) -> RenderedEmail:
    content = paragraph(f"Dear Dr. {safe(data.doctorName)},")
    content += paragraph(
        f"Your appointment with {safe(data.patientName, 'a patient')} starts {_starts_in(data)}."
    )
    content += detail_rows(
        [
            ("Patient", safe(data.patientName)),
            ("📅 Date", safe(data.appointmentDate)),
            ("🕐 Time", safe(data.appointmentTime)),
            ("Consultation Type", safe(data.consultationType, "Physical Visit")),
        ],
        accent=THEME["doctor"],
    )
    mjml = get_base_template(
        title="⏰ Upcoming Appointment",
        preview_text=f"Appointment with {text(data.patientName)} starts {_starts_in(data)}",
        content_sections=content,
        accent=THEME["doctor"],
        cta_url=f"{FRONTEND_URL}/doctor-dashboard",
        cta_label="Open Dashboard",
    )
    return RenderedEmail(
        f"⏰ Upcoming Appointment with {text(data.patientName)} - {_starts_in(data)}", mjml
    )
