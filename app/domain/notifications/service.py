"""Notification service - turns one booking event into a voucher and audience emails"""

import logging
from datetime import datetime
from typing import Optional

from ...config import ADMIN_NOTIFICATION_EMAIL
from ...email_service import EmailService
from .pdf_service import VoucherPDF, generate_voucher_pdf
from .repository import ProviderDirectory
from .schemas import (
    AppointmentReminderRequest,
    DeliveryResult,
    NotificationRequest,
    NotificationSummary,
    NotificationType,
    ReminderSummary,
)
from .templates import (
    doctor_reminder,
    patient_reminder,
    render_admin_email,
    render_customer_email,
    render_provider_email,
)

logger = logging.getLogger(__name__)

# Booking types whose provider is a single row looked up by id
PROVIDER_LOOKUPS = {
    NotificationType.DOCTOR_APPOINTMENT.value: ("doctor", "doctorId"),
    NotificationType.NURSE_BOOKING.value: ("nurse", "nurseId"),
    NotificationType.MEDICINE_ORDER.value: ("pharmacy", "pharmacyId"),
}

# Booking types that attach the voucher to the admin email when one was generated
ADMIN_ATTACHMENT_TYPES = {
    NotificationType.ORDER.value,
    NotificationType.PRESCRIPTION.value,
    NotificationType.DOCTOR_APPOINTMENT.value,
    NotificationType.NURSE_BOOKING.value,
}


class NotificationService:
    """
    Sequential dispatch of one booking event:
    voucher PDF -> admin email -> provider email (new bookings only) -> customer email.
    """

    def __init__(
        self,
        email_service: EmailService,
        directory: ProviderDirectory,
        admin_email: str = ADMIN_NOTIFICATION_EMAIL,
    ):
        self.email_service = email_service
        self.directory = directory
        self.admin_email = admin_email

    def resolve_provider_recipients(self, data: NotificationRequest) -> list[str]:
        """Who gets the provider alert for a newly created booking"""
        if data.type == NotificationType.EMERGENCY_REQUEST.value:
            recipients = self.directory.get_emergency_nurse_emails()
            logger.info(f"🚨 Emergency broadcast to {len(recipients)} nurses")
            return recipients

        lookup = PROVIDER_LOOKUPS.get(data.type)
        if lookup is None:
            return []

        provider_kind, id_field = lookup
        email = self.directory.get_provider_email(provider_kind, getattr(data, id_field))
        return [email] if email else []

    async def dispatch(
        self, data: NotificationRequest, generated_at: Optional[datetime] = None
    ) -> tuple[int, NotificationSummary]:
        """
        Send every email this booking event calls for.

        Returns (http_status, summary): 200 when the admin email and, if a customer
        address was given, the customer email were delivered; 502 otherwise.
        Raises UnknownNotificationType for an unrecognised ``type``.
        """
        logger.info(f"📨 Notification request: type={data.type}, status={data.status}")

        admin_message = render_admin_email(data)

        voucher: Optional[VoucherPDF] = generate_voucher_pdf(data, generated_at=generated_at)
        attachments = [voucher.as_attachment()] if voucher else None

        admin_to = data.adminEmail or self.admin_email
        logger.info(f"Sending admin email to: {admin_to}")
        admin_result = await self.email_service.send(
            to=admin_to,
            subject=admin_message.subject,
            mjml_content=admin_message.mjml,
            attachments=attachments if data.type in ADMIN_ATTACHMENT_TYPES else None,
        )

        provider_result: Optional[DeliveryResult] = None
        provider_count = 0
        if not data.is_confirmation:
            provider_message = render_provider_email(data)
            recipients = self.resolve_provider_recipients(data) if provider_message else []
            if recipients:
                provider_count = len(recipients)
                logger.info(f"Sending provider email to {provider_count} recipient(s)")
                provider_result = await self.email_service.send(
                    to=recipients,
                    subject=provider_message.subject,
                    mjml_content=provider_message.mjml,
                )

        customer_result: Optional[DeliveryResult] = None
        if data.patientEmail:
            customer_message = render_customer_email(data)
            customer_attachments = None
            if voucher and (data.is_confirmation or data.type == NotificationType.ORDER.value):
                customer_attachments = attachments
            logger.info(f"Sending customer email to: {data.patientEmail}")
            customer_result = await self.email_service.send(
                to=data.patientEmail,
                subject=customer_message.subject,
                mjml_content=customer_message.mjml,
                attachments=customer_attachments,
            )

        success = admin_result.ok and (customer_result is None or customer_result.ok)
        summary = NotificationSummary(
            success=success,
            adminEmail=admin_result,
            customerEmail=customer_result,
            providerEmail=provider_result,
            pdfGenerated=voucher is not None,
            providerEmailsCount=provider_count,
            status=data.status,
        )

        if success:
            logger.info(f"✅ Notifications sent for {data.type}")
        else:
            logger.warning(f"⚠️ Some notifications failed for {data.type}")
        return (200 if success else 502), summary

    async def send_appointment_reminder(
        self, data: AppointmentReminderRequest
    ) -> tuple[int, ReminderSummary]:
        """Remind the patient and the doctor of an appointment that starts soon"""
        logger.info(f"⏰ Appointment reminder for {data.appointmentId}")

        patient_result: Optional[DeliveryResult] = None
        if data.patientEmail:
            message = patient_reminder(data)
            patient_result = await self.email_service.send(
                to=data.patientEmail, subject=message.subject, mjml_content=message.mjml
            )

        doctor_result: Optional[DeliveryResult] = None
        if data.doctorEmail:
            message = doctor_reminder(data)
            doctor_result = await self.email_service.send(
                to=data.doctorEmail, subject=message.subject, mjml_content=message.mjml
            )

        attempted = [r for r in (patient_result, doctor_result) if r is not None]
        success = all(r.ok for r in attempted)
        summary = ReminderSummary(
            success=success, patientEmail=patient_result, doctorEmail=doctor_result
        )
        return (200 if success else 502), summary

    def get_user_email(self, user_id: Optional[str]) -> dict:
        """Resolve an account's email; lookup errors are reported, never raised"""
        try:
            email = self.directory.get_user_email(user_id)
        except Exception as e:
            logger.error(f"❌ Failed to look up email for user {user_id}: {e}")
            return {"email": None, "error": str(e)}

        if not email:
            logger.info(f"No email found for user {user_id}")
        return {"email": email}
