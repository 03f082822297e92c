"""
Email delivery through Resend.

Templates are written in MJML and compiled to HTML before sending. Each send
is attempted from the primary (domain-verified) sender; when Resend rejects it
because that domain is not verified yet, the send is retried exactly once from
the fallback sender. Delivery errors are recorded on the result, not raised.
"""

import io
import logging
from typing import Any, Callable, Optional, Union

import resend
from mjml import mjml_to_html

from .config import EMAIL_FALLBACK_FROM_ADDRESS, EMAIL_FROM_ADDRESS, RESEND_API_KEY
from .domain.notifications.schemas import DeliveryAttempt, DeliveryResult

logger = logging.getLogger(__name__)


class EmailServiceNotConfigured(Exception):
    """Raised when no Resend API key is available"""


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(io.StringIO(mjml_content.strip()))
        # mjml_to_html returns a dict with 'html' and 'errors' keys
        if isinstance(result, dict):
            if result.get("errors"):
                logger.warning(f"MJML compilation warnings: {result['errors']}")
            return result.get("html", "")
        return str(getattr(result, "html", result))
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise Exception(f"Failed to compile MJML template: {str(e)}") from e


def describe_error(error: Exception) -> dict[str, Any]:
    """Flatten a Resend (or transport) exception into a JSON-safe dict"""
    status_code = getattr(error, "code", None) or getattr(error, "status_code", None)
    try:
        status_code = int(status_code) if status_code is not None else None
    except (TypeError, ValueError):
        status_code = None

    message = getattr(error, "message", None) or str(error)
    return {
        "name": getattr(error, "error_type", None) or type(error).__name__,
        "statusCode": status_code,
        "message": str(message),
    }


def is_domain_not_verified(error: dict[str, Any]) -> bool:
    """True for Resend's 'domain is not verified' rejection of the sender address"""
    message = (error.get("message") or "").lower()
    return (
        error.get("name") == "validation_error"
        and error.get("statusCode") == 403
        and "domain" in message
        and "not verified" in message
    )


class EmailService:
    """
    Sends compiled MJML emails via Resend.

    ``sender`` defaults to ``resend.Emails.send`` and can be replaced with any
    callable taking the Resend params dict, which is how tests capture sends.
    """

    def __init__(
        self,
        api_key: Optional[str] = RESEND_API_KEY,
        from_address: str = EMAIL_FROM_ADDRESS,
        fallback_from_address: str = EMAIL_FALLBACK_FROM_ADDRESS,
        sender: Optional[Callable[[dict], Any]] = None,
    ):
        self.api_key = api_key
        self.from_address = from_address
        self.fallback_from_address = fallback_from_address
        self._sender = sender

        if sender is None:
            if api_key:
                resend.api_key = api_key
            else:
                logger.warning("⚠️ RESEND_API_KEY missing - emails will fail until it is configured")

    def _deliver(self, params: dict) -> Any:
        if self._sender is not None:
            return self._sender(params)
        if not self.api_key:
            raise EmailServiceNotConfigured("Email service not configured")
        return resend.Emails.send(params)

    def _attempt(
        self,
        sender: str,
        recipients: list[str],
        subject: str,
        html_content: str,
        attachments: Optional[list[dict]],
    ) -> DeliveryAttempt:
        email_data = {
            "from": sender,
            "to": recipients,
            "subject": subject,
            "html": html_content,
        }
        if attachments:
            email_data["attachments"] = [
                {"filename": attachment["filename"], "content": attachment["content"]}
                for attachment in attachments
            ]

        try:
            response = self._deliver(email_data)
        except Exception as e:
            error = describe_error(e)
            logger.error(f"❌ Email send error from {sender} to {recipients}: {error}")
            return DeliveryAttempt(sender=sender, error=error)

        data = response if isinstance(response, dict) else {"id": getattr(response, "id", None)}
        logger.info(f"✅ Email sent successfully via Resend: {data}")
        return DeliveryAttempt(sender=sender, data=data)

    async def send(
        self,
        to: Union[str, list[str]],
        subject: str,
        mjml_content: str,
        attachments: Optional[list[dict]] = None,
    ) -> DeliveryResult:
        """
        Send an email, falling back to the alternate sender on an unverified domain

        Args:
            to: Recipient email(s); a list is sent as one message to all of them
            subject: Email subject line
            mjml_content: MJML template content (will be compiled to HTML)
            attachments: Optional list of {filename, content} with base64 content

        Returns:
            DeliveryResult with the primary attempt and the fallback attempt, if any
        """
        html_content = compile_mjml_to_html(mjml_content)
        recipients = [to] if isinstance(to, str) else list(to)

        logger.info(f"📧 Sending email via Resend to: {recipients}")
        primary = self._attempt(self.from_address, recipients, subject, html_content, attachments)

        fallback = None
        if primary.error and is_domain_not_verified(primary.error):
            logger.warning(
                f"⚠️ Sender domain not verified, retrying from {self.fallback_from_address}"
            )
            fallback = self._attempt(
                self.fallback_from_address, recipients, subject, html_content, attachments
            )

        return DeliveryResult(primary=primary, fallback=fallback)
