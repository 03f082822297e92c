"""Notification router - the single booking-event endpoint used by the marketplace pages"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ...database import get_db
from ...email_service import EmailService
from .repository import ProviderDirectory
from .schemas import AppointmentReminderRequest, GetUserEmailRequest, NotificationRequest
from .service import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notifications"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

NOTIFICATION_PATHS = ("/send-admin-notification", "/")


def get_email_service(request: Request) -> EmailService:
    """The EmailService built at application startup"""
    return request.app.state.email_service


def get_notification_service(
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> NotificationService:
    """Dependency injection for NotificationService"""
    return NotificationService(email_service=email_service, directory=ProviderDirectory(db))


def _json(status_code: int, content: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


async def send_notification(
    request: Request,
    service: NotificationService = Depends(get_notification_service),
):
    """
    Handle one booking event, or one of the auxiliary actions:
    - {"action": "get_user_email", "userId": ...}
    - {"action": "send_appointment_reminder", ...}
    """
    try:
        body = await request.json()
        action = body.get("action") if isinstance(body, dict) else None

        if action == "get_user_email":
            lookup = GetUserEmailRequest.model_validate(body)
            return _json(200, service.get_user_email(lookup.userId))

        if action == "send_appointment_reminder":
            reminder = AppointmentReminderRequest.model_validate(body)
            status_code, summary = await service.send_appointment_reminder(reminder)
            return _json(status_code, summary.model_dump(mode="json"))

        data = NotificationRequest.model_validate(body)
        status_code, summary = await service.dispatch(data)
        return _json(status_code, summary.model_dump(mode="json"))

    except Exception as e:
        logger.error(f"❌ Error sending notification: {e}")
        return _json(500, {"error": str(e) or type(e).__name__})


async def notification_preflight():
    """CORS preflight"""
    return Response(status_code=200, headers=CORS_HEADERS)


for path in NOTIFICATION_PATHS:
    router.add_api_route(path, send_notification, methods=["POST"])
    router.add_api_route(path, notification_preflight, methods=["OPTIONS"])
