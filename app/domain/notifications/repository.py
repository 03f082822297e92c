"""Provider directory - read-only recipient lookups against the marketplace tables"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Doctor, MedicalStore, Nurse, Profile

logger = logging.getLogger(__name__)

PROVIDER_MODELS = {
    "doctor": Doctor,
    "nurse": Nurse,
    "pharmacy": MedicalStore,
}


class ProviderDirectory:
    """
    Resolves email addresses for providers and patients.

    A failed or empty lookup is logged and reported as "no recipient"; it never
    aborts the surrounding dispatch.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_provider_email(self, provider_kind: str, provider_id: Optional[str]) -> Optional[str]:
        """Email of a single doctor, nurse or pharmacy row"""
        if not provider_id:
            return None

        model = PROVIDER_MODELS.get(provider_kind)
        if model is None:
            logger.warning(f"⚠️ No provider table for kind '{provider_kind}'")
            return None

        try:
            email = self.db.query(model.email).filter(model.id == provider_id).scalar()
        except Exception as e:
            logger.error(f"❌ Failed to look up {provider_kind} {provider_id}: {e}")
            return None

        if not email:
            logger.info(f"No email on file for {provider_kind} {provider_id}")
            return None
        return email

    def get_emergency_nurse_emails(self) -> list[str]:
        """Emails of every approved nurse that accepts emergency requests"""
        try:
            rows = (
                self.db.query(Nurse.email)
                .filter(Nurse.status == "approved", Nurse.emergency_available.is_(True))
                .order_by(Nurse.id)
                .all()
            )
        except Exception as e:
            logger.error(f"❌ Failed to load emergency-available nurses: {e}")
            return []

        return [email for (email,) in rows if email]

    def get_user_email(self, user_id: Optional[str]) -> Optional[str]:
        """Email of a marketplace account by user id"""
        if not user_id:
            return None
        return self.db.query(Profile.email).filter(Profile.user_id == user_id).scalar()
