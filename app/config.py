import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mypaklabs.db")

# Frontend base URL used for links inside emails
FRONTEND_URL = os.getenv("FRONTEND_URL", "https://mypaklab.lovable.app")

# Resend Email Configuration
RESEND_API_KEY = os.getenv("RESEND_API_KEY")
# Primary sender - domain must be verified in Resend
EMAIL_FROM_ADDRESS = os.getenv("EMAIL_FROM_ADDRESS", "MyPakLabs <support@mypaklabs.com>")
# Used once when Resend rejects the primary sender because its domain is not verified
EMAIL_FALLBACK_FROM_ADDRESS = os.getenv(
    "EMAIL_FALLBACK_FROM_ADDRESS", "MyPakLabs <onboarding@resend.dev>"
)

# Platform operator inbox, notified on every booking event
ADMIN_NOTIFICATION_EMAIL = os.getenv("ADMIN_NOTIFICATION_EMAIL", "mhmmdaqib@gmail.com")

SUPPORT_PHONE = os.getenv("SUPPORT_PHONE", "+92 316 7523434")
SUPPORT_EMAIL = os.getenv("SUPPORT_EMAIL", "support@mypaklabs.com")

# Lab booking vouchers are valid for this many days after the booking date
LAB_VOUCHER_VALIDITY_DAYS = int(os.getenv("LAB_VOUCHER_VALIDITY_DAYS", "7"))

CORS_ALLOW_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
]
