"""Environment configuration for the booking agent."""

import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env (for local development)
load_dotenv()

logger = logging.getLogger(__name__)


def _csv_env(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./booking_agent.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Deployment-specific proper nouns that look like customer names in summaries.
ASSISTANT_NAME = os.getenv("ASSISTANT_NAME", "Sarah")
EXCLUDED_NAMES = _csv_env("EXCLUDED_NAMES", "Sam,Barbershop")

TWILIO_ACCOUNT_SID = os.getenv("TWILIO_ACCOUNT_SID")
TWILIO_AUTH_TOKEN = os.getenv("TWILIO_AUTH_TOKEN")

SENDGRID_API_KEY = os.getenv("SENDGRID_API_KEY")
SENDGRID_FROM_EMAIL = os.getenv("SENDGRID_FROM_EMAIL")

GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
CALENDAR_TIMEZONE = os.getenv("CALENDAR_TIMEZONE", "America/Toronto")

if not TWILIO_ACCOUNT_SID or not TWILIO_AUTH_TOKEN:
    logger.warning("Twilio credentials not set. Customer SMS will fail at runtime.")

if not SENDGRID_API_KEY:
    logger.warning("SENDGRID_API_KEY not set. Owner e-mail notifications will fail at runtime.")
