"""Twilio client configuration for customer SMS."""

import logging

from twilio.rest import Client

from booking_agent.core.config import TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN

logger = logging.getLogger(__name__)

client: Client | None = None
if TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN:
    client = Client(TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN)


def send_sms(to: str, body: str, from_: str) -> str:
    """Send an SMS via Twilio and return the message SID."""
    if client is None:
        raise RuntimeError("Twilio client is not configured.")

    if not to.startswith("+"):
        raise ValueError("Phone number must be in E.164 format.")

    message = client.messages.create(
        from_=from_,
        to=to,
        body=body,
    )

    logger.info("SMS sent to %s (SID: %s)", to, message.sid)
    return message.sid
