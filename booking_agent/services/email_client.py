"""SendGrid client configuration for owner e-mail."""

import logging

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from booking_agent.core.config import SENDGRID_API_KEY, SENDGRID_FROM_EMAIL

logger = logging.getLogger(__name__)

client: SendGridAPIClient | None = None
if SENDGRID_API_KEY:
    client = SendGridAPIClient(SENDGRID_API_KEY)


def send_email(to: str, subject: str, body: str, sender: str | None = None) -> int:
    """Send a plain-text e-mail and return SendGrid's HTTP status code.

    Without an explicit ``sender`` the message goes out from
    ``SENDGRID_FROM_EMAIL``, or from the recipient itself, which SendGrid
    accepts once that address is a verified sender.
    """
    if client is None:
        raise RuntimeError("SendGrid client is not configured.")

    message = Mail(
        from_email=sender or SENDGRID_FROM_EMAIL or to,
        to_emails=to,
        subject=subject,
        plain_text_content=body,
    )
    response = client.send(message)

    logger.info("Email sent to %s (status: %s)", to, response.status_code)
    return response.status_code
