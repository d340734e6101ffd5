"""Best-effort side effects after a booking is stored.

Each step fails independently: errors are logged and never abort the request.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from booking_agent.db.models import Booking, Business
from booking_agent.services import calendar_service, email_client, twilio_client

logger = logging.getLogger(__name__)


@dataclass
class NotificationReport:
    sms_sent: bool = False
    email_sent: bool = False
    calendar_event_id: str | None = None


def customer_sms_body(business: Business, booking: Booking) -> str:
    return (
        f"Thanks for booking with {business.name}! "
        f"Your {' and '.join(booking.service_ids)} is on {booking.appointment_date} "
        f"at {booking.appointment_time}. We'll see you at {business.address}."
    )


def owner_email(business: Business, booking: Booking) -> tuple[str, str]:
    """Return (subject, body) for the owner notification."""
    subject = f"New Booking: {booking.customer_name} - {booking.appointment_date}"
    body = (
        f"New Booking at {business.name}!\n"
        "\n"
        f"Customer: {booking.customer_name}\n"
        f"Phone: {booking.customer_phone}\n"
        f"Service: {' and '.join(booking.service_ids)}\n"
        f"Date: {booking.appointment_date}\n"
        f"Time: {booking.appointment_time}\n"
        f"Special Requests: {booking.special_requests or 'None'}\n"
        "\n"
        "Please add this to your calendar.\n"
    )
    return subject, body


def send_customer_sms(business: Business, booking: Booking) -> bool:
    try:
        twilio_client.send_sms(
            to=booking.customer_phone,
            body=customer_sms_body(business, booking),
            from_=business.twilio_phone_number,
        )
    except Exception:
        logger.exception("SMS error for booking %s", booking.id)
        return False
    return True


def send_owner_email(business: Business, booking: Booking) -> bool:
    if not business.email:
        logger.info("Business %s has no e-mail address; skipping owner notification", business.id)
        return False

    subject, body = owner_email(business, booking)
    try:
        email_client.send_email(to=business.email, subject=subject, body=body)
    except Exception:
        logger.exception("Email error for booking %s", booking.id)
        return False
    return True


def sync_calendar(db: Session, business: Business, booking: Booking) -> str | None:
    try:
        event_id = calendar_service.create_calendar_event(business, booking)
        if event_id:
            booking.google_calendar_event_id = event_id
            db.commit()
        return event_id
    except Exception:
        db.rollback()
        logger.exception("Calendar error for booking %s", booking.id)
        return None


def notify_booking(db: Session, business: Business, booking: Booking) -> NotificationReport:
    report = NotificationReport(
        sms_sent=send_customer_sms(business, booking),
        email_sent=send_owner_email(business, booking),
        calendar_event_id=sync_calendar(db, business, booking),
    )
    logger.info(
        "Notifications for booking %s: sms=%s email=%s calendar=%s",
        booking.id,
        report.sms_sent,
        report.email_sent,
        report.calendar_event_id,
    )
    return report
