"""Google Calendar events for stored bookings, using each business's OAuth tokens."""

import logging
from datetime import datetime, timedelta

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from booking_agent.core import config
from booking_agent.db.models import Booking, Business

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
SCOPES = ["https://www.googleapis.com/auth/calendar"]


def has_calendar(business: Business) -> bool:
    return bool(business.google_access_token and business.google_refresh_token)


def appointment_start(booking: Booking) -> datetime | None:
    """Local start time, or ``None`` when date/time were not normalized."""
    if not booking.appointment_date or not booking.appointment_time:
        return None
    try:
        return datetime.strptime(
            f"{booking.appointment_date} {booking.appointment_time}", "%Y-%m-%d %H:%M:%S"
        )
    except ValueError:
        return None


def build_event(booking: Booking, start: datetime) -> dict:
    services = " & ".join(booking.service_ids)
    end = start + timedelta(minutes=booking.duration_minutes or 30)
    description = (
        f"Customer: {booking.customer_name}\n"
        f"Phone: {booking.customer_phone}\n"
        f"Service: {services}\n"
        f"Special Requests: {booking.special_requests or 'None'}\n"
        "\n"
        "Booked via BookingAgent"
    )
    return {
        "summary": f"{services} - {booking.customer_name}",
        "description": description,
        "start": {"dateTime": start.isoformat(), "timeZone": config.CALENDAR_TIMEZONE},
        "end": {"dateTime": end.isoformat(), "timeZone": config.CALENDAR_TIMEZONE},
        "reminders": {
            "useDefault": False,
            "overrides": [
                {"method": "email", "minutes": 24 * 60},
                {"method": "popup", "minutes": 30},
            ],
        },
    }


def _calendar_client(business: Business):
    credentials = Credentials(
        token=business.google_access_token,
        refresh_token=business.google_refresh_token,
        token_uri=TOKEN_URI,
        client_id=config.GOOGLE_CLIENT_ID,
        client_secret=config.GOOGLE_CLIENT_SECRET,
        scopes=SCOPES,
    )
    return build("calendar", "v3", credentials=credentials, cache_discovery=False)


def create_calendar_event(business: Business, booking: Booking) -> str | None:
    """Insert the booking into the business's primary calendar and return the event id."""
    if not has_calendar(business):
        logger.info("Business %s has not connected Google Calendar", business.id)
        return None

    start = appointment_start(booking)
    if start is None:
        logger.warning(
            "Booking %s has no usable date/time (%r, %r); skipping calendar event",
            booking.id,
            booking.appointment_date,
            booking.appointment_time,
        )
        return None

    service = _calendar_client(business)
    created = (
        service.events()
        .insert(calendarId="primary", body=build_event(booking, start))
        .execute()
    )

    event_id = created["id"]
    logger.info("Calendar event created: %s", event_id)
    return event_id
