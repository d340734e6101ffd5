"""Booking persistence helpers."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking_agent.db.models import Booking, Business
from booking_agent.extraction.normalizers import normalize_date, normalize_time
from booking_agent.schemas.booking import BookingInfo

logger = logging.getLogger(__name__)

CONFIRMED = "confirmed"

REQUIRED_FIELDS = ("customer_phone", "name", "date", "time")


def missing_fields(info: BookingInfo) -> list[str]:
    return [field for field in REQUIRED_FIELDS if not getattr(info, field)]


def save_booking(
    db: Session,
    business: Business,
    info: BookingInfo,
    call_id: str | None,
) -> Booking:
    """Normalize and insert one booking; storage errors propagate."""
    appointment_date = normalize_date(info.date)
    if info.date and appointment_date is None:
        logger.warning("Saving booking without a date; could not normalize %r", info.date)

    booking = Booking(
        business_id=business.id,
        customer_name=info.name,
        customer_phone=info.customer_phone,
        service_ids=[info.service],
        appointment_date=appointment_date,
        appointment_time=normalize_time(info.time),
        special_requests=info.special_requests,
        vapi_call_id=call_id,
        status=CONFIRMED,
    )

    try:
        db.add(booking)
        db.commit()
        db.refresh(booking)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error saving booking for business %s", business.id)
        raise

    logger.info(
        "Booking created",
        extra={
            "booking_id": booking.id,
            "business_id": business.id,
        },
    )
    return booking


def list_bookings(db: Session, business_id: int) -> list[Booking]:
    return list(
        db.scalars(
            select(Booking)
            .where(Booking.business_id == business_id)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
        )
    )
