"""Resolve which business a call belongs to."""

import logging

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from booking_agent.db.models import Business

logger = logging.getLogger(__name__)


def find_business(db: Session, phone: str | None, assistant_id: str | None) -> Business | None:
    """Match on the business's Twilio number or its voice assistant id."""
    conditions = []
    if phone:
        conditions.append(Business.twilio_phone_number == phone)
    if assistant_id:
        conditions.append(Business.vapi_assistant_id == assistant_id)

    if not conditions:
        logger.warning("Cannot resolve business: no phone number or assistant id on call")
        return None

    business = db.scalar(select(Business).where(or_(*conditions)).order_by(Business.id.asc()))
    if business is None:
        logger.warning(
            "No business found for phone=%s assistant_id=%s", phone, assistant_id
        )
    return business
