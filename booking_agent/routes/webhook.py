"""End-of-call webhook from the voice assistant.

Transport layer only.
Extraction and persistence are delegated to their modules.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from booking_agent.core.domain_exceptions import DomainException
from booking_agent.core.error_codes import ErrorCode
from booking_agent.db.session import get_db
from booking_agent.extraction import extract_booking_info, extract_call_metadata
from booking_agent.schemas.booking import WebhookResult
from booking_agent.schemas.common import APIResponse
from booking_agent.services.booking_service import missing_fields, save_booking
from booking_agent.services.business_service import find_business
from booking_agent.services.notification_service import notify_booking

router = APIRouter(prefix="/webhook", tags=["webhook"])
logger = logging.getLogger(__name__)


async def _read_payload(request: Request) -> dict[str, Any]:
    try:
        payload = await request.json()
    except ValueError:
        raise DomainException(
            code=ErrorCode.VALIDATION_ERROR,
            message="Request body must be JSON.",
        ) from None

    if not isinstance(payload, dict):
        raise DomainException(
            code=ErrorCode.VALIDATION_ERROR,
            message="Request body must be a JSON object.",
        )
    return payload


@router.post("/booking", response_model=APIResponse[WebhookResult])
async def receive_booking(
    request: Request,
    db: Session = Depends(get_db),
):
    payload = await _read_payload(request)
    metadata = extract_call_metadata(payload)

    logger.info(
        "Received booking webhook: call_id=%s assistant_id=%s",
        metadata.call_id,
        metadata.assistant_id,
    )

    business = await run_in_threadpool(
        find_business, db, metadata.business_phone, metadata.assistant_id
    )
    if business is None:
        raise DomainException(
            code=ErrorCode.BUSINESS_NOT_FOUND,
            message="Business not found.",
            status_code=404,
        )

    info = extract_booking_info(payload)
    logger.info("Extracted booking info: %s", info.model_dump())

    missing = missing_fields(info)
    if missing:
        logger.info("Incomplete booking for call %s; missing %s", metadata.call_id, missing)
        return APIResponse.ok(WebhookResult(status="incomplete", missing_fields=missing))

    # Database writes and provider calls block, so keep them off the event loop.
    booking = await run_in_threadpool(save_booking, db, business, info, metadata.call_id)
    await run_in_threadpool(notify_booking, db, business, booking)

    return APIResponse.ok(
        WebhookResult(
            status="booked",
            booking_id=booking.id,
            appointment_date=booking.appointment_date,
            appointment_time=booking.appointment_time,
        )
    )
