"""Single entry point turning a raw end-of-call webhook payload into BookingInfo."""

import logging
from collections.abc import Mapping
from typing import Any

from booking_agent.extraction.names import extract_name
from booking_agent.extraction.schedule import extract_date, extract_time
from booking_agent.extraction.services import extract_service
from booking_agent.extraction.special_requests import extract_special_requests
from booking_agent.schemas.booking import BookingInfo, CallMetadata

logger = logging.getLogger(__name__)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def unwrap_message(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    """Fields live either at the payload root or under a ``message`` wrapper."""
    payload = _mapping(payload)
    message = payload.get("message")
    if isinstance(message, Mapping) and message:
        return message
    return payload


def extract_booking_info(payload: Mapping[str, Any]) -> BookingInfo:
    message = unwrap_message(payload)

    transcript = _text(message.get("transcript")) or _text(
        _mapping(message.get("artifact")).get("transcript")
    )
    summary = _text(message.get("summary")) or _text(
        _mapping(message.get("analysis")).get("summary")
    )
    customer = _mapping(message.get("customer"))

    logger.debug("Summary: %s", summary)

    name = extract_name(summary, transcript)
    return BookingInfo(
        name=name,
        customer_phone=_optional_str(customer.get("number")),
        service=extract_service(summary),
        date=extract_date(summary),
        time=extract_time(summary),
        special_requests=extract_special_requests(summary, transcript, customer_name=name),
    )


def extract_call_metadata(payload: Mapping[str, Any]) -> CallMetadata:
    message = unwrap_message(payload)
    call = _mapping(message.get("call"))

    assistant_id = call.get("assistantId") or _mapping(message.get("assistant")).get("id")

    return CallMetadata(
        call_id=_optional_str(call.get("id")),
        assistant_id=_optional_str(assistant_id),
        business_phone=_optional_str(_mapping(message.get("phoneNumber")).get("number")),
    )
