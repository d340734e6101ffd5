from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BookingInfo(BaseModel):
    """Candidate booking extracted from one call; immutable once built."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    customer_phone: str | None = None
    service: str = "appointment"
    date: str | None = None
    time: str | None = None
    special_requests: str | None = None


class CallMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    call_id: str | None = None
    assistant_id: str | None = None
    business_phone: str | None = None


class BookingListItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    business_id: int
    customer_name: str | None
    customer_phone: str
    service_ids: list[str]
    appointment_date: str | None
    appointment_time: str | None
    special_requests: str | None
    vapi_call_id: str | None
    status: str
    google_calendar_event_id: str | None
    created_at: datetime


class WebhookResult(BaseModel):
    status: str
    booking_id: int | None = None
    appointment_date: str | None = None
    appointment_time: str | None = None
    missing_fields: list[str] = []
