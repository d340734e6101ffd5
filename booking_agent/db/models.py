"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, func, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booking_agent.db.session import Base


class Business(Base):
    """A shop whose voice assistant takes bookings."""

    __tablename__ = "businesses"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    twilio_phone_number: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        unique=True,
        index=True,
    )
    vapi_assistant_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        unique=True,
        index=True,
    )

    google_access_token: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    google_refresh_token: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    bookings: Mapped[list["Booking"]] = relationship(
        back_populates="business",
        cascade="all, delete-orphan",
    )


class Booking(Base):
    """An appointment captured from a completed call."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    business_id: Mapped[int] = mapped_column(
        ForeignKey("businesses.id"),
        nullable=False,
        index=True,
    )

    customer_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    customer_phone: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    service_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False)

    # Stored as text: the time normalizer may pass an unrecognized phrase through.
    appointment_date: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    appointment_time: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    special_requests: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    vapi_call_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)

    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="confirmed",
        server_default=text("'confirmed'"),
    )
    duration_minutes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=30,
        server_default=text("30"),
    )
    google_calendar_event_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    business: Mapped["Business"] = relationship(back_populates="bookings")
