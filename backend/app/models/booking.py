"""
Booking model representing a user's reservation for an event.

Key design decisions:
- `event_id` is a weak reference (no foreign key): bookings may predate the event
- `event_title` is denormalized so the event cascade can also match by title
- No unique constraint: the same user may book the same event several times
- Status field allows cancellation without deleting records
"""

import enum
import uuid

from sqlalchemy import Column, Integer, String, Index, CheckConstraint

from app.db.base import Base, TimestampMixin


class BookingStatus(str, enum.Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id = Column(String(200), nullable=True, index=True)
    event_title = Column(String(200), nullable=False, index=True)
    user_email = Column(String(200), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    status = Column(String(20), nullable=False, default=BookingStatus.CONFIRMED.value)

    __table_args__ = (
        CheckConstraint("quantity BETWEEN 1 AND 10", name="check_booking_quantity_range"),
        CheckConstraint("status IN ('confirmed', 'cancelled')", name="check_booking_status"),
        # Serves both the per-user listing and the user+title cancel lookup
        Index("ix_bookings_user_email_created", "user_email", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_email}, event={self.event_title}, status={self.status})>"
