"""
Event model.

Key design decisions:
- `date` is stored as `yyyy-mm-dd` text; listing sorts it lexicographically
- `status` is a soft-delete flag (active -> deleted, never back)
- Index on (status, date) serves the active-events listing
"""

import enum
import uuid

from sqlalchemy import Column, String, Float, Index, CheckConstraint

from app.db.base import Base, TimestampMixin


class EventStatus(str, enum.Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(200), nullable=False)
    city = Column(String(100), nullable=False)
    date = Column(String(64), nullable=False)
    price = Column(Float, nullable=False)
    venue = Column(String(200), nullable=False)
    image = Column(String(500), nullable=True)
    description = Column(String(1000), nullable=True)
    status = Column(String(20), nullable=False, default=EventStatus.ACTIVE.value)

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_event_price_non_negative"),
        CheckConstraint("status IN ('active', 'deleted')", name="check_event_status"),
        Index("ix_events_status_date", "status", "date"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title}, status={self.status})>"
