"""
Pydantic schemas for booking-related request/response validation.

Request fields are typed `Any` on purpose: clients send strings for
numbers and several quantity spellings, and the normalizer decides what
each value means. Responses use camelCase on the wire.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookingCreate(BaseModel):
    event_title: Any = Field(None, alias="eventTitle")
    user_email: Any = Field(None, alias="userEmail")
    event_id: Any = Field(None, alias="eventId")
    quantity: Any = None
    qty: Any = None
    tickets: Any = None
    num_tickets: Any = Field(None, alias="numTickets")
    ticket_count: Any = Field(None, alias="ticketCount")

    model_config = ConfigDict(populate_by_name=True)


class BookingCancelRequest(BaseModel):
    booking_id: Any = Field(None, alias="bookingId")
    legacy_id: Any = Field(None, alias="_id")
    id: Any = None
    user_email: Any = Field(None, alias="userEmail")
    event_title: Any = Field(None, alias="eventTitle")

    model_config = ConfigDict(populate_by_name=True)


class BookingResponse(BaseModel):
    id: str
    event_id: Optional[str] = None
    event_title: str
    user_email: str
    quantity: int
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)


class BookingListItem(BookingResponse):
    # Alias of created_at kept for clients that read `date`
    date: datetime


class BookingEnvelope(BaseModel):
    ok: bool = True
    booking: BookingResponse


def shape_booking(booking) -> BookingListItem:
    """Map a stored booking to its listing shape."""
    item = BookingResponse.model_validate(booking)
    return BookingListItem(**item.model_dump(), date=item.created_at)
