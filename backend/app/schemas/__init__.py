from app.schemas.event import EventCreate, EventResponse, EventEnvelope, EventDeleteResponse
from app.schemas.booking import (
    BookingCreate,
    BookingCancelRequest,
    BookingResponse,
    BookingListItem,
    BookingEnvelope,
    shape_booking,
)

__all__ = [
    "EventCreate", "EventResponse", "EventEnvelope", "EventDeleteResponse",
    "BookingCreate", "BookingCancelRequest", "BookingResponse", "BookingListItem",
    "BookingEnvelope", "shape_booking",
]
