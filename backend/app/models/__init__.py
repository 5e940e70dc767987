from app.models.event import Event, EventStatus
from app.models.booking import Booking, BookingStatus

__all__ = ["Event", "EventStatus", "Booking", "BookingStatus"]
