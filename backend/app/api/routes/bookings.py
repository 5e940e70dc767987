"""
Booking endpoints: create, list by user, cancel.

Cancellation is reachable three ways for older clients: a path id, query
parameters, or a POST body. All of them end in booking_service.cancel_booking.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.booking import (
    BookingCreate,
    BookingCancelRequest,
    BookingResponse,
    BookingListItem,
    BookingEnvelope,
)
from app.services.booking_service import create_booking, cancel_booking, list_by_user
from app.services.normalizer import (
    sanitize_title,
    normalize_email,
    normalize_reference,
    normalize_text,
    pick_quantity,
    pick_booking_id,
)
from app.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["Bookings"])


def _envelope(booking) -> BookingEnvelope:
    return BookingEnvelope(booking=BookingResponse.model_validate(booking))


@router.post("/book", response_model=BookingEnvelope, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(
    booking_data: Optional[BookingCreate] = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Book tickets for an event.

    quantity may also be sent as qty, tickets, numTickets or ticketCount;
    it is clamped to 1..10 rather than rejected.
    """
    fields = (booking_data or BookingCreate()).model_dump(by_alias=True)
    booking = await create_booking(
        db,
        event_title=sanitize_title(fields["eventTitle"]),
        user_email=normalize_email(fields["userEmail"]),
        quantity=pick_quantity(fields),
        event_id=normalize_reference(fields["eventId"]),
    )
    return _envelope(booking)


@router.get("/bookings", response_model=list[BookingListItem])
async def list_bookings_endpoint(
    user_email: str = Query("", alias="userEmail"),
    db: AsyncSession = Depends(get_db),
):
    """All bookings for a user, newest first. `date` mirrors `createdAt`."""
    return await list_by_user(db, user_email)


@router.delete("/booking/{booking_id}", response_model=BookingEnvelope)
async def cancel_booking_by_id_endpoint(
    booking_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Cancel a booking by id. Cancelling twice is not an error."""
    booking = await cancel_booking(db, booking_id=normalize_text(booking_id))
    return _envelope(booking)


@router.delete("/booking", response_model=BookingEnvelope)
async def cancel_booking_by_query_endpoint(
    booking_id: str = Query("", alias="bookingId"),
    user_email: str = Query("", alias="userEmail"),
    event_title: str = Query("", alias="eventTitle"),
    db: AsyncSession = Depends(get_db),
):
    """Cancel by ?bookingId= or by ?userEmail=&eventTitle=."""
    booking = await cancel_booking(
        db,
        booking_id=normalize_text(booking_id),
        user_email=user_email,
        event_title=event_title,
    )
    return _envelope(booking)


@router.post("/cancel", response_model=BookingEnvelope)
async def cancel_booking_by_body_endpoint(
    cancel_data: Optional[BookingCancelRequest] = None,
    db: AsyncSession = Depends(get_db),
):
    """Cancel by {bookingId} (or _id / id) or by {userEmail, eventTitle}."""
    fields = (cancel_data or BookingCancelRequest()).model_dump(by_alias=True)
    booking = await cancel_booking(
        db,
        booking_id=pick_booking_id(fields),
        user_email=fields["userEmail"],
        event_title=fields["eventTitle"],
    )
    return _envelope(booking)
