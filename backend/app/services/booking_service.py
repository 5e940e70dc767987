"""
Booking lifecycle: creation, cancellation and per-user listing.

STATUS MODEL
============

  confirmed --cancel--> cancelled

There is no path back to confirmed. Three ways lead to cancelled:

  1. By id: unconditional and idempotent. Cancelling an already cancelled
     booking succeeds and returns it unchanged.
  2. By (userEmail, eventTitle): only non-cancelled bookings match, and
     exactly one is cancelled (the oldest). Once none remain, the call
     fails with NotFound, so repeating it is not idempotent.
  3. By event (cascade): every non-cancelled booking whose event_id equals
     the event's id OR whose event_title equals the event's title. Used by
     the event delete path only and always succeeds.

Bookings are matched to events on both the weak id reference and the
denormalized title because a booking may be created before (or without)
the event it names.
"""

from typing import Optional

from sqlalchemy import select, update, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking, BookingStatus
from app.schemas.booking import BookingListItem, shape_booking
from app.services.normalizer import normalize_email, sanitize_title
from app.services.validation import validate_booking_input, validate_cancel_filter
from app.core.errors import NotFound, ValidationError
from app.core.metrics import record_booking_operation
from app.core.logging import get_logger
from app.db.base import utc_now

logger = get_logger(__name__)


def _matches_event(event_id: Optional[str], event_title: str):
    clauses = [Booking.event_title == event_title]
    if event_id:
        clauses.append(Booking.event_id == event_id)
    return or_(*clauses)


async def create_booking(
    db: AsyncSession,
    event_title: str,
    user_email: str,
    quantity: int = 1,
    event_id: Optional[str] = None,
) -> Booking:
    """Persist a confirmed booking. Duplicate bookings are allowed."""
    validate_booking_input(event_title, user_email, event_id)

    booking = Booking(
        event_id=event_id,
        event_title=event_title,
        user_email=user_email,
        quantity=quantity,
        status=BookingStatus.CONFIRMED.value,
    )
    db.add(booking)
    await db.flush()
    await db.refresh(booking)

    record_booking_operation("create")
    logger.info(
        "booking_created",
        booking_id=booking.id,
        event_id=event_id,
        event_title=event_title,
        quantity=quantity,
    )
    return booking


async def _set_cancelled(db: AsyncSession, booking: Booking) -> Booking:
    booking.status = BookingStatus.CANCELLED.value
    await db.flush()
    await db.refresh(booking)
    record_booking_operation("cancel")
    logger.info("booking_cancelled", booking_id=booking.id, event_title=booking.event_title)
    return booking


async def cancel_by_id(db: AsyncSession, booking_id: str) -> Booking:
    result = await db.execute(select(Booking).where(Booking.id == booking_id))
    booking = result.scalar_one_or_none()

    if not booking:
        record_booking_operation("cancel", "not_found")
        raise NotFound("Booking not found")

    return await _set_cancelled(db, booking)


async def cancel_by_user_and_title(db: AsyncSession, user_email: str, event_title: str) -> Booking:
    """Cancel one non-cancelled booking for this user and event title."""
    result = await db.execute(
        select(Booking)
        .where(
            Booking.user_email == user_email,
            Booking.event_title == event_title,
            Booking.status != BookingStatus.CANCELLED.value,
        )
        .order_by(Booking.created_at.asc())
        .limit(1)
    )
    booking = result.scalar_one_or_none()

    if not booking:
        record_booking_operation("cancel", "not_found")
        raise NotFound("Booking not found")

    return await _set_cancelled(db, booking)


async def cancel_booking(
    db: AsyncSession,
    booking_id: str = "",
    user_email: str = "",
    event_title: str = "",
) -> Booking:
    """
    Resolve a cancel request to one of the single-booking paths.
    A booking id takes precedence over the (user_email, event_title) pair.
    """
    user_email = normalize_email(user_email)
    event_title = sanitize_title(event_title)
    validate_cancel_filter(booking_id, user_email, event_title)

    if booking_id:
        return await cancel_by_id(db, booking_id)
    return await cancel_by_user_and_title(db, user_email, event_title)


async def cancel_all_for_event(db: AsyncSession, event_id: Optional[str], event_title: str) -> int:
    """Cancel every non-cancelled booking tied to the event. Returns the count."""
    result = await db.execute(
        update(Booking)
        .where(
            _matches_event(event_id, event_title),
            Booking.status != BookingStatus.CANCELLED.value,
        )
        .values(status=BookingStatus.CANCELLED.value, updated_at=utc_now())
    )
    logger.info(
        "bookings_cancelled_for_event",
        event_id=event_id,
        event_title=event_title,
        count=result.rowcount,
    )
    return result.rowcount


async def delete_all_for_event(db: AsyncSession, event_id: Optional[str], event_title: str) -> int:
    """Remove every booking tied to the event regardless of status."""
    result = await db.execute(delete(Booking).where(_matches_event(event_id, event_title)))
    logger.info(
        "bookings_deleted_for_event",
        event_id=event_id,
        event_title=event_title,
        count=result.rowcount,
    )
    return result.rowcount


async def list_by_user(db: AsyncSession, user_email: str) -> list[BookingListItem]:
    """Get all bookings for a user, newest first."""
    user_email = normalize_email(user_email)
    if not user_email:
        raise ValidationError("userEmail query param is required")

    result = await db.execute(
        select(Booking)
        .where(Booking.user_email == user_email)
        .order_by(Booking.created_at.desc())
    )
    return [shape_booking(booking) for booking in result.scalars().all()]
