"""
Event service: creation, active listing and soft/hard deletion.

Deleting an event cascades into its bookings:
  soft  status -> deleted, matching bookings -> cancelled
  hard  event row removed, matching bookings removed

An event that is already soft-deleted is treated as missing by both modes,
so it cannot be hard-deleted afterwards through this path.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.event import Event, EventStatus
from app.services import booking_service
from app.services.validation import validate_event_input, validate_delete_mode
from app.core.errors import NotFound
from app.core.metrics import record_event_operation, record_cascade
from app.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeleteResult:
    id: str
    mode: str
    bookings_affected: int


async def create_event(db: AsyncSession, fields: Mapping[str, Any]) -> Event:
    """Validate a raw payload and persist an active event."""
    values = validate_event_input(fields)

    event = Event(**values, status=EventStatus.ACTIVE.value)
    db.add(event)
    await db.flush()
    await db.refresh(event)

    record_event_operation("create")
    logger.info("event_created", event_id=event.id, title=event.title, date=event.date)
    return event


async def list_active(db: AsyncSession) -> list[Event]:
    """Active events, earliest date first (dates compare as yyyy-mm-dd text)."""
    result = await db.execute(
        select(Event)
        .where(Event.status == EventStatus.ACTIVE.value)
        .order_by(Event.date.asc())
    )
    return list(result.scalars().all())


async def delete_event(db: AsyncSession, event_id: str, mode: str = "soft") -> DeleteResult:
    mode = validate_delete_mode(mode)

    result = await db.execute(
        select(Event).where(
            Event.id == event_id,
            Event.status != EventStatus.DELETED.value,
        )
    )
    event = result.scalar_one_or_none()

    if not event:
        raise NotFound("Event not found")

    event_key, title = event.id, event.title

    # Both steps run in the request transaction and commit together
    if mode == "hard":
        await db.delete(event)
        await db.flush()
        affected = await booking_service.delete_all_for_event(db, event_key, title)
    else:
        event.status = EventStatus.DELETED.value
        await db.flush()
        affected = await booking_service.cancel_all_for_event(db, event_key, title)

    record_event_operation(f"{mode}_delete")
    record_cascade(mode, affected)
    logger.info(
        f"event_{mode}_deleted",
        event_id=event_key,
        title=title,
        bookings_affected=affected,
    )
    return DeleteResult(id=event_key, mode=mode, bookings_affected=affected)
