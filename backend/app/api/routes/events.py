"""
Event endpoints: list active events, create, soft/hard delete.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.event import EventCreate, EventResponse, EventEnvelope, EventDeleteResponse
from app.services.event_service import create_event, list_active, delete_event
from app.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=list[EventResponse])
async def list_events_endpoint(db: AsyncSession = Depends(get_db)):
    """Active events sorted by date ascending."""
    return await list_active(db)


@router.post("", response_model=EventEnvelope, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    event_data: Optional[EventCreate] = None,
    db: AsyncSession = Depends(get_db),
):
    """Create an event. title, city, date, price and venue are required."""
    fields = (event_data or EventCreate()).model_dump()
    event = await create_event(db, fields)
    return EventEnvelope(event=EventResponse.model_validate(event))


@router.delete("/{event_id}", response_model=EventDeleteResponse)
async def delete_event_endpoint(
    event_id: str,
    mode: str = Query("soft"),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete an event and cascade into its bookings.

    soft: mark the event deleted and cancel its bookings.
    hard: remove the event and its bookings permanently.
    Returns 404 if the event is missing or already soft-deleted.
    """
    result = await delete_event(db, event_id, mode)
    return EventDeleteResponse(id=result.id, mode=result.mode, bookings_affected=result.bookings_affected)
