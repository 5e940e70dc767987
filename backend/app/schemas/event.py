"""
Pydantic schemas for event-related request/response validation.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EventCreate(BaseModel):
    title: Any = None
    city: Any = None
    date: Any = None
    price: Any = None
    venue: Any = None
    image: Any = None
    description: Any = None


class EventResponse(BaseModel):
    id: str
    title: str
    city: str
    date: str
    price: float
    venue: str
    image: Optional[str] = None
    description: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)


class EventEnvelope(BaseModel):
    ok: bool = True
    event: EventResponse


class EventDeleteResponse(BaseModel):
    ok: bool = True
    id: str
    mode: str
    bookings_affected: int

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)
