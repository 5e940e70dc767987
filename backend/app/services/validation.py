"""
Format and presence checks on normalized input.

Nothing here touches the database: every check runs before the first
query, so a rejected request never leaves partial state.
"""

import math
import re
from typing import Any, Mapping, Optional

from app.core.errors import ValidationError
from app.services.normalizer import normalize_optional_text, normalize_text, to_number

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
EMAIL_MAX_LENGTH = 200
EVENT_REFERENCE_MAX_LENGTH = 200

DELETE_MODES = ("soft", "hard")

# field -> max length
EVENT_REQUIRED_TEXT = {"title": 200, "city": 100, "date": 64, "venue": 200}
EVENT_OPTIONAL_TEXT = {"image": 500, "description": 1000}


def validate_email(user_email: str) -> None:
    if len(user_email) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.match(user_email):
        raise ValidationError("Invalid email")


def validate_booking_input(event_title: str, user_email: str, event_id: Optional[str] = None) -> None:
    if not event_title or not user_email:
        raise ValidationError("eventTitle and userEmail are required")
    validate_email(user_email)
    if event_id and len(event_id) > EVENT_REFERENCE_MAX_LENGTH:
        raise ValidationError(f"eventId must be at most {EVENT_REFERENCE_MAX_LENGTH} characters")


def validate_cancel_filter(booking_id: str, user_email: str, event_title: str) -> None:
    if booking_id or (user_email and event_title):
        return
    raise ValidationError("Provide bookingId or (userEmail and eventTitle) to cancel")


def validate_delete_mode(mode: Any) -> str:
    normalized = normalize_text(mode).lower() or "soft"
    if normalized not in DELETE_MODES:
        raise ValidationError("mode must be 'soft' or 'hard'")
    return normalized


def _validate_price(raw: Any) -> float:
    price = math.nan if isinstance(raw, bool) else to_number(raw)
    if not math.isfinite(price) or price < 0:
        raise ValidationError("price must be a non-negative number")
    return price


def validate_event_input(fields: Mapping[str, Any]) -> dict:
    """
    Check a raw event payload and return the normalized column values.

    Text fields are trimmed. `price` is only checked for presence, so 0 is
    a valid price.
    """
    values = {name: normalize_text(fields.get(name)) for name in EVENT_REQUIRED_TEXT}
    raw_price = fields.get("price")
    if isinstance(raw_price, str) and not raw_price.strip():
        raw_price = None

    if raw_price is None or not all(values.values()):
        raise ValidationError("title, city, date, price and venue are required")

    for name, limit in EVENT_REQUIRED_TEXT.items():
        if len(values[name]) > limit:
            raise ValidationError(f"{name} must be at most {limit} characters")

    for name, limit in EVENT_OPTIONAL_TEXT.items():
        text = normalize_optional_text(fields.get(name))
        if text is not None and len(text) > limit:
            raise ValidationError(f"{name} must be at most {limit} characters")
        values[name] = text

    values["price"] = _validate_price(raw_price)
    return values
