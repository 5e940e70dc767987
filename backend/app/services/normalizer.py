"""
Input normalization for raw request fields.

Clients send loosely typed JSON (numbers as strings, several spellings of
the quantity field), so every handler funnels its input through these
helpers before validation. All functions are pure.
"""

import math
import re
from typing import Any, Mapping, Optional

TITLE_MAX_LENGTH = 200
MIN_QUANTITY = 1
MAX_QUANTITY = 10

QUANTITY_FIELDS = ("quantity", "qty", "tickets", "numTickets", "ticketCount")
BOOKING_ID_FIELDS = ("bookingId", "_id", "id")

# Numeric text as JSON clients coerce it: plain decimals with optional
# exponent, 0x/0o/0b integers, and signed Infinity. No digit separators.
DECIMAL_TEXT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
RADIX_TEXT = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
INFINITY_TEXT = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def sanitize_title(value: Any) -> str:
    if not value:
        return ""
    return str(value).strip()[:TITLE_MAX_LENGTH]


def normalize_email(value: Any) -> str:
    if not value:
        return ""
    return str(value).lower().strip()


def normalize_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_optional_text(value: Any) -> Optional[str]:
    text = normalize_text(value)
    return text or None


def normalize_reference(value: Any) -> Optional[str]:
    """Optional record id: stripped string, or None when blank."""
    return normalize_optional_text(value)


def to_number(value: Any) -> float:
    """
    Lenient numeric conversion.

    Booleans count as 0/1, blank strings as 0, numeric strings are parsed,
    integers too large for a float become signed infinity, anything else
    is NaN.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return _to_float(value)
    if isinstance(value, str):
        return _parse_number_text(value.strip())
    return math.nan


def _to_float(value) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _parse_number_text(text: str) -> float:
    if not text:
        return 0.0
    if text in INFINITY_TEXT:
        return INFINITY_TEXT[text]
    if RADIX_TEXT.match(text):
        return _to_float(int(text, 0))
    if DECIMAL_TEXT.match(text):
        return float(text)
    return math.nan


def clamp_quantity(value: Any) -> int:
    number = to_number(value)
    if not math.isfinite(number):
        return MIN_QUANTITY
    return max(MIN_QUANTITY, min(MAX_QUANTITY, math.trunc(number)))


def _first_present(fields: Mapping[str, Any], names) -> Any:
    for name in names:
        value = fields.get(name)
        if value is not None:
            return value
    return None


def pick_quantity(fields: Mapping[str, Any]) -> int:
    """First non-null quantity alias, clamped into range (default 1)."""
    value = _first_present(fields, QUANTITY_FIELDS)
    return clamp_quantity(MIN_QUANTITY if value is None else value)


def pick_booking_id(fields: Mapping[str, Any]) -> str:
    for name in BOOKING_ID_FIELDS:
        value = fields.get(name)
        if value:
            return str(value).strip()
    return ""
