from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from typing import Any, Callable, Mapping

from djbooking.domain.entities.booking import (
    BOOKING_STATUSES,
    BUDGET_BUCKETS,
    CONTACT_METHODS,
    EVENT_TYPES,
    GUEST_COUNT_BUCKETS,
)
from djbooking.domain.entities.field_error import FieldError

# Location minimum differs between the wizard and the stored entity.
CLIENT_MIN_LOCATION_LENGTH = 10
SERVER_MIN_LOCATION_LENGTH = 5
MAX_LOCATION_LENGTH = 200

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
PHONE_MIN_DIGITS = 10
MUSIC_PREFERENCES_MAX_LENGTH = 500
SPECIAL_REQUESTS_MAX_LENGTH = 1000
ADMIN_NOTES_MAX_LENGTH = 1000

_NAME_CHARS = re.compile(r"^[a-zA-Z\s'-]+$")
_EMAIL_SHAPE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_NON_DIGITS = re.compile(r"\D")

STEP_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("eventType", "eventDate", "eventLocation", "guestCount"),
    2: ("name", "email", "phone"),
    3: (),
}


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def normalize_email(value: Any) -> str:
    return _text(value).lower()


def digits_only(value: Any) -> str:
    return _NON_DIGITS.sub("", _text(value))


def parse_event_date(value: Any) -> date | None:
    """Parse an ISO date (or datetime) string. Returns None when unparseable."""
    raw = _text(value)
    if not raw:
        return None
    try:
        if len(raw) == 10:
            return date.fromisoformat(raw)
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        return datetime.fromisoformat(raw).date()
    except ValueError:
        return None


def validate_name(value: Any) -> str | None:
    name = _text(value)
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        return "Name must be between 2 and 100 characters"
    if not _NAME_CHARS.match(name):
        return "Name can only contain letters, spaces, hyphens, and apostrophes"
    return None


def validate_email(value: Any) -> str | None:
    if not _EMAIL_SHAPE.match(_text(value)):
        return "Please provide a valid email address"
    return None


def validate_phone(value: Any) -> str | None:
    if len(digits_only(value)) < PHONE_MIN_DIGITS:
        return "Please provide a valid phone number"
    return None


def validate_event_type(value: Any) -> str | None:
    if _text(value) not in EVENT_TYPES:
        return "Please select a valid event type"
    return None


def validate_event_date(value: Any, today: date | None = None) -> str | None:
    parsed = parse_event_date(value)
    if parsed is None:
        return "Please provide a valid event date"
    today = today or date.today()
    if parsed < today + timedelta(days=1):
        return "Event date must be at least tomorrow"
    return None


def validate_event_location(value: Any, min_length: int = SERVER_MIN_LOCATION_LENGTH) -> str | None:
    location = _text(value)
    if not min_length <= len(location) <= MAX_LOCATION_LENGTH:
        return f"Event location must be between {min_length} and {MAX_LOCATION_LENGTH} characters"
    return None


def validate_guest_count(value: Any) -> str | None:
    if _text(value) not in GUEST_COUNT_BUCKETS:
        return "Please select a valid guest count range"
    return None


def validate_budget(value: Any) -> str | None:
    budget = _text(value)
    if budget and budget not in BUDGET_BUCKETS:
        return "Please select a valid budget range"
    return None


def validate_music_preferences(value: Any) -> str | None:
    if len(_text(value)) > MUSIC_PREFERENCES_MAX_LENGTH:
        return "Music preferences cannot exceed 500 characters"
    return None


def validate_special_requests(value: Any) -> str | None:
    if len(_text(value)) > SPECIAL_REQUESTS_MAX_LENGTH:
        return "Special requests cannot exceed 1000 characters"
    return None


def validate_contact_method(value: Any) -> str | None:
    method = _text(value)
    if method and method not in CONTACT_METHODS:
        return "Contact method must be email, phone, or both"
    return None


def validate_status(value: Any) -> str | None:
    if _text(value) not in BOOKING_STATUSES:
        return "Status must be one of: " + ", ".join(BOOKING_STATUSES)
    return None


def validate_admin_notes(value: Any) -> str | None:
    if len(_text(value)) > ADMIN_NOTES_MAX_LENGTH:
        return "Admin notes cannot exceed 1000 characters"
    return None


def validate_quoted_price(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bool):
        return "Quoted price must be a number"
    try:
        price = float(value)
    except (TypeError, ValueError):
        return "Quoted price must be a number"
    if not math.isfinite(price):
        return "Quoted price must be a number"
    if price < 0:
        return "Quoted price cannot be negative"
    return None


def field_rules(
    location_min_length: int,
    today: date | None = None,
) -> dict[str, Callable[[Any], str | None]]:
    """Rule per wire field name, in the order errors are reported."""
    return {
        "eventType": validate_event_type,
        "eventDate": lambda v: validate_event_date(v, today),
        "eventLocation": lambda v: validate_event_location(v, location_min_length),
        "guestCount": validate_guest_count,
        "budget": validate_budget,
        "name": validate_name,
        "email": validate_email,
        "phone": validate_phone,
        "contactMethod": validate_contact_method,
        "musicPreferences": validate_music_preferences,
        "specialRequests": validate_special_requests,
    }


def validate_fields(
    data: Mapping[str, Any],
    fields: tuple[str, ...] | None = None,
    location_min_length: int = SERVER_MIN_LOCATION_LENGTH,
    today: date | None = None,
) -> tuple[FieldError, ...]:
    rules = field_rules(location_min_length, today)
    selected = fields if fields is not None else tuple(rules)
    errors: list[FieldError] = []
    for field in selected:
        message = rules[field](data.get(field))
        if message:
            errors.append(FieldError(field=field, message=message))
    return tuple(errors)
