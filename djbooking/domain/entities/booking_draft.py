from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

# wire name -> attribute name
DRAFT_FIELDS: dict[str, str] = {
    "eventType": "event_type",
    "eventDate": "event_date",
    "eventLocation": "event_location",
    "guestCount": "guest_count",
    "budget": "budget",
    "name": "name",
    "email": "email",
    "phone": "phone",
    "contactMethod": "contact_method",
    "musicPreferences": "music_preferences",
    "specialRequests": "special_requests",
}


@dataclass(frozen=True)
class BookingDraft:
    event_type: str = ""
    event_date: str = ""  # YYYY-MM-DD
    event_location: str = ""
    guest_count: str = ""
    budget: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    contact_method: str = "email"
    music_preferences: str = ""
    special_requests: str = ""
    current_step: int = 1
    last_saved_at: float | None = None

    def get(self, field: str) -> str:
        return getattr(self, DRAFT_FIELDS[field])

    def with_field(self, field: str, value: str) -> "BookingDraft":
        if field not in DRAFT_FIELDS:
            raise KeyError(f"Unknown booking field: {field}")
        return replace(self, **{DRAFT_FIELDS[field]: value if value is not None else ""})

    def with_step(self, step: int) -> "BookingDraft":
        return replace(self, current_step=int(step))

    def is_empty(self) -> bool:
        for field, attr in DRAFT_FIELDS.items():
            value = getattr(self, attr)
            if field == "contactMethod":
                continue
            if value:
                return False
        return True

    def to_payload(self) -> dict[str, str]:
        """Submission body: every collected field, as entered."""
        return {field: getattr(self, attr) for field, attr in DRAFT_FIELDS.items()}

    def to_storage(self) -> dict[str, Any]:
        data: dict[str, Any] = self.to_payload()
        data["currentStep"] = self.current_step
        data["lastSavedAt"] = self.last_saved_at
        return data

    @staticmethod
    def from_payload(data: dict[str, Any] | None) -> "BookingDraft":
        data = data or {}
        values: dict[str, Any] = {}
        for field, attr in DRAFT_FIELDS.items():
            value = data.get(field)
            if value is not None:
                values[attr] = str(value)
        step = data.get("currentStep")
        if isinstance(step, int) and 1 <= step <= 4:
            values["current_step"] = step
        saved = data.get("lastSavedAt")
        if isinstance(saved, (int, float)):
            values["last_saved_at"] = float(saved)
        return BookingDraft(**values)
