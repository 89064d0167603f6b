from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateBookingRequest(BaseModel):
    """
    Booking form submission.

    Every field is optional at the schema level so that missing or malformed
    values are reported by the booking validation rules, one message per field.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    event_type: str | None = Field(default=None, alias="eventType")
    event_date: str | None = Field(default=None, alias="eventDate")
    event_location: str | None = Field(default=None, alias="eventLocation")
    guest_count: str | None = Field(default=None, alias="guestCount")
    budget: str | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    contact_method: str | None = Field(default=None, alias="contactMethod")
    music_preferences: str | None = Field(default=None, alias="musicPreferences")
    special_requests: str | None = Field(default=None, alias="specialRequests")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class StatusUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: str
    admin_notes: str | None = Field(default=None, alias="adminNotes")
    quoted_price: float | None = Field(default=None, alias="quotedPrice", allow_inf_nan=False, ge=0)
