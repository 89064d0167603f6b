from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

EVENT_TYPES = ("wedding", "corporate", "private-party", "birthday", "anniversary", "other")
GUEST_COUNT_BUCKETS = ("1-25", "26-50", "51-100", "101-200", "201-500", "500+")
BUDGET_BUCKETS = ("under-1000", "1000-2500", "2500-5000", "5000-10000", "10000+", "discuss")
CONTACT_METHODS = ("email", "phone", "both")
DEFAULT_CONTACT_METHOD = "email"


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


BOOKING_STATUSES = tuple(s.value for s in BookingStatus)

# wire name -> attribute name, for list sorting
SORTABLE_FIELDS: dict[str, str] = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "eventDate": "event_date",
    "status": "status",
    "name": "name",
    "email": "email",
    "eventType": "event_type",
    "guestCount": "guest_count",
    "quotedPrice": "quoted_price",
}


@dataclass(frozen=True)
class Booking:
    name: str
    email: str
    phone: str
    event_type: str
    event_date: datetime
    event_location: str
    guest_count: str
    created_at: datetime
    updated_at: datetime
    contact_method: str = DEFAULT_CONTACT_METHOD
    budget: str | None = None
    music_preferences: str | None = None
    special_requests: str | None = None
    status: BookingStatus = BookingStatus.pending
    admin_notes: str | None = None
    quoted_price: float | None = None
    responded_at: datetime | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    id: str | None = None  # assigned by the repository on insert

    def days_until_event(self, now: datetime | None = None) -> int:
        now = now or datetime.now(timezone.utc)
        delta = self.event_date - now
        return math.ceil(delta.total_seconds() / 86400)

    def to_json(self, now: datetime | None = None) -> dict[str, Any]:
        """Admin-facing camelCase representation."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "contactMethod": self.contact_method,
            "eventType": self.event_type,
            "eventDate": _iso(self.event_date),
            "eventLocation": self.event_location,
            "guestCount": self.guest_count,
            "budget": self.budget,
            "musicPreferences": self.music_preferences,
            "specialRequests": self.special_requests,
            "status": self.status.value,
            "adminNotes": self.admin_notes,
            "quotedPrice": self.quoted_price,
            "respondedAt": _iso(self.responded_at),
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
            "ipAddress": self.ip_address,
            "userAgent": self.user_agent,
            "daysUntilEvent": self.days_until_event(now),
        }


@dataclass(frozen=True)
class BookingStats:
    total: int = 0
    pending: int = 0
    confirmed: int = 0
    cancelled: int = 0
    completed: int = 0

    @staticmethod
    def from_counts(counts: dict[str, int]) -> "BookingStats":
        buckets = {status: int(counts.get(status, 0)) for status in BOOKING_STATUSES}
        return BookingStats(total=sum(int(c) for c in counts.values()), **buckets)

    def to_json(self) -> dict[str, int]:
        return {
            "total": self.total,
            "pending": self.pending,
            "confirmed": self.confirmed,
            "cancelled": self.cancelled,
            "completed": self.completed,
        }


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    def to_json(self) -> dict[str, Any]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "itemsPerPage": self.items_per_page,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


@dataclass(frozen=True)
class BookingPage:
    items: list[Booking]
    pagination: Pagination


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
