from __future__ import annotations

import threading
import uuid
from collections import Counter
from dataclasses import replace
from typing import Any

from djbooking.application.ports.booking_repository import BookingRepositoryPort
from djbooking.domain.entities.booking import SORTABLE_FIELDS, Booking


class MemoryBookingRepository(BookingRepositoryPort):
    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}
        self._lock = threading.Lock()

    def insert(self, booking: Booking) -> Booking:
        stored = replace(booking, id=uuid.uuid4().hex)
        with self._lock:
            self._bookings[stored.id] = stored
        return stored

    def get(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def find(
        self,
        status: str | None,
        sort_field: str,
        descending: bool,
        skip: int,
        limit: int,
    ) -> list[Booking]:
        attr = SORTABLE_FIELDS.get(sort_field, "created_at")
        with self._lock:
            matches = [b for b in self._bookings.values() if status is None or b.status.value == status]
        present = [b for b in matches if _sort_value(b, attr) is not None]
        missing = [b for b in matches if _sort_value(b, attr) is None]
        present.sort(key=lambda b: _sort_value(b, attr), reverse=descending)
        # Missing values sort first ascending and last descending, as MongoDB does.
        ordered = present + missing if descending else missing + present
        return ordered[skip : skip + limit]

    def count(self, status: str | None = None) -> int:
        with self._lock:
            return sum(1 for b in self._bookings.values() if status is None or b.status.value == status)

    def replace(self, booking: Booking) -> Booking | None:
        if booking.id is None:
            return None
        with self._lock:
            if booking.id not in self._bookings:
                return None
            self._bookings[booking.id] = booking
        return booking

    def delete(self, booking_id: str) -> bool:
        with self._lock:
            return self._bookings.pop(booking_id, None) is not None

    def count_by_status(self) -> dict[str, int]:
        with self._lock:
            return dict(Counter(b.status.value for b in self._bookings.values()))


def _sort_value(booking: Booking, attr: str) -> Any:
    value = getattr(booking, attr)
    return getattr(value, "value", value)
