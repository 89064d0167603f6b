from __future__ import annotations

from abc import ABC, abstractmethod

from djbooking.domain.entities.booking import Booking


class BookingRepositoryPort(ABC):
    @abstractmethod
    def insert(self, booking: Booking) -> Booking:
        """Persist a new booking. Returns it with a freshly assigned id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        """Return the booking, or None for unknown or malformed ids."""
        raise NotImplementedError

    @abstractmethod
    def find(
        self,
        status: str | None,
        sort_field: str,
        descending: bool,
        skip: int,
        limit: int,
    ) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def count(self, status: str | None = None) -> int:
        raise NotImplementedError

    @abstractmethod
    def replace(self, booking: Booking) -> Booking | None:
        """Overwrite a stored booking. Returns None if it no longer exists."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def count_by_status(self) -> dict[str, int]:
        """Single grouped count: status -> number of bookings."""
        raise NotImplementedError
