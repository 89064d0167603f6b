from __future__ import annotations

from abc import ABC, abstractmethod

from djbooking.domain.entities.booking_draft import BookingDraft


class DraftStorePort(ABC):
    @abstractmethod
    def save(self, draft: BookingDraft) -> None:
        """Overwrite the stored draft. May raise DraftStorageError."""
        raise NotImplementedError

    @abstractmethod
    def load(self) -> BookingDraft | None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
