from __future__ import annotations

from djbooking.application.ports.draft_store import DraftStorePort
from djbooking.domain.entities.booking_draft import BookingDraft


class MemoryDraftStore(DraftStorePort):
    def __init__(self) -> None:
        self._data: dict[str, object] | None = None

    def save(self, draft: BookingDraft) -> None:
        self._data = draft.to_storage()

    def load(self) -> BookingDraft | None:
        if self._data is None:
            return None
        return BookingDraft.from_payload(dict(self._data))

    def clear(self) -> None:
        self._data = None
