from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from djbooking.application.exceptions import DraftStorageError
from djbooking.application.ports.draft_store import DraftStorePort
from djbooking.domain.entities.booking_draft import BookingDraft

DRAFT_STORAGE_KEY = "dj-booking-form"


class JsonDraftStore(DraftStorePort):
    """Single-draft file store, one per client installation."""

    def __init__(self, data_dir: str = "./data/drafts", key: str = DRAFT_STORAGE_KEY) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._path = self._data_dir / f"{key}.json"
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, draft: BookingDraft) -> None:
        """Write the draft atomically (temp file, then rename)."""
        temp_path = self._path.with_suffix(".json.tmp")
        with self._lock:
            try:
                with open(temp_path, "w", encoding="utf-8") as f:
                    json.dump(draft.to_storage(), f, indent=2, ensure_ascii=False)
                temp_path.replace(self._path)
            except OSError as e:
                if temp_path.exists():
                    try:
                        temp_path.unlink()
                    except OSError:
                        pass
                raise DraftStorageError(f"Could not save booking draft: {e}") from e

    def load(self) -> BookingDraft | None:
        with self._lock:
            if not self._path.exists():
                return None
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (ValueError, OSError) as e:
                # A corrupt draft is treated as no draft.
                self._logger.warning("Failed to load saved booking draft", extra={"error": str(e)})
                return None
        if not isinstance(data, dict):
            return None
        return BookingDraft.from_payload(data)

    def clear(self) -> None:
        with self._lock:
            try:
                self._path.unlink()
            except FileNotFoundError:
                pass
