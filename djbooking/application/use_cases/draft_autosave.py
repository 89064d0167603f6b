from __future__ import annotations

import logging
import threading
import time
from dataclasses import replace
from enum import Enum
from typing import Callable, Protocol

from djbooking.application.ports.draft_store import DraftStorePort
from djbooking.domain.entities.booking_draft import BookingDraft

DEFAULT_AUTOSAVE_DELAY_SECONDS = 2.0


class AutoSaveStatus(str, Enum):
    idle = "idle"
    saving = "saving"
    saved = "saved"
    error = "error"


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def thread_timer(delay: float, callback: Callable[[], None]) -> TimerHandle:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class DraftAutoSaver:
    """
    Debounced draft persistence.

    Each `schedule()` replaces the pending draft and restarts the single timer,
    so a burst of edits produces one write. Storage failures only change
    `status` to `error`; they are never raised.
    """

    def __init__(
        self,
        store: DraftStorePort,
        delay_seconds: float = DEFAULT_AUTOSAVE_DELAY_SECONDS,
        timer_factory: TimerFactory | None = None,
        clock: Callable[[], float] | None = None,
        on_status: Callable[[AutoSaveStatus], None] | None = None,
    ) -> None:
        self._store = store
        self._delay = delay_seconds
        self._timer_factory = timer_factory or thread_timer
        self._clock = clock or time.time
        self._on_status = on_status
        self._pending: BookingDraft | None = None
        self._timer: TimerHandle | None = None
        self._lock = threading.Lock()
        self._status = AutoSaveStatus.idle
        self._logger = logging.getLogger(__name__)

    @property
    def status(self) -> AutoSaveStatus:
        return self._status

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    @property
    def store(self) -> DraftStorePort:
        return self._store

    def schedule(self, draft: BookingDraft) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = draft
            self._timer = self._timer_factory(self._delay, self.flush)

    def flush(self) -> bool:
        """Write the pending draft now. Returns True if a draft was saved."""
        with self._lock:
            draft = self._pending
            self._pending = None
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
        if draft is None:
            return False

        self._set_status(AutoSaveStatus.saving)
        try:
            self._store.save(replace(draft, last_saved_at=self._clock()))
        except Exception as e:
            self._logger.warning("Failed to auto-save booking draft", extra={"error": str(e)})
            self._set_status(AutoSaveStatus.error)
            return False
        self._set_status(AutoSaveStatus.saved)
        return True

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def load(self) -> BookingDraft | None:
        try:
            return self._store.load()
        except Exception as e:
            self._logger.warning("Failed to load booking draft", extra={"error": str(e)})
            return None

    def clear(self) -> None:
        self.cancel()
        try:
            self._store.clear()
        except Exception as e:
            self._logger.warning("Failed to clear booking draft", extra={"error": str(e)})
        self._set_status(AutoSaveStatus.idle)

    def _set_status(self, status: AutoSaveStatus) -> None:
        self._status = status
        if self._on_status is not None:
            try:
                self._on_status(status)
            except Exception:
                self._logger.exception("Auto-save status listener failed")
