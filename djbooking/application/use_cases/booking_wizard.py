from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Any, Callable

from djbooking.application.exceptions import FieldValidationError, TransportError
from djbooking.application.ports.analytics import AnalyticsPort
from djbooking.application.ports.booking_api import BookingApiPort
from djbooking.application.use_cases.draft_autosave import DraftAutoSaver
from djbooking.application.utils.presentation import confirmation_summary
from djbooking.application.utils.wizard_transitions import initial_state, transition
from djbooking.domain.entities.wizard_state import (
    FieldChanged,
    NextStep,
    PreviousStep,
    Reset,
    SubmissionFailed,
    SubmissionSucceeded,
    WizardAction,
    WizardPhase,
    WizardState,
)

STEP_CHANGE_EVENT = "Booking Form Step"
GENERIC_SUBMISSION_ERROR = (
    "Sorry, there was an error submitting your booking request. "
    "Please try again or contact us directly."
)


class BookingWizard:
    """
    Drives the four-step booking form.

    State changes go through the pure `transition()` function; this class owns
    the side effects around it: draft auto-save, analytics and submission.
    """

    def __init__(
        self,
        api: BookingApiPort,
        autosaver: DraftAutoSaver,
        analytics: AnalyticsPort | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._api = api
        self._autosaver = autosaver
        self._analytics = analytics
        self._today = today or date.today
        self._state = WizardState()
        self._submit_lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def autosaver(self) -> DraftAutoSaver:
        return self._autosaver

    def start(self) -> WizardState:
        self._state = initial_state(self._autosaver.load())
        return self._state

    def set_field(self, field: str, value: str) -> WizardState:
        self._apply(FieldChanged(field=field, value=value))
        if self._state.phase in (WizardPhase.editing, WizardPhase.submission_failed):
            self._autosaver.schedule(self._state.draft)
        return self._state

    def previous_step(self) -> WizardState:
        before = self._state.step
        self._apply(PreviousStep())
        if self._state.step != before:
            self._on_step_changed()
        return self._state

    def next_step(self) -> WizardState:
        if self._state.phase == WizardPhase.submitting:
            self._logger.info("Submission already in flight; ignoring", extra={"step": int(self._state.step)})
            return self._state

        before = self._state.step
        self._apply(NextStep())
        if self._state.phase == WizardPhase.submitting:
            return self._submit()
        if self._state.step != before:
            self._on_step_changed()
        return self._state

    def submit(self) -> WizardState:
        return self.next_step()

    def reset(self) -> WizardState:
        self._autosaver.clear()
        self._apply(Reset())
        return self._state

    def confirmation(self) -> dict[str, Any] | None:
        if self._state.phase != WizardPhase.submitted:
            return None
        return confirmation_summary(self._state.draft, self._state.confirmation)

    def _submit(self) -> WizardState:
        if not self._submit_lock.acquire(blocking=False):
            return self._state
        try:
            payload = self._state.draft.to_payload()
            try:
                result = self._api.create_booking(payload)
            except FieldValidationError as e:
                self._logger.info("Booking rejected by server", extra={"reason": str(e)})
                self._apply(SubmissionFailed(message="Please correct the highlighted fields.", errors=e.errors))
                return self._state
            except TransportError as e:
                self._logger.warning("Booking submission failed", extra={"error": str(e)})
                self._apply(SubmissionFailed(message=GENERIC_SUBMISSION_ERROR))
                return self._state
            except Exception as e:
                self._logger.exception("Unexpected booking submission error", extra={"error": str(e)})
                self._apply(SubmissionFailed(message=GENERIC_SUBMISSION_ERROR))
                return self._state

            self._apply(SubmissionSucceeded(result=result))
            self._autosaver.clear()
            return self._state
        finally:
            self._submit_lock.release()

    def _apply(self, action: WizardAction) -> None:
        self._state = transition(self._state, action, today=self._today())

    def _on_step_changed(self) -> None:
        self._autosaver.schedule(self._state.draft)
        if self._analytics is None:
            return
        step = self._state.step
        try:
            self._analytics.track(STEP_CHANGE_EVENT, {"step": int(step), "stepName": step.display_name})
        except Exception as e:
            self._logger.warning("Analytics tracking failed", extra={"error": str(e)})
