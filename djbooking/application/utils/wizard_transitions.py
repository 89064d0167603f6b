from __future__ import annotations

from dataclasses import replace
from datetime import date

from djbooking.application.utils.validation_rules import (
    CLIENT_MIN_LOCATION_LENGTH,
    STEP_FIELDS,
    validate_fields,
)
from djbooking.domain.entities.booking_draft import BookingDraft
from djbooking.domain.entities.field_error import FieldError
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
    WizardStep,
)

REVIEW_FIELDS = STEP_FIELDS[1] + STEP_FIELDS[2]


def initial_state(draft: BookingDraft | None = None) -> WizardState:
    """Start on step 1, or where a saved non-empty draft left off."""
    if draft is None or draft.is_empty():
        return WizardState(draft=draft or BookingDraft())
    step = WizardStep(min(max(draft.current_step, 1), len(WizardStep)))
    return WizardState(step=step, draft=draft)


def validate_step(step: WizardStep, draft: BookingDraft, today: date | None = None) -> tuple[FieldError, ...]:
    fields = REVIEW_FIELDS if step == WizardStep.REVIEW else STEP_FIELDS[int(step)]
    return validate_fields(
        draft.to_payload(),
        fields=fields,
        location_min_length=CLIENT_MIN_LOCATION_LENGTH,
        today=today,
    )


def transition(state: WizardState, action: WizardAction, today: date | None = None) -> WizardState:
    """Pure wizard transition: (state, action) -> new state. Performs no I/O."""
    if isinstance(action, Reset):
        return WizardState()

    if state.phase == WizardPhase.submitted:
        return state

    if isinstance(action, FieldChanged):
        if state.phase == WizardPhase.submitting:
            return state
        return replace(
            state,
            draft=state.draft.with_field(action.field, action.value),
            errors=tuple(e for e in state.errors if e.field != action.field),
        )

    if isinstance(action, PreviousStep):
        if state.phase == WizardPhase.submitting or state.step == WizardStep.EVENT_DETAILS:
            return state
        step = WizardStep(state.step - 1)
        return replace(
            state,
            step=step,
            phase=WizardPhase.editing,
            draft=state.draft.with_step(step),
            errors=(),
            focus_field=None,
            submission_error=None,
        )

    if isinstance(action, NextStep):
        return _next(state, today)

    if isinstance(action, SubmissionSucceeded):
        if state.phase != WizardPhase.submitting:
            return state
        return replace(
            state,
            phase=WizardPhase.submitted,
            errors=(),
            focus_field=None,
            submission_error=None,
            confirmation=dict(action.result),
        )

    if isinstance(action, SubmissionFailed):
        if state.phase != WizardPhase.submitting:
            return state
        return replace(
            state,
            step=WizardStep.REVIEW,
            phase=WizardPhase.submission_failed,
            errors=tuple(action.errors),
            focus_field=action.errors[0].field if action.errors else None,
            submission_error=action.message,
        )

    raise TypeError(f"Unknown wizard action: {action!r}")


def _next(state: WizardState, today: date | None) -> WizardState:
    # One submission in flight at a time.
    if state.phase == WizardPhase.submitting:
        return state

    errors = validate_step(state.step, state.draft, today)
    if errors:
        return replace(state, errors=errors, focus_field=errors[0].field)

    if state.step == WizardStep.REVIEW:
        return replace(
            state,
            phase=WizardPhase.submitting,
            errors=(),
            focus_field=None,
            submission_error=None,
        )

    step = WizardStep(state.step + 1)
    return replace(
        state,
        step=step,
        phase=WizardPhase.editing,
        draft=state.draft.with_step(step),
        errors=(),
        focus_field=None,
    )
