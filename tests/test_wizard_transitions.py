"""
Tests for the pure booking wizard state machine.
"""

from __future__ import annotations

from djbooking.application.utils.wizard_transitions import initial_state, transition
from djbooking.domain.entities.booking_draft import BookingDraft
from djbooking.domain.entities.field_error import FieldError
from djbooking.domain.entities.wizard_state import (
    FieldChanged,
    NextStep,
    PreviousStep,
    Reset,
    SubmissionFailed,
    SubmissionSucceeded,
    WizardPhase,
    WizardState,
    WizardStep,
)


def _fill(state, values, today):
    for field, value in values.items():
        state = transition(state, FieldChanged(field, value), today)
    return state


def _step1(payload):
    return {k: payload[k] for k in ("eventType", "eventDate", "eventLocation", "guestCount", "budget")}


def _step2(payload):
    return {k: payload[k] for k in ("name", "email", "phone", "contactMethod")}


def test_failing_step_one_stays_and_focuses_first_error(make_payload, today):
    state = _fill(WizardState(), _step1(make_payload(eventLocation="Hall")), today)

    after = transition(state, NextStep(), today)

    assert after.step == WizardStep.EVENT_DETAILS
    assert after.phase == WizardPhase.editing
    assert [e.field for e in after.errors] == ["eventLocation"]
    assert after.focus_field == "eventLocation"
    assert after.error_for("eventLocation") == "Event location must be between 10 and 200 characters"


def test_empty_step_one_reports_every_field_in_order(today):
    after = transition(WizardState(), NextStep(), today)
    assert [e.field for e in after.errors] == ["eventType", "eventDate", "eventLocation", "guestCount"]
    assert after.focus_field == "eventType"


def test_event_date_today_blocks_step_one(make_payload, today):
    state = _fill(WizardState(), _step1(make_payload(eventDate=today.isoformat())), today)
    after = transition(state, NextStep(), today)
    assert after.step == WizardStep.EVENT_DETAILS
    assert after.error_for("eventDate") == "Event date must be at least tomorrow"


def test_field_change_clears_only_that_error(today):
    state = transition(WizardState(), NextStep(), today)
    state = transition(state, FieldChanged("eventType", "birthday"), today)
    assert state.error_for("eventType") is None
    assert state.error_for("guestCount") is not None


def test_back_navigation_keeps_step_one_values(make_payload, today):
    payload = make_payload()
    state = _fill(WizardState(), _step1(payload), today)
    state = transition(state, NextStep(), today)
    assert state.step == WizardStep.CLIENT_INFO

    state = transition(state, PreviousStep(), today)

    assert state.step == WizardStep.EVENT_DETAILS
    for field in ("eventType", "eventDate", "eventLocation", "guestCount"):
        assert state.draft.get(field) == payload[field]


def test_previous_from_step_one_is_a_noop():
    state = WizardState()
    assert transition(state, PreviousStep()) is state


def test_preferences_step_always_advances(make_payload, today):
    payload = make_payload()
    state = _fill(WizardState(), {**_step1(payload), **_step2(payload)}, today)
    state = transition(state, NextStep(), today)
    state = transition(state, NextStep(), today)
    assert state.step == WizardStep.PREFERENCES
    state = transition(state, NextStep(), today)
    assert state.step == WizardStep.REVIEW
    assert state.draft.current_step == 4


def _at_review(payload, today):
    state = WizardState(step=WizardStep.REVIEW, draft=BookingDraft.from_payload(payload))
    return state


def test_review_submit_enters_submitting(make_payload, today):
    state = transition(_at_review(make_payload(), today), NextStep(), today)
    assert state.phase == WizardPhase.submitting


def test_review_revalidates_earlier_steps(make_payload, today):
    state = transition(_at_review(make_payload(email="nope"), today), NextStep(), today)
    assert state.step == WizardStep.REVIEW
    assert state.phase == WizardPhase.editing
    assert state.focus_field == "email"


def test_next_while_submitting_is_rejected(make_payload, today):
    submitting = transition(_at_review(make_payload(), today), NextStep(), today)
    assert transition(submitting, NextStep(), today) is submitting
    assert transition(submitting, PreviousStep(), today) is submitting


def test_submission_failed_keeps_draft_and_surfaces_errors(make_payload, today):
    payload = make_payload()
    submitting = transition(_at_review(payload, today), NextStep(), today)
    failed = transition(
        submitting,
        SubmissionFailed("Please correct the highlighted fields.", (FieldError("email", "taken"),)),
        today,
    )
    assert failed.phase == WizardPhase.submission_failed
    assert failed.step == WizardStep.REVIEW
    assert failed.focus_field == "email"
    assert failed.draft.to_payload() == payload

    retry = transition(failed, NextStep(), today)
    assert retry.phase == WizardPhase.submitting


def test_submission_succeeded_is_terminal(make_payload, today):
    submitting = transition(_at_review(make_payload(), today), NextStep(), today)
    done = transition(submitting, SubmissionSucceeded({"id": "abc"}), today)
    assert done.phase == WizardPhase.submitted
    assert done.confirmation == {"id": "abc"}
    assert transition(done, NextStep(), today) is done
    assert transition(done, Reset(), today) == WizardState()


def test_submission_results_ignored_outside_submitting():
    state = WizardState()
    assert transition(state, SubmissionSucceeded({"id": "x"})) is state
    assert transition(state, SubmissionFailed("boom")) is state


def test_transition_does_not_mutate_input(today):
    state = WizardState()
    transition(state, FieldChanged("name", "Sam"), today)
    assert state.draft.name == ""


def test_initial_state_resumes_saved_step(make_payload):
    draft = BookingDraft.from_payload({**make_payload(), "currentStep": 3})
    assert initial_state(draft).step == WizardStep.PREFERENCES
    assert initial_state(BookingDraft(current_step=3)).step == WizardStep.EVENT_DETAILS
    assert initial_state(None) == WizardState()
