"""
Tests for the wizard view models.
"""

from __future__ import annotations

from djbooking.application.utils.presentation import (
    budget_label,
    confirmation_summary,
    event_type_label,
    format_event_date,
    navigation,
    progress_indicator,
    review_sections,
)
from djbooking.domain.entities.booking_draft import BookingDraft
from djbooking.domain.entities.wizard_state import WizardPhase, WizardState, WizardStep


def test_progress_indicator_marks_steps():
    statuses = [item["status"] for item in progress_indicator(WizardStep.PREFERENCES)]
    assert statuses == ["completed", "completed", "current", "upcoming"]
    assert progress_indicator(WizardStep.REVIEW)[3]["title"] == "Review & Submit"


def test_navigation_labels():
    assert navigation(WizardState())["previous_enabled"] is False
    assert navigation(WizardState())["next_label"] == "Next →"

    review = navigation(WizardState(step=WizardStep.REVIEW))
    assert review["position"] == "Step 4 of 4"
    assert review["next_label"] == "Submit Request"

    busy = navigation(WizardState(step=WizardStep.REVIEW, phase=WizardPhase.submitting))
    assert busy["next_label"] == "Submitting..."
    assert busy["next_enabled"] is False
    assert busy["previous_enabled"] is False


def test_labels_and_dates():
    assert event_type_label("private-party") == "Private Party"
    assert budget_label("10000+") == "$10,000+"
    assert format_event_date("2025-06-14") == "Saturday, June 14, 2025"
    assert format_event_date("soon") == ""


def test_review_sections_skip_empty_preferences():
    sections = review_sections(BookingDraft(event_type="wedding", name="Sam"))
    assert [s["title"] for s in sections] == ["Event Details", "Contact Information", "Music & Preferences"]
    assert sections[0]["items"][0] == ("Event Type", "Wedding")
    assert sections[2]["items"] == []


def test_confirmation_summary_uses_contact_method():
    summary = confirmation_summary(
        BookingDraft(name="Sam", event_date="2025-06-14", contact_method="both"),
        {"id": "bk_2"},
    )
    assert summary["booking_id"] == "bk_2"
    assert summary["event_date"] == "Saturday, June 14, 2025"
    assert summary["next_steps"][1] == "You'll receive a personalized quote via both"
    assert len(summary["next_steps"]) == 4
