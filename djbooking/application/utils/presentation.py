from __future__ import annotations

from typing import Any

from djbooking.application.utils.validation_rules import parse_event_date
from djbooking.domain.entities.booking_draft import BookingDraft
from djbooking.domain.entities.wizard_state import (
    STEP_NAMES,
    TOTAL_STEPS,
    WizardPhase,
    WizardState,
    WizardStep,
)

EVENT_TYPE_LABELS = {
    "wedding": "Wedding",
    "corporate": "Corporate Event",
    "private-party": "Private Party",
    "birthday": "Birthday Party",
    "anniversary": "Anniversary",
    "other": "Other",
}

BUDGET_LABELS = {
    "under-1000": "Under $1,000",
    "1000-2500": "$1,000 - $2,500",
    "2500-5000": "$2,500 - $5,000",
    "5000-10000": "$5,000 - $10,000",
    "10000+": "$10,000+",
    "discuss": "Prefer to discuss",
}

GUEST_COUNT_LABELS = {
    "1-25": "1-25 people",
    "26-50": "26-50 people",
    "51-100": "51-100 people",
    "101-200": "101-200 people",
    "201-500": "201-500 people",
    "500+": "500+ people",
}


def event_type_label(value: str) -> str:
    return EVENT_TYPE_LABELS.get(value, value)


def budget_label(value: str) -> str:
    return BUDGET_LABELS.get(value, value)


def format_event_date(value: str) -> str:
    """'2025-06-14' -> 'Saturday, June 14, 2025'. Unparseable input yields ''."""
    day = parse_event_date(value)
    if day is None:
        return ""
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def progress_indicator(step: WizardStep) -> list[dict[str, Any]]:
    items = []
    for candidate in WizardStep:
        if candidate < step:
            status = "completed"
        elif candidate == step:
            status = "current"
        else:
            status = "upcoming"
        items.append({"number": int(candidate), "title": STEP_NAMES[candidate], "status": status})
    return items


def navigation(state: WizardState) -> dict[str, Any]:
    is_last = state.step == WizardStep.REVIEW
    submitting = state.phase == WizardPhase.submitting
    if not is_last:
        next_label = "Next →"
    elif submitting:
        next_label = "Submitting..."
    else:
        next_label = "Submit Request"
    return {
        "previous_enabled": state.step != WizardStep.EVENT_DETAILS and not submitting,
        "position": f"Step {int(state.step)} of {TOTAL_STEPS}",
        "next_label": next_label,
        "next_enabled": not submitting,
    }


def review_sections(draft: BookingDraft) -> list[dict[str, Any]]:
    preferences = []
    if draft.music_preferences:
        preferences.append(("Music Preferences", draft.music_preferences))
    if draft.special_requests:
        preferences.append(("Special Requests", draft.special_requests))
    return [
        {
            "title": "Event Details",
            "items": [
                ("Event Type", event_type_label(draft.event_type)),
                ("Date", format_event_date(draft.event_date)),
                ("Guests", GUEST_COUNT_LABELS.get(draft.guest_count, draft.guest_count)),
                ("Budget", budget_label(draft.budget)),
                ("Location", draft.event_location),
            ],
        },
        {
            "title": "Contact Information",
            "items": [
                ("Name", draft.name),
                ("Email", draft.email),
                ("Phone", draft.phone),
                ("Contact Method", draft.contact_method),
            ],
        },
        {"title": "Music & Preferences", "items": preferences},
    ]


def next_steps(contact_method: str) -> list[str]:
    return [
        "We'll review your event details within 24 hours",
        f"You'll receive a personalized quote via {contact_method}",
        "We'll schedule a call to discuss your vision in detail",
        "Once confirmed, we'll send a contract and secure your date",
    ]


def confirmation_summary(draft: BookingDraft, result: dict[str, Any] | None = None) -> dict[str, Any]:
    result = result or {}
    return {
        "booking_id": result.get("id"),
        "name": draft.name,
        "event_date": format_event_date(draft.event_date),
        "contact_method": draft.contact_method,
        "headline": (
            f"Thank you {draft.name}! We've received your booking request "
            f"for {format_event_date(draft.event_date)}."
        ),
        "message": result.get("message"),
        "next_steps": next_steps(draft.contact_method),
    }
