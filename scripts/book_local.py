#!/usr/bin/env python3
"""
Interactive booking wizard in the terminal.

Usage:
  python3 scripts/book_local.py               # posts to BOOKING_API_BASE_URL
  python3 scripts/book_local.py --in-process  # runs the API in this process

What it does:
- Resumes a saved draft from DRAFT_DIR if one exists
- Walks the four booking steps with the same validation the server uses
- Prints field errors, the review summary and the confirmation
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv()

from djbooking.application.use_cases.booking_wizard import BookingWizard
from djbooking.application.utils.presentation import (
    BUDGET_LABELS,
    EVENT_TYPE_LABELS,
    GUEST_COUNT_LABELS,
    navigation,
    progress_indicator,
    review_sections,
)
from djbooking.domain.entities.booking import CONTACT_METHODS
from djbooking.domain.entities.wizard_state import WizardPhase, WizardState, WizardStep

# (wire field, prompt, choices)
STEP_PROMPTS: dict[WizardStep, list[tuple[str, str, dict[str, str] | None]]] = {
    WizardStep.EVENT_DETAILS: [
        ("eventType", "Event type", EVENT_TYPE_LABELS),
        ("eventDate", "Event date (YYYY-MM-DD)", None),
        ("eventLocation", "Event location", None),
        ("guestCount", "Guest count", GUEST_COUNT_LABELS),
        ("budget", "Budget (optional)", BUDGET_LABELS),
    ],
    WizardStep.CLIENT_INFO: [
        ("name", "Full name", None),
        ("email", "Email", None),
        ("phone", "Phone", None),
        ("contactMethod", "Preferred contact method", {m: m for m in CONTACT_METHODS}),
    ],
    WizardStep.PREFERENCES: [
        ("musicPreferences", "Music preferences (optional)", None),
        ("specialRequests", "Special requests (optional)", None),
    ],
    WizardStep.REVIEW: [],
}


def _build_wizard(in_process: bool) -> BookingWizard:
    from djbooking.wiring.dependencies import get_booking_wizard

    if not in_process:
        return get_booking_wizard()

    from fastapi.testclient import TestClient

    from djbooking.application.use_cases.draft_autosave import DraftAutoSaver
    from djbooking.core.config import settings
    from djbooking.infrastructure.analytics.logging_analytics import LoggingAnalytics
    from djbooking.infrastructure.http.booking_api_client import BookingApiClient
    from djbooking.infrastructure.store.json_draft_store import JsonDraftStore
    from djbooking.main import app

    return BookingWizard(
        api=BookingApiClient("http://testserver", client=TestClient(app)),
        autosaver=DraftAutoSaver(JsonDraftStore(settings.DRAFT_DIR), settings.DRAFT_AUTOSAVE_SECONDS),
        analytics=LoggingAnalytics(),
    )


def _print_progress(state: WizardState) -> None:
    print("\n" + "-" * 60)
    marks = {"completed": "x", "current": ">", "upcoming": " "}
    print("  ".join(f"[{marks[i['status']]}] {i['title']}" for i in progress_indicator(state.step)))
    print(navigation(state)["position"])
    print("-" * 60)


def _prompt(field: str, label: str, choices: dict[str, str] | None, current: str) -> str | None:
    if choices:
        print(f"{label}: " + ", ".join(f"{k} ({v})" for k, v in choices.items()))
    suffix = f" [{current}]" if current else ""
    answer = input(f"{label}{suffix}: ").strip()
    if answer.lower() in ("/quit", "/exit"):
        raise KeyboardInterrupt
    if answer == "":
        return None
    return answer


def _collect(wizard: BookingWizard) -> None:
    state = wizard.state
    for field, label, choices in STEP_PROMPTS[state.step]:
        error = state.error_for(field)
        if error:
            print(f"  ! {error}")
        value = _prompt(field, label, choices, state.draft.get(field))
        if value is not None:
            state = wizard.set_field(field, value)


def _print_review(state: WizardState) -> None:
    for section in review_sections(state.draft):
        print(f"\n{section['title']}")
        for label, value in section["items"]:
            print(f"  {label}: {value or '-'}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--in-process", action="store_true", help="serve the API inside this process")
    args = parser.parse_args()

    wizard = _build_wizard(args.in_process)
    state = wizard.start()
    print("\nBook your event")
    print("Blank input keeps the current value. Commands: b (back), r (reset), /quit")

    try:
        while state.phase != WizardPhase.submitted:
            _print_progress(state)
            if state.step == WizardStep.REVIEW:
                _print_review(state)
                if state.submission_error:
                    print(f"\n  ! {state.submission_error}")
                for error in state.errors:
                    print(f"  ! {error.field}: {error.message}")
            else:
                _collect(wizard)

            label = navigation(wizard.state)["next_label"]
            choice = input(f"\n[Enter] {label}   [b] back   [r] reset: ").strip().lower()
            if choice == "b":
                state = wizard.previous_step()
            elif choice == "r":
                state = wizard.reset()
            elif choice in ("/quit", "/exit"):
                raise KeyboardInterrupt
            else:
                state = wizard.next_step()
    except (EOFError, KeyboardInterrupt):
        wizard.autosaver.flush()
        print("\nDraft saved. Bye!")
        return

    summary = wizard.confirmation() or {}
    print("\n" + "=" * 60)
    print(summary.get("headline", "Booking submitted"))
    if summary.get("message"):
        print(summary["message"])
    print("\nWhat happens next:")
    for i, item in enumerate(summary.get("next_steps", []), 1):
        print(f"  {i}. {item}")
    print("=" * 60)


if __name__ == "__main__":
    main()
