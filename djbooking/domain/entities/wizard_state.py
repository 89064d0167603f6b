from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from djbooking.domain.entities.booking_draft import BookingDraft
from djbooking.domain.entities.field_error import FieldError


class WizardStep(IntEnum):
    EVENT_DETAILS = 1
    CLIENT_INFO = 2
    PREFERENCES = 3
    REVIEW = 4

    @property
    def display_name(self) -> str:
        return STEP_NAMES[self]


STEP_NAMES = {
    WizardStep.EVENT_DETAILS: "Event Details",
    WizardStep.CLIENT_INFO: "Client Information",
    WizardStep.PREFERENCES: "Preferences",
    WizardStep.REVIEW: "Review & Submit",
}
TOTAL_STEPS = len(WizardStep)


class WizardPhase(str, Enum):
    editing = "editing"
    submitting = "submitting"
    submitted = "submitted"
    submission_failed = "submission_failed"


@dataclass(frozen=True)
class WizardState:
    step: WizardStep = WizardStep.EVENT_DETAILS
    phase: WizardPhase = WizardPhase.editing
    draft: BookingDraft = BookingDraft()
    errors: tuple[FieldError, ...] = ()
    focus_field: str | None = None
    submission_error: str | None = None
    confirmation: dict[str, Any] | None = None

    def error_for(self, field_name: str) -> str | None:
        for error in self.errors:
            if error.field == field_name:
                return error.message
        return None


# Actions


@dataclass(frozen=True)
class FieldChanged:
    field: str
    value: str


@dataclass(frozen=True)
class NextStep:
    pass


@dataclass(frozen=True)
class PreviousStep:
    pass


@dataclass(frozen=True)
class SubmissionSucceeded:
    result: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SubmissionFailed:
    message: str
    errors: tuple[FieldError, ...] = ()


@dataclass(frozen=True)
class Reset:
    pass


WizardAction = FieldChanged | NextStep | PreviousStep | SubmissionSucceeded | SubmissionFailed | Reset
