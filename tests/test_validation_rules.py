"""
Tests for the field rules shared by the booking wizard and the booking service.
"""

from __future__ import annotations

from datetime import timedelta

from djbooking.application.use_cases import booking_service
from djbooking.application.utils import validation_rules, wizard_transitions
from djbooking.application.utils.validation_rules import (
    CLIENT_MIN_LOCATION_LENGTH,
    SERVER_MIN_LOCATION_LENGTH,
    parse_event_date,
    validate_budget,
    validate_contact_method,
    validate_email,
    validate_event_date,
    validate_event_location,
    validate_fields,
    validate_name,
    validate_phone,
    validate_quoted_price,
    validate_status,
)


def test_name_length_boundaries():
    assert validate_name("Al") is None
    assert validate_name("A" * 100) is None
    assert validate_name("A") == "Name must be between 2 and 100 characters"
    assert validate_name("A" * 101) == "Name must be between 2 and 100 characters"


def test_name_length_is_measured_after_trim():
    assert validate_name("  A  ") == "Name must be between 2 and 100 characters"


def test_name_character_set():
    assert validate_name("Mary-Jane O'Brien") is None
    assert validate_name("R2D2") == "Name can only contain letters, spaces, hyphens, and apostrophes"


def test_event_date_today_fails_tomorrow_passes(today):
    assert validate_event_date(today.isoformat(), today) == "Event date must be at least tomorrow"
    assert validate_event_date((today + timedelta(days=1)).isoformat(), today) is None


def test_event_date_must_parse(today):
    assert validate_event_date("next friday", today) == "Please provide a valid event date"
    assert validate_event_date("", today) == "Please provide a valid event date"


def test_parse_event_date_accepts_datetimes():
    assert parse_event_date("2025-06-14T00:00:00.000Z").isoformat() == "2025-06-14"
    assert parse_event_date("2025-06-14").isoformat() == "2025-06-14"
    assert parse_event_date("14/06/2025") is None


def test_location_minimum_differs_between_client_and_server():
    location = "Main Hall"  # 9 characters
    assert CLIENT_MIN_LOCATION_LENGTH == 10
    assert SERVER_MIN_LOCATION_LENGTH == 5
    assert validate_event_location(location, SERVER_MIN_LOCATION_LENGTH) is None
    assert (
        validate_event_location(location, CLIENT_MIN_LOCATION_LENGTH)
        == "Event location must be between 10 and 200 characters"
    )
    assert validate_event_location("x" * 201) == "Event location must be between 5 and 200 characters"


def test_email_and_phone_shapes():
    assert validate_email(" dj@example.com ") is None
    assert validate_email("dj@example") == "Please provide a valid email address"
    assert validate_phone("+1 (555) 123-4567") is None
    assert validate_phone("555-1234") == "Please provide a valid phone number"


def test_optional_fields_accept_blank_values():
    assert validate_budget("") is None
    assert validate_budget("a lot") == "Please select a valid budget range"
    assert validate_contact_method(None) is None
    assert validate_contact_method("fax") == "Contact method must be email, phone, or both"


def test_admin_rules():
    assert validate_status("completed") is None
    assert validate_status("archived") == "Status must be one of: pending, confirmed, cancelled, completed"
    assert validate_quoted_price(0) is None
    assert validate_quoted_price(-1) == "Quoted price cannot be negative"
    assert validate_quoted_price("abc") == "Quoted price must be a number"


def test_quoted_price_must_be_finite():
    assert validate_quoted_price(float("nan")) == "Quoted price must be a number"
    assert validate_quoted_price(float("inf")) == "Quoted price must be a number"
    assert validate_quoted_price("-Infinity") == "Quoted price must be a number"


def test_validate_fields_reports_in_field_order(make_payload, today):
    errors = validate_fields(
        make_payload(name="", eventType="rave", phone="123"),
        today=today,
    )
    assert [e.field for e in errors] == ["eventType", "name", "phone"]


def test_validate_fields_restricted_to_subset(make_payload, today):
    errors = validate_fields(make_payload(name=""), fields=("eventType", "eventDate"), today=today)
    assert errors == ()


def test_wizard_and_service_share_the_same_rules():
    """Both gates import the one rule implementation."""
    assert wizard_transitions.validate_fields is validation_rules.validate_fields
    assert booking_service.validate_fields is validation_rules.validate_fields
