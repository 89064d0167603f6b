from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

TODAY = date(2025, 6, 10)
NOW = datetime(2025, 6, 10, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_payload():
    """Factory for a complete, valid booking payload dated after TODAY."""

    def _make(**overrides: str) -> dict[str, str]:
        payload = {
            "eventType": "wedding",
            "eventDate": (TODAY + timedelta(days=4)).isoformat(),
            "eventLocation": "Grand Ballroom, 12 Main Street",
            "guestCount": "101-200",
            "budget": "2500-5000",
            "name": "Jamie O'Neil",
            "email": "Jamie.ONeil@Example.com ",
            "phone": "(555) 123-4567",
            "contactMethod": "phone",
            "musicPreferences": "Motown and 90s R&B",
            "specialRequests": "First dance: At Last",
        }
        payload.update(overrides)
        return payload

    return _make
