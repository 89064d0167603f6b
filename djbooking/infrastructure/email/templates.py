from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Any

from djbooking.application.ports.notification_gateway import (
    ADMIN_BOOKING_NOTIFICATION,
    BOOKING_CONFIRMATION,
)


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    text: str
    html: str


def render(template: str, data: dict[str, Any], business_name: str) -> RenderedEmail:
    if template == BOOKING_CONFIRMATION:
        return _booking_confirmation(data, business_name)
    if template == ADMIN_BOOKING_NOTIFICATION:
        return _admin_booking_notification(data)
    raise ValueError(f"Unknown email template: {template}")


def _booking_confirmation(data: dict[str, Any], business_name: str) -> RenderedEmail:
    text = "\n".join(
        [
            f"Hi {data.get('name')},",
            "",
            f"Thank you for your booking request with {business_name}!",
            "",
            f"Event Type: {data.get('eventType')}",
            f"Event Date: {data.get('eventDate')}",
            f"Location: {data.get('eventLocation')}",
            f"Guest Count: {data.get('guestCount')}",
            "",
            "We will contact you within 24 hours to discuss your event details.",
            "",
            f"Booking ID: {data.get('bookingId')}",
        ]
    )
    return RenderedEmail(
        subject=f"Booking Request Received - {business_name}",
        text=text,
        html=escape(text).replace("\n", "<br>"),
    )


def _admin_booking_notification(data: dict[str, Any]) -> RenderedEmail:
    rows = [
        ("Name", data.get("name")),
        ("Email", data.get("email")),
        ("Phone", data.get("phone")),
        ("Contact Method", data.get("contactMethod")),
        ("Event Type", data.get("eventType")),
        ("Event Date", data.get("eventDate")),
        ("Location", data.get("eventLocation")),
        ("Guest Count", data.get("guestCount")),
        ("Budget", data.get("budget")),
        ("Music Preferences", data.get("musicPreferences")),
        ("Special Requests", data.get("specialRequests")),
        ("Booking ID", data.get("bookingId")),
    ]
    text = "New Booking Request\n\n" + "\n".join(f"{label}: {value or '-'}" for label, value in rows)
    html = "<h2>New Booking Request</h2>\n" + "\n".join(
        f"<p><strong>{label}:</strong> {escape(str(value or '-'))}</p>" for label, value in rows
    )
    return RenderedEmail(
        subject=f"New Booking Request - {data.get('eventType')} on {data.get('eventDate')}",
        text=text,
        html=html,
    )
