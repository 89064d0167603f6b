from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Mapping
from zoneinfo import ZoneInfo

from djbooking.application.dto.results import (
    Created,
    CreateResult,
    Deleted,
    DeleteResult,
    Found,
    Invalid,
    LookupResult,
    NotFound,
    UpdateResult,
)
from djbooking.application.exceptions import NotificationError
from djbooking.application.ports.booking_repository import BookingRepositoryPort
from djbooking.application.ports.notification_gateway import (
    ADMIN_BOOKING_NOTIFICATION,
    BOOKING_CONFIRMATION,
    NotificationGatewayPort,
)
from djbooking.application.utils.validation_rules import (
    SERVER_MIN_LOCATION_LENGTH,
    normalize_email,
    parse_event_date,
    validate_admin_notes,
    validate_fields,
    validate_quoted_price,
    validate_status,
)
from djbooking.domain.entities.booking import (
    DEFAULT_CONTACT_METHOD,
    SORTABLE_FIELDS,
    Booking,
    BookingPage,
    BookingStats,
    BookingStatus,
    Pagination,
)
from djbooking.domain.entities.field_error import FieldError

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_SORT_FIELD = "createdAt"

Defer = Callable[..., Any]


class BookingService:
    """
    Authoritative owner of bookings: creation, admin status changes, stats.

    Every operation returns a result value (see `application.dto.results`);
    mapping results to HTTP responses is the router's job.
    """

    def __init__(
        self,
        repository: BookingRepositoryPort,
        notifications: NotificationGatewayPort,
        timezone: ZoneInfo,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repository = repository
        self._notifications = notifications
        self._timezone = timezone
        self._clock = clock or (lambda: datetime.now(tz=ZoneInfo("UTC")))
        self._logger = logging.getLogger(__name__)

    def create_booking(
        self,
        payload: Mapping[str, Any],
        ip_address: str | None = None,
        user_agent: str | None = None,
        defer: Defer | None = None,
    ) -> CreateResult:
        now = self._now()
        errors = validate_fields(
            payload,
            location_min_length=SERVER_MIN_LOCATION_LENGTH,
            today=self._today(now),
        )
        if errors:
            self._logger.info(
                "Booking rejected",
                extra={"reason": ",".join(e.field for e in errors)},
            )
            return Invalid(errors=errors)

        event_day = parse_event_date(payload.get("eventDate"))
        booking = Booking(
            name=_clean(payload.get("name")),
            email=normalize_email(payload.get("email")),
            phone=_clean(payload.get("phone")),
            contact_method=_clean(payload.get("contactMethod")) or DEFAULT_CONTACT_METHOD,
            event_type=_clean(payload.get("eventType")),
            event_date=self._event_datetime(event_day),
            event_location=_clean(payload.get("eventLocation")),
            guest_count=_clean(payload.get("guestCount")),
            budget=_optional(payload.get("budget")),
            music_preferences=_optional(payload.get("musicPreferences")),
            special_requests=_optional(payload.get("specialRequests")),
            status=BookingStatus.pending,
            created_at=now,
            updated_at=now,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        if booking.event_date <= now:
            return Invalid(errors=(FieldError("eventDate", "Event date must be in the future"),))

        stored = self._repository.insert(booking)
        self._logger.info(
            "Booking created",
            extra={"booking_id": stored.id, "status": stored.status.value},
        )

        if defer is not None:
            defer(self.notify_booking_created, stored)
        else:
            self.notify_booking_created(stored)
        return Created(booking=stored)

    def notify_booking_created(self, booking: Booking) -> None:
        """Send the client confirmation and the admin notification. Never raises."""
        event_date = booking.event_date.date().isoformat()
        confirmation = {
            "bookingId": booking.id,
            "name": booking.name,
            "email": booking.email,
            "eventType": booking.event_type,
            "eventDate": event_date,
            "eventLocation": booking.event_location,
            "guestCount": booking.guest_count,
        }
        admin = {
            **confirmation,
            "phone": booking.phone,
            "contactMethod": booking.contact_method,
            "budget": booking.budget,
            "musicPreferences": booking.music_preferences,
            "specialRequests": booking.special_requests,
        }
        self._send_quietly(BOOKING_CONFIRMATION, confirmation, booking.id)
        self._send_quietly(ADMIN_BOOKING_NOTIFICATION, admin, booking.id)

    def list_bookings(
        self,
        status: str | None = None,
        sort_by: str = DEFAULT_SORT_FIELD,
        sort_order: str = "desc",
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> BookingPage:
        page = max(1, int(page))
        limit = min(max(1, int(limit)), MAX_PAGE_SIZE)
        sort_field = sort_by if sort_by in SORTABLE_FIELDS else DEFAULT_SORT_FIELD
        status = status or None

        items = self._repository.find(
            status=status,
            sort_field=sort_field,
            descending=sort_order != "asc",
            skip=(page - 1) * limit,
            limit=limit,
        )
        total = self._repository.count(status)
        return BookingPage(
            items=items,
            pagination=Pagination(
                current_page=page,
                total_pages=math.ceil(total / limit),
                total_items=total,
                items_per_page=limit,
            ),
        )

    def get_booking(self, booking_id: str) -> LookupResult:
        booking = self._repository.get(booking_id)
        if booking is None:
            return NotFound()
        return Found(booking=booking)

    def update_status(
        self,
        booking_id: str,
        status: str,
        admin_notes: str | None = None,
        quoted_price: float | None = None,
    ) -> UpdateResult:
        errors = []
        for field, message in (
            ("status", validate_status(status)),
            ("adminNotes", validate_admin_notes(admin_notes)),
            ("quotedPrice", validate_quoted_price(quoted_price)),
        ):
            if message:
                errors.append(FieldError(field=field, message=message))
        if errors:
            return Invalid(errors=tuple(errors))

        current = self._repository.get(booking_id)
        if current is None:
            return NotFound()

        # Any status may follow any other; no transition graph is enforced.
        changes: dict[str, Any] = {
            "status": BookingStatus(status.strip()),
            "updated_at": self._now(),
        }
        if admin_notes is not None:
            changes["admin_notes"] = admin_notes.strip()
        if quoted_price is not None:
            changes["quoted_price"] = float(quoted_price)

        updated = self._repository.replace(replace(current, **changes))
        if updated is None:
            return NotFound()
        self._logger.info(
            "Booking status updated",
            extra={"booking_id": booking_id, "status": updated.status.value},
        )
        return Found(booking=updated)

    def mark_responded(self, booking_id: str) -> LookupResult:
        current = self._repository.get(booking_id)
        if current is None:
            return NotFound()
        now = self._now()
        updated = self._repository.replace(replace(current, responded_at=now, updated_at=now))
        if updated is None:
            return NotFound()
        return Found(booking=updated)

    def delete_booking(self, booking_id: str) -> DeleteResult:
        if not self._repository.delete(booking_id):
            return NotFound()
        self._logger.info("Booking deleted", extra={"booking_id": booking_id})
        return Deleted(booking_id=booking_id)

    def get_stats(self) -> BookingStats:
        return BookingStats.from_counts(self._repository.count_by_status())

    def _send_quietly(self, template: str, data: dict[str, Any], booking_id: str | None) -> None:
        try:
            result = self._notifications.send(template, data)
        except NotificationError as e:
            self._logger.error(
                "Notification failed",
                extra={"booking_id": booking_id, "template": template, "error": str(e)},
            )
            return
        except Exception as e:
            self._logger.exception(
                "Unexpected notification error",
                extra={"booking_id": booking_id, "template": template, "error": str(e)},
            )
            return
        if not result.success:
            self._logger.warning(
                "Notification not delivered",
                extra={"booking_id": booking_id, "template": template, "reason": result.message},
            )

    def _now(self) -> datetime:
        now = self._clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now

    def _today(self, now: datetime) -> date:
        return now.astimezone(self._timezone).date()

    def _event_datetime(self, day: date | None) -> datetime:
        return datetime.combine(day, time.min, tzinfo=self._timezone)


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _optional(value: Any) -> str | None:
    cleaned = _clean(value)
    return cleaned or None
