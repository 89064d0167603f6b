from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from djbooking.application.ports.booking_repository import BookingRepositoryPort
from djbooking.domain.entities.booking import Booking, BookingStatus

COLLECTION_NAME = "bookings"

# attribute name -> document key
_DOCUMENT_KEYS: dict[str, str] = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "contact_method": "contactMethod",
    "event_type": "eventType",
    "event_date": "eventDate",
    "event_location": "eventLocation",
    "guest_count": "guestCount",
    "budget": "budget",
    "music_preferences": "musicPreferences",
    "special_requests": "specialRequests",
    "status": "status",
    "admin_notes": "adminNotes",
    "quoted_price": "quotedPrice",
    "responded_at": "respondedAt",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
    "ip_address": "ipAddress",
    "user_agent": "userAgent",
}
_DATETIME_ATTRS = ("event_date", "responded_at", "created_at", "updated_at")


class MongoBookingRepository(BookingRepositoryPort):
    def __init__(self, db: Database, ensure_indexes: bool = True) -> None:
        self._collection: Collection = db[COLLECTION_NAME]
        if ensure_indexes:
            self._ensure_indexes()

    def _ensure_indexes(self) -> None:
        self._collection.create_index([("eventDate", ASCENDING)])
        self._collection.create_index([("status", ASCENDING)])
        self._collection.create_index([("email", ASCENDING)])
        self._collection.create_index([("createdAt", DESCENDING)])

    def insert(self, booking: Booking) -> Booking:
        document = to_document(booking)
        result = self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        return from_document(document)

    def get(self, booking_id: str) -> Booking | None:
        oid = _object_id(booking_id)
        if oid is None:
            return None
        document = self._collection.find_one({"_id": oid})
        return from_document(document) if document else None

    def find(
        self,
        status: str | None,
        sort_field: str,
        descending: bool,
        skip: int,
        limit: int,
    ) -> list[Booking]:
        cursor = (
            self._collection.find(_status_filter(status))
            .sort(sort_field, DESCENDING if descending else ASCENDING)
            .skip(skip)
            .limit(limit)
        )
        return [from_document(doc) for doc in cursor]

    def count(self, status: str | None = None) -> int:
        return self._collection.count_documents(_status_filter(status))

    def replace(self, booking: Booking) -> Booking | None:
        oid = _object_id(booking.id)
        if oid is None:
            return None
        document = self._collection.find_one_and_replace(
            {"_id": oid},
            to_document(booking),
            return_document=ReturnDocument.AFTER,
        )
        return from_document(document) if document else None

    def delete(self, booking_id: str) -> bool:
        oid = _object_id(booking_id)
        if oid is None:
            return False
        return self._collection.delete_one({"_id": oid}).deleted_count == 1

    def count_by_status(self) -> dict[str, int]:
        pipeline = [{"$group": {"_id": "$status", "count": {"$sum": 1}}}]
        return {row["_id"]: row["count"] for row in self._collection.aggregate(pipeline)}


def to_document(booking: Booking) -> dict[str, Any]:
    document: dict[str, Any] = {}
    for attr, key in _DOCUMENT_KEYS.items():
        value = getattr(booking, attr)
        if isinstance(value, BookingStatus):
            value = value.value
        document[key] = value
    return document


def from_document(document: dict[str, Any]) -> Booking:
    values: dict[str, Any] = {"id": str(document["_id"])}
    for attr, key in _DOCUMENT_KEYS.items():
        values[attr] = document.get(key)
    for attr in _DATETIME_ATTRS:
        value = values.get(attr)
        # pymongo hands back naive UTC datetimes unless the client is tz_aware
        if isinstance(value, datetime) and value.tzinfo is None:
            values[attr] = value.replace(tzinfo=timezone.utc)
    values["status"] = BookingStatus(values.get("status") or BookingStatus.pending.value)
    values["contact_method"] = values.get("contact_method") or "email"
    return Booking(**values)


def _object_id(booking_id: str | None) -> ObjectId | None:
    if not booking_id:
        return None
    try:
        return ObjectId(booking_id)
    except (InvalidId, TypeError):
        return None


def _status_filter(status: str | None) -> dict[str, Any]:
    return {"status": status} if status else {}
