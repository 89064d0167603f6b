"""
Tests for the MongoDB booking repository's document mapping and id handling.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import replace
from datetime import datetime, timezone
from types import SimpleNamespace

from bson import ObjectId

from djbooking.domain.entities.booking import Booking, BookingStatus
from djbooking.infrastructure.store.mongo_booking_repository import (
    MongoBookingRepository,
    from_document,
    to_document,
)

CREATED = datetime(2025, 6, 10, 15, 0, tzinfo=timezone.utc)


class FakeCollection:
    def __init__(self) -> None:
        self.docs: dict[ObjectId, dict] = {}
        self.indexes: list = []

    def create_index(self, keys):
        self.indexes.append(keys)

    def insert_one(self, document):
        oid = ObjectId()
        self.docs[oid] = {**document, "_id": oid}
        return SimpleNamespace(inserted_id=oid)

    def find_one(self, query):
        doc = self.docs.get(query["_id"])
        # stored datetimes come back naive, like a non tz_aware MongoClient
        return _naive(doc) if doc else None

    def find_one_and_replace(self, query, replacement, return_document=None):
        if query["_id"] not in self.docs:
            return None
        self.docs[query["_id"]] = {**replacement, "_id": query["_id"]}
        return self.docs[query["_id"]]

    def delete_one(self, query):
        return SimpleNamespace(deleted_count=1 if self.docs.pop(query["_id"], None) else 0)

    def aggregate(self, pipeline):
        assert pipeline == [{"$group": {"_id": "$status", "count": {"$sum": 1}}}]
        counts = Counter(doc["status"] for doc in self.docs.values())
        return [{"_id": status, "count": n} for status, n in counts.items()]


def _naive(doc):
    return {k: v.replace(tzinfo=None) if isinstance(v, datetime) else v for k, v in doc.items()}


def _booking(**overrides) -> Booking:
    values = dict(
        name="Jamie",
        email="jamie@example.com",
        phone="5551234567",
        event_type="wedding",
        event_date=datetime(2025, 6, 14, 4, 0, tzinfo=timezone.utc),
        event_location="Grand Ballroom",
        guest_count="101-200",
        created_at=CREATED,
        updated_at=CREATED,
    )
    values.update(overrides)
    return Booking(**values)


def _repo():
    collection = FakeCollection()
    return MongoBookingRepository({"bookings": collection}), collection


def test_indexes_created():
    _, collection = _repo()
    assert len(collection.indexes) == 4


def test_documents_use_camel_case_keys():
    document = to_document(_booking(status=BookingStatus.confirmed, quoted_price=1200.0))
    assert document["eventDate"] == datetime(2025, 6, 14, 4, 0, tzinfo=timezone.utc)
    assert document["status"] == "confirmed"
    assert document["quotedPrice"] == 1200.0
    assert "event_date" not in document


def test_from_document_restores_utc_and_defaults():
    oid = ObjectId()
    booking = from_document(
        {
            "_id": oid,
            "name": "Jamie",
            "email": "jamie@example.com",
            "phone": "5551234567",
            "eventType": "wedding",
            "eventDate": datetime(2025, 6, 14, 4, 0),
            "eventLocation": "Grand Ballroom",
            "guestCount": "101-200",
            "createdAt": datetime(2025, 6, 10, 15, 0),
            "updatedAt": datetime(2025, 6, 10, 15, 0),
        }
    )
    assert booking.id == str(oid)
    assert booking.event_date.tzinfo == timezone.utc
    assert booking.status == BookingStatus.pending
    assert booking.contact_method == "email"


def test_insert_get_replace_delete():
    repo, _ = _repo()

    stored = repo.insert(_booking())
    assert ObjectId.is_valid(stored.id)
    assert repo.get(stored.id).created_at == CREATED

    updated = repo.replace(replace(stored, status=BookingStatus.completed))
    assert updated.status == BookingStatus.completed

    assert repo.delete(stored.id) is True
    assert repo.get(stored.id) is None


def test_malformed_ids_resolve_to_nothing():
    repo, _ = _repo()
    assert repo.get("not-an-object-id") is None
    assert repo.delete("not-an-object-id") is False
    assert repo.replace(_booking(id="zzz")) is None


def test_count_by_status_uses_single_group():
    repo, _ = _repo()
    for status in ("pending", "pending", "cancelled"):
        repo.insert(_booking(status=BookingStatus(status)))
    assert repo.count_by_status() == {"pending": 2, "cancelled": 1}
