from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from djbooking.domain.entities.booking import Booking
from djbooking.domain.entities.field_error import FieldError


@dataclass(frozen=True)
class Created:
    booking: Booking


@dataclass(frozen=True)
class Found:
    booking: Booking


@dataclass(frozen=True)
class Deleted:
    booking_id: str


@dataclass(frozen=True)
class Invalid:
    errors: tuple[FieldError, ...]


@dataclass(frozen=True)
class NotFound:
    resource: str = "Booking"


CreateResult = Union[Created, Invalid]
LookupResult = Union[Found, NotFound]
UpdateResult = Union[Found, NotFound, Invalid]
DeleteResult = Union[Deleted, NotFound]
