from __future__ import annotations

import logging
from typing import Any

import httpx

from djbooking.application.exceptions import FieldValidationError, TransportError
from djbooking.application.ports.booking_api import BookingApiPort
from djbooking.domain.entities.field_error import FieldError


class BookingApiClient(BookingApiPort):
    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._endpoint = base_url.rstrip("/") + "/api/booking"
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def create_booking(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = self._client.post(self._endpoint, json=payload)
        except httpx.HTTPError as e:
            raise TransportError(f"Could not reach booking service: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if resp.status_code == 400 and body.get("errors"):
            errors = [
                FieldError(field=str(err.get("field")), message=str(err.get("message")))
                for err in body["errors"]
                if isinstance(err, dict)
            ]
            raise FieldValidationError(errors)

        if resp.status_code >= 400 or not body.get("success"):
            self._logger.error(
                "Booking service error",
                extra={"status": resp.status_code, "error": body.get("message")},
            )
            raise TransportError(body.get("message") or f"Booking service returned {resp.status_code}")

        return body.get("data") or {}
