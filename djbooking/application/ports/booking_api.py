from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BookingApiPort(ABC):
    @abstractmethod
    def create_booking(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Submit a booking request.

        Returns the server's `data` object on success.
        Raises FieldValidationError when the server rejects fields,
        TransportError for network or server failures.
        """
        raise NotImplementedError
