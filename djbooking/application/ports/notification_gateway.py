from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

BOOKING_CONFIRMATION = "booking-confirmation"
ADMIN_BOOKING_NOTIFICATION = "admin-booking-notification"


@dataclass(frozen=True)
class NotificationResult:
    success: bool
    message: str


class NotificationGatewayPort(ABC):
    @abstractmethod
    def send(self, template: str, data: dict[str, Any]) -> NotificationResult:
        """Render `template` with `data` and deliver it. May raise NotificationError."""
        raise NotImplementedError
