from __future__ import annotations

import logging
from typing import Any

from djbooking.application.ports.notification_gateway import NotificationGatewayPort, NotificationResult
from djbooking.infrastructure.email.templates import render


class LoggingNotificationGateway(NotificationGatewayPort):
    def __init__(self, business_name: str = "") -> None:
        self._business_name = business_name
        self._logger = logging.getLogger(__name__)
        self.sent: list[tuple[str, dict[str, Any]]] = []

    def send(self, template: str, data: dict[str, Any]) -> NotificationResult:
        email = render(template, data, self._business_name)
        self.sent.append((template, dict(data)))
        self._logger.info(
            "Email service not configured - logging %s",
            email.subject,
            extra={"template": template, "booking_id": data.get("bookingId")},
        )
        return NotificationResult(success=True, message="Email logged")
