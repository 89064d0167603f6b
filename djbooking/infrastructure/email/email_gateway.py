from __future__ import annotations

import logging
from typing import Any

from djbooking.application.ports.notification_gateway import (
    ADMIN_BOOKING_NOTIFICATION,
    NotificationGatewayPort,
    NotificationResult,
)
from djbooking.infrastructure.email.sendgrid_client import SendGridClient
from djbooking.infrastructure.email.templates import render


class EmailNotificationGateway(NotificationGatewayPort):
    def __init__(
        self,
        client: SendGridClient,
        sender: str,
        admin_email: str,
        business_name: str,
    ) -> None:
        self._client = client
        self._sender = sender
        self._admin_email = admin_email
        self._business_name = business_name
        self._logger = logging.getLogger(__name__)

    def send(self, template: str, data: dict[str, Any]) -> NotificationResult:
        to = self._admin_email if template == ADMIN_BOOKING_NOTIFICATION else data.get("email")
        if not to:
            return NotificationResult(success=False, message="No recipient address")

        email = render(template, data, self._business_name)
        self._client.send(
            to=to,
            sender=self._sender,
            subject=email.subject,
            text=email.text,
            html=email.html,
        )
        self._logger.info("Email sent", extra={"template": template, "booking_id": data.get("bookingId")})
        return NotificationResult(success=True, message="Email sent")
