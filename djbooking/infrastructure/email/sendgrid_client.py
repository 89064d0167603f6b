from __future__ import annotations

import logging

import httpx

from djbooking.application.exceptions import NotificationError


class SendGridClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.sendgrid.com/v3",
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._send_endpoint = base_url.rstrip("/") + "/mail/send"
        self._client = client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

    def send(self, to: str, sender: str, subject: str, text: str, html: str) -> None:
        payload = {
            "personalizations": [{"to": [{"email": to}]}],
            "from": {"email": sender},
            "subject": subject,
            "content": [
                {"type": "text/plain", "value": text},
                {"type": "text/html", "value": html},
            ],
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            resp = self._client.post(self._send_endpoint, headers=headers, json=payload)
        except httpx.HTTPError as e:
            self._logger.error("SendGrid request failed", extra={"error": str(e)})
            raise NotificationError(f"Email provider unreachable: {e}") from e

        if resp.status_code >= 400:
            try:
                errors = resp.json().get("errors", [])
                error_message = "; ".join(str(err.get("message")) for err in errors) or resp.text
            except Exception:
                error_message = resp.text
            self._logger.error(
                "SendGrid send failed",
                extra={"status": resp.status_code, "error": error_message},
            )
            raise NotificationError(f"Email provider returned {resp.status_code}: {error_message}")
