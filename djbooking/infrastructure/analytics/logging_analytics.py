from __future__ import annotations

import logging
from typing import Any

from djbooking.application.ports.analytics import AnalyticsPort


class LoggingAnalytics(AnalyticsPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def track(self, event: str, properties: dict[str, Any]) -> None:
        self._logger.info(event, extra={"step": properties.get("step"), "step_name": properties.get("stepName")})
