from abc import ABC, abstractmethod
from typing import Any


class AnalyticsPort(ABC):
    @abstractmethod
    def track(self, event: str, properties: dict[str, Any]) -> None:
        raise NotImplementedError
