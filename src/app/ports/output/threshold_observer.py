from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Bank, GeoPoint


class IThresholdObserver(ABC):
    """Port notified when the nearest bank lies beyond the requested limit."""

    @abstractmethod
    def on_threshold_exceeded(
        self, *, bank: Bank, distance_km: float, query: GeoPoint, limit_km: float
    ) -> None:
        raise NotImplementedError
