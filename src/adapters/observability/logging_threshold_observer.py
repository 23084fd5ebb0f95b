from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import IThresholdObserver
from src.domain.models import Bank, GeoPoint


@dataclass(slots=True)
class LoggingThresholdObserver(IThresholdObserver):
    """Emits a WARNING record whenever the nearest bank is too far away."""

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("banklocator.alerts")
    )

    def on_threshold_exceeded(
        self, *, bank: Bank, distance_km: float, query: GeoPoint, limit_km: float
    ) -> None:
        self.logger.warning(
            "Nearest bank '%s' is %skm from (%s, %s), over the %skm limit",
            bank.name,
            distance_km,
            query.lat,
            query.lon,
            limit_km,
            extra={
                "bank_id": bank.id,
                "bank_name": bank.name,
                "distance_km": distance_km,
                "query_lat": query.lat,
                "query_lon": query.lon,
                "limit_km": limit_km,
            },
        )
