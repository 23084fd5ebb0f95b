from __future__ import annotations

import logging
from typing import Callable, Sequence

from src.domain.algorithms.geo_utils import haversine_distance_km
from src.domain.models import Bank, GeoPoint, NearestResult

logger = logging.getLogger(__name__)

DEFAULT_LIMIT_KM = 10.0

# (bank, distance_km, query, limit_km)
ThresholdCallback = Callable[[Bank, float, GeoPoint, float], None]


def find_nearest(
    query: GeoPoint | None,
    banks: Sequence[Bank],
    limit_km: float = DEFAULT_LIMIT_KM,
    *,
    on_threshold_exceeded: ThresholdCallback | None = None,
) -> NearestResult | None:
    """Return the bank closest to `query`, or None.

    None is returned when the query point is absent or the catalog is empty.
    Every call rescans the whole sequence. On exact ties the first bank in
    sequence order wins.
    """

    if query is None or not banks:
        return None

    best = banks[0]
    best_km = haversine_distance_km(best.location, query)
    for bank in banks[1:]:
        d = haversine_distance_km(bank.location, query)
        if d < best_km:
            best = bank
            best_km = d

    exceeds = best_km > limit_km

    if exceeds and on_threshold_exceeded is not None:
        try:
            on_threshold_exceeded(best, best_km, query, limit_km)
        except Exception:
            logger.exception(
                "Threshold observer failed", extra={"bank_id": best.id}
            )

    return NearestResult(
        bank=best,
        distance_km=best_km,
        exceeds_limit=exceeds,
        limit_km=limit_km,
    )
