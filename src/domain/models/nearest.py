from __future__ import annotations

from dataclasses import dataclass

from .bank import Bank


@dataclass(frozen=True, slots=True)
class NearestResult:
    """Outcome of a nearest-bank query.

    `bank` is the catalog object itself, not a copy.
    """

    bank: Bank
    distance_km: float
    exceeds_limit: bool
    limit_km: float
