from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Bank:
    id: str
    name: str
    address: str
    location: GeoPoint
    # Timezone-aware (UTC), set by the repository on insert.
    created_at: datetime


@dataclass(frozen=True, slots=True)
class BankStatistics:
    total_banks: int
