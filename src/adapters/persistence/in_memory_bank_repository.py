from __future__ import annotations

import csv
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from src.app.ports.output import IBankRepository
from src.domain.models import Bank, GeoPoint


@dataclass(slots=True)
class InMemoryBankRepository(IBankRepository):
    """Process-local bank catalog.

    Ids are sequential strings ("1", "2", ...). Snapshots preserve insertion
    order, which is also the nearest-query tie-break order.
    """

    _banks: dict[str, Bank] = field(default_factory=dict, init=False, repr=False)
    _next_id: int = field(default=1, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @classmethod
    def from_csv(cls, path: str | Path) -> "InMemoryBankRepository":
        """Seed a repository from a CSV with name,address,lat,lon columns."""

        repo = cls()
        with Path(path).open("r", encoding="utf-8", newline="") as fp:
            reader = csv.DictReader(fp)
            for row in reader:
                name = (row.get("name") or "").strip()
                if not name:
                    continue
                repo.add(
                    name=name,
                    address=(row.get("address") or "").strip(),
                    location=GeoPoint(lat=float(row["lat"]), lon=float(row["lon"])),
                )
        return repo

    def add(self, *, name: str, address: str, location: GeoPoint) -> Bank:
        with self._lock:
            bank = Bank(
                id=str(self._next_id),
                name=name,
                address=address,
                location=location,
                created_at=datetime.now(timezone.utc),
            )
            self._banks[bank.id] = bank
            self._next_id += 1
        return bank

    def get(self, *, bank_id: str) -> Bank | None:
        return self._banks.get(bank_id)

    def list_all(self) -> tuple[Bank, ...]:
        with self._lock:
            return tuple(self._banks.values())

    def count(self) -> int:
        return len(self._banks)
