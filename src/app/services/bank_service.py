from __future__ import annotations

import math
from dataclasses import dataclass

from src.app.ports.output import IBankRepository, IThresholdObserver
from src.domain.algorithms.nearest import DEFAULT_LIMIT_KM, find_nearest
from src.domain.exceptions import InvalidBank, InvalidCoordinates, InvalidLimit
from src.domain.models import Bank, BankStatistics, GeoPoint, NearestResult
from src.domain.models.geo import valid_lat, valid_lon

NAME_LENGTH = (2, 100)
ADDRESS_LENGTH = (5, 200)


def _length_errors(field: str, value: str, bounds: tuple[int, int]) -> list[str]:
    lo, hi = bounds
    if not value:
        return [f"{field} is required"]
    if len(value) < lo:
        return [f"{field} must be at least {lo} characters"]
    if len(value) > hi:
        return [f"{field} must be at most {hi} characters"]
    return []


@dataclass(slots=True)
class BankService:
    """Application service for the bank catalog.

    - Validates and stores new banks.
    - Answers "nearest bank to this point" over a catalog snapshot.
    - Reports threshold breaches through the optional observer.
    """

    repository: IBankRepository
    observer: IThresholdObserver | None = None

    def create_bank(
        self,
        *,
        name: str | None,
        address: str | None,
        lat: float | None,
        lon: float | None,
    ) -> Bank:
        name = (name or "").strip()
        address = (address or "").strip()

        errors = _length_errors("name", name, NAME_LENGTH)
        errors += _length_errors("address", address, ADDRESS_LENGTH)
        if lat is None:
            errors.append("lat is required")
        elif not valid_lat(lat):
            errors.append("lat must be between -90 and 90")
        if lon is None:
            errors.append("lon is required")
        elif not valid_lon(lon):
            errors.append("lon must be between -180 and 180")

        # A missing lat or lon has already added an error here.
        if errors or lat is None or lon is None:
            raise InvalidBank(errors)

        return self.repository.add(
            name=name, address=address, location=GeoPoint(lat=lat, lon=lon)
        )

    def get_bank(self, *, bank_id: str) -> Bank | None:
        return self.repository.get(bank_id=bank_id)

    def find_nearest(
        self,
        *,
        lat: float | None,
        lon: float | None,
        limit_km: float | None = None,
    ) -> NearestResult | None:
        """Nearest bank to (lat, lon).

        Returns None when either coordinate is missing or the catalog is
        empty. Raises InvalidCoordinates for out-of-range points and
        InvalidLimit for a negative or NaN limit.
        """

        if lat is None or lon is None:
            return None
        if not (valid_lat(lat) and valid_lon(lon)):
            raise InvalidCoordinates(
                "Coordinates out of range (lat: -90 to 90, lon: -180 to 180)"
            )

        if limit_km is None:
            limit_km = DEFAULT_LIMIT_KM
        if math.isnan(limit_km) or limit_km < 0:
            raise InvalidLimit(f"Invalid limit_km: {limit_km}")

        callback = None
        if self.observer is not None:
            callback = self._notify

        return find_nearest(
            GeoPoint(lat=lat, lon=lon),
            self.repository.list_all(),
            limit_km,
            on_threshold_exceeded=callback,
        )

    def statistics(self) -> BankStatistics:
        return BankStatistics(total_banks=self.repository.count())

    def _notify(
        self, bank: Bank, distance_km: float, query: GeoPoint, limit_km: float
    ) -> None:
        if self.observer is not None:
            self.observer.on_threshold_exceeded(
                bank=bank, distance_km=distance_km, query=query, limit_km=limit_km
            )
