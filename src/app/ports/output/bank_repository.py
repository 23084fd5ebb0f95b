from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Bank, GeoPoint


class IBankRepository(ABC):
    """Port for storing and reading the bank catalog."""

    @abstractmethod
    def add(self, *, name: str, address: str, location: GeoPoint) -> Bank:
        raise NotImplementedError

    @abstractmethod
    def get(self, *, bank_id: str) -> Bank | None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> tuple[Bank, ...]:
        """Immutable snapshot of the whole catalog, in a stable order."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
