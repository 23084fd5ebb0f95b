from __future__ import annotations


class BankError(Exception):
    """Base exception for bank catalog failures."""


class InvalidBank(BankError):
    """Raised when bank attributes fail validation."""

    def __init__(self, errors: list[str] | tuple[str, ...]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(self.errors) or "Invalid bank")


class InvalidCoordinates(BankError, ValueError):
    """Raised when a query point lies outside the valid lat/lon ranges."""


class InvalidLimit(BankError, ValueError):
    """Raised when a distance threshold is negative or not a number."""
