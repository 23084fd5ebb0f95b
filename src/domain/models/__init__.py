from .bank import Bank, BankStatistics
from .geo import GeoPoint
from .nearest import NearestResult

__all__ = [
    "Bank",
    "BankStatistics",
    "GeoPoint",
    "NearestResult",
]
