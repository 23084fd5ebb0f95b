from .bank_repository import IBankRepository
from .threshold_observer import IThresholdObserver

__all__ = [
    "IBankRepository",
    "IThresholdObserver",
]
