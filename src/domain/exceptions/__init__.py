from .banks import BankError, InvalidBank, InvalidCoordinates, InvalidLimit

__all__ = [
    "BankError",
    "InvalidBank",
    "InvalidCoordinates",
    "InvalidLimit",
]
