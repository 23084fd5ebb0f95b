from .dynamodb_bank_repository import DynamoDbBankRepository
from .in_memory_bank_repository import InMemoryBankRepository

__all__ = [
    "DynamoDbBankRepository",
    "InMemoryBankRepository",
]
