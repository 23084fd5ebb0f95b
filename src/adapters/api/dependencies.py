from __future__ import annotations

import logging
from functools import lru_cache

from src.adapters.observability import LoggingThresholdObserver
from src.adapters.persistence import DynamoDbBankRepository, InMemoryBankRepository
from src.adapters.settings import AppConfig
from src.app.ports.output import IBankRepository
from src.app.services.bank_service import BankService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_bank_repository() -> IBankRepository:
    cfg = AppConfig.from_env()
    if cfg.bank_table.enabled:
        logger.info("Using DynamoDB bank table %s", cfg.bank_table.table)
        return DynamoDbBankRepository(config=cfg.bank_table)

    # The in-memory catalog must outlive a single request, hence the cache.
    if cfg.seed_path is not None:
        logger.info("Seeding in-memory banks from %s", cfg.seed_path)
        return InMemoryBankRepository.from_csv(cfg.seed_path)
    return InMemoryBankRepository()


def get_bank_service() -> BankService:
    return BankService(
        repository=get_bank_repository(),
        observer=LoggingThresholdObserver(),
    )
