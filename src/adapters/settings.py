from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[2] / "data" / "banks.csv"
DEFAULT_BANKS_TABLE = "banklocator-banks"
DEFAULT_LOCALSTACK_URL = "http://localhost:4566"


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_str(name: str) -> str | None:
    return (os.getenv(name) or "").strip() or None


@dataclass(frozen=True, slots=True)
class BankTableConfig:
    """Where the DynamoDB bank catalog lives.

    `enabled` is true only when BANKS_TABLE is set; otherwise the API keeps
    the catalog in memory and `table` falls back to the default name.
    """

    enabled: bool
    table: str
    region: str
    endpoint_url: str | None

    @staticmethod
    def from_env() -> "BankTableConfig":
        table = _env_str("BANKS_TABLE")

        # ENDPOINT_URL wins; USE_LOCALSTACK alone points at the local default.
        endpoint_url = _env_str("ENDPOINT_URL")
        if endpoint_url is None and env_bool("USE_LOCALSTACK", False):
            endpoint_url = _env_str("LOCALSTACK_ENDPOINT_URL") or DEFAULT_LOCALSTACK_URL

        return BankTableConfig(
            enabled=table is not None,
            table=table or DEFAULT_BANKS_TABLE,
            region=_env_str("AWS_REGION") or "eu-west-1",
            endpoint_url=endpoint_url,
        )


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Runtime settings for the API process, read from the environment."""

    bank_table: BankTableConfig
    seed_path: Path | None
    reveal_errors: bool
    log_level: str

    @staticmethod
    def from_env() -> "AppConfig":
        raw_seed = os.getenv("BANKS_SEED_PATH")
        seed_path: Path | None
        if raw_seed is None:
            seed_path = DEFAULT_SEED_PATH if DEFAULT_SEED_PATH.exists() else None
        else:
            # An empty value disables seeding.
            seed_path = Path(raw_seed.strip()) if raw_seed.strip() else None

        return AppConfig(
            bank_table=BankTableConfig.from_env(),
            seed_path=seed_path,
            reveal_errors=env_bool("BANKLOCATOR_REVEAL_ERRORS", False),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        )
