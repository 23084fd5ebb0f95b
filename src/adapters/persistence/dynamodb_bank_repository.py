from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Mapping
from uuid import uuid4

import boto3
from botocore.client import BaseClient

from src.adapters.settings import BankTableConfig
from src.app.ports.output import IBankRepository
from src.domain.models import Bank, GeoPoint

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient
else:
    DynamoDBClient = BaseClient  # type: ignore[misc,assignment]

_NS_PER_S = 1_000_000_000


def dynamodb_client(config: BankTableConfig) -> DynamoDBClient:
    session = boto3.session.Session(region_name=config.region)
    return session.client("dynamodb", endpoint_url=config.endpoint_url)


def _ns_to_datetime(ns: int) -> datetime:
    # Split to keep microsecond precision exact instead of going through a float.
    seconds, rest = divmod(ns, _NS_PER_S)
    return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(
        microseconds=rest // 1000
    )


def _item_to_bank(item: Mapping[str, Any]) -> Bank:
    return Bank(
        id=item["bank_id"]["S"],
        name=item["name"]["S"],
        address=item["address"]["S"],
        location=GeoPoint(lat=float(item["lat"]["N"]), lon=float(item["lon"]["N"])),
        created_at=_ns_to_datetime(int(item.get("created_at_ns", {}).get("N", "0"))),
    )


@dataclass(slots=True)
class DynamoDbBankRepository(IBankRepository):
    """Stores the bank catalog in DynamoDB.

    Connection settings come from `BankTableConfig` (BANKS_TABLE, AWS_REGION,
    ENDPOINT_URL / USE_LOCALSTACK). `table_name` overrides the table only.

    The table has a single string hash key, `bank_id`.
    """

    config: BankTableConfig = field(default_factory=BankTableConfig.from_env)
    table_name: str | None = None

    def _table(self) -> str:
        return self.table_name or self.config.table

    def _client(self) -> DynamoDBClient:
        return dynamodb_client(self.config)

    def add(self, *, name: str, address: str, location: GeoPoint) -> Bank:
        now_ns = time.time_ns()
        bank = Bank(
            id=str(uuid4()),
            name=name,
            address=address,
            location=location,
            created_at=_ns_to_datetime(now_ns),
        )
        ddb = self._client()
        ddb.put_item(
            TableName=self._table(),
            Item={
                "bank_id": {"S": bank.id},
                "name": {"S": bank.name},
                "address": {"S": bank.address},
                # repr keeps the full float precision in the N string.
                "lat": {"N": repr(float(location.lat))},
                "lon": {"N": repr(float(location.lon))},
                "created_at_ns": {"N": str(now_ns)},
            },
            ConditionExpression="attribute_not_exists(bank_id)",
        )
        return bank

    def get(self, *, bank_id: str) -> Bank | None:
        ddb = self._client()
        resp = ddb.get_item(
            TableName=self._table(),
            Key={"bank_id": {"S": bank_id}},
            ConsistentRead=True,
        )
        item = resp.get("Item")
        if not item:
            return None
        return _item_to_bank(item)

    def list_all(self) -> tuple[Bank, ...]:
        ddb = self._client()
        paginator = ddb.get_paginator("scan")

        rows: list[tuple[int, str, Bank]] = []
        for page in paginator.paginate(TableName=self._table(), ConsistentRead=True):
            for item in page.get("Items", []):
                created = int(item.get("created_at_ns", {}).get("N", "0"))
                bank = _item_to_bank(item)
                rows.append((created, bank.id, bank))

        # Scan order is arbitrary; sort so tie-breaks stay reproducible.
        rows.sort(key=lambda r: (r[0], r[1]))
        return tuple(bank for _, _, bank in rows)

    def count(self) -> int:
        ddb = self._client()
        paginator = ddb.get_paginator("scan")
        total = 0
        for page in paginator.paginate(TableName=self._table(), Select="COUNT"):
            total += int(page.get("Count", 0))
        return total
