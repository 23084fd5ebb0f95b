from __future__ import annotations

import os
import urllib.request
from uuid import uuid4

import pytest

from src.adapters.persistence.dynamodb_bank_repository import dynamodb_client
from src.adapters.settings import BankTableConfig


def _localstack_healthy(endpoint_url: str) -> bool:
    url = endpoint_url.rstrip("/") + "/_localstack/health"
    try:
        with urllib.request.urlopen(url, timeout=1.5) as resp:  # nosec B310
            return 200 <= resp.status < 300
    except OSError:
        return False


@pytest.fixture(scope="session", autouse=True)
def localstack_env() -> None:
    """Point boto3 at LocalStack unless the environment says otherwise."""

    os.environ.setdefault("USE_LOCALSTACK", "true")
    os.environ.setdefault("ENDPOINT_URL", "http://localhost:4566")
    os.environ.setdefault("AWS_REGION", "eu-west-1")

    # boto3 requires some credentials to be present, even for LocalStack.
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")


@pytest.fixture(scope="session")
def require_localstack(localstack_env: None) -> str:
    endpoint_url = os.environ["ENDPOINT_URL"]
    if not _localstack_healthy(endpoint_url):
        msg = f"LocalStack not reachable at {endpoint_url}"

        # CI is expected to start LocalStack, so a miss there is a failure.
        if os.getenv("CI") or os.getenv("REQUIRE_LOCALSTACK"):
            pytest.fail(msg, pytrace=False)

        pytest.skip(f"{msg}; skipping integration tests")
    return endpoint_url


@pytest.fixture()
def banks_table(require_localstack: str):
    """A fresh, empty banks table per test."""

    table = f"banklocator-test-{uuid4().hex[:8]}"
    ddb = dynamodb_client(BankTableConfig.from_env())
    ddb.create_table(
        TableName=table,
        BillingMode="PAY_PER_REQUEST",
        AttributeDefinitions=[{"AttributeName": "bank_id", "AttributeType": "S"}],
        KeySchema=[{"AttributeName": "bank_id", "KeyType": "HASH"}],
    )
    ddb.get_waiter("table_exists").wait(TableName=table)

    yield table

    ddb.delete_table(TableName=table)
