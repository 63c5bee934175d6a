"""Shared test fixtures for the booking registry."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from registry.store import KeyPage, KeyValueStore  # noqa: E402


class InMemoryStore(KeyValueStore):
    """Dict-backed store that pages keys in sorted order."""

    def __init__(self, page_size: int = 2) -> None:
        self.values: dict[str, str] = {}
        self.failing_keys: set[str] = set()
        self.page_size = page_size
        self.list_calls: list[str | None] = []

    async def get(self, key: str) -> str | None:
        if key in self.failing_keys:
            raise RuntimeError(f"read failed for {key}")
        return self.values.get(key)

    async def put(self, key: str, value: str) -> None:
        self.values[key] = value

    async def list(self, prefix: str, cursor: str | None = None) -> KeyPage:
        self.list_calls.append(cursor)
        keys = sorted(k for k in self.values.keys() | self.failing_keys if k.startswith(prefix))
        start = keys.index(cursor) + 1 if cursor else 0
        page = keys[start : start + self.page_size]
        has_more = start + self.page_size < len(keys)
        return KeyPage(keys=page, cursor=page[-1] if has_more else None)


@pytest.fixture
def memory_store():
    return InMemoryStore()


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a DynamoDB client for integration tests."""
    import boto3

    from registry.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint or "http://localhost:8000",
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def bookings_table(dynamodb_client):
    """Provide a fresh key-value table and drop it afterwards."""
    from registry.store.dynamo import KEY_ATTRIBUTE

    table_name = "BookingRegistryTest"
    dynamodb_client.create_table(
        TableName=table_name,
        KeySchema=[{"AttributeName": KEY_ATTRIBUTE, "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": KEY_ATTRIBUTE, "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    dynamodb_client.get_waiter("table_exists").wait(TableName=table_name)
    yield table_name

    # Cleanup: drop the table with everything written during the test
    dynamodb_client.delete_table(TableName=table_name)
