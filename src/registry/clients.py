"""Lazy-initialized boto3 clients, reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3

from registry.config import Config
from registry.store import DynamoKeyValueStore, KeyValueStore


@lru_cache(maxsize=1)
def get_dynamo_client(endpoint_url: str | None, region_name: str) -> Any:
    return boto3.client("dynamodb", endpoint_url=endpoint_url, region_name=region_name)


def get_booking_store(config: Config) -> KeyValueStore | None:
    """Return the store bound to the bookings table, or None when no table is configured."""
    if not config.bookings_table:
        return None
    client = get_dynamo_client(config.dynamodb_endpoint, config.aws_region)
    return DynamoKeyValueStore(client, config.bookings_table, page_size=config.list_page_size)
