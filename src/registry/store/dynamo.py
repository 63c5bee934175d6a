"""DynamoDB-backed key-value store.

The table holds one item per key: partition key ``key`` (S) and the payload in
``value`` (S). boto3 is blocking, so each call runs in a worker thread and
concurrent ``get`` calls overlap.
"""

import asyncio
from typing import Any

from registry.store.interface import KeyPage, KeyValueStore

KEY_ATTRIBUTE = "key"
VALUE_ATTRIBUTE = "value"


class DynamoKeyValueStore(KeyValueStore):
    def __init__(self, dynamo_client: Any, table_name: str, page_size: int = 1000) -> None:
        self._client = dynamo_client
        self._table = table_name
        self._page_size = page_size

    async def get(self, key: str) -> str | None:
        response = await asyncio.to_thread(
            self._client.get_item,
            TableName=self._table,
            Key={KEY_ATTRIBUTE: {"S": key}},
        )
        item = response.get("Item")
        if not item or VALUE_ATTRIBUTE not in item:
            return None
        return item[VALUE_ATTRIBUTE]["S"]

    async def put(self, key: str, value: str) -> None:
        await asyncio.to_thread(
            self._client.put_item,
            TableName=self._table,
            Item={KEY_ATTRIBUTE: {"S": key}, VALUE_ATTRIBUTE: {"S": value}},
        )

    async def list(self, prefix: str, cursor: str | None = None) -> KeyPage:
        scan_kwargs: dict[str, Any] = {
            "TableName": self._table,
            "FilterExpression": "begins_with(#k, :prefix)",
            "ProjectionExpression": "#k",
            "ExpressionAttributeNames": {"#k": KEY_ATTRIBUTE},
            "ExpressionAttributeValues": {":prefix": {"S": prefix}},
            "Limit": self._page_size,
        }
        if cursor:
            scan_kwargs["ExclusiveStartKey"] = {KEY_ATTRIBUTE: {"S": cursor}}

        response = await asyncio.to_thread(self._client.scan, **scan_kwargs)

        keys = [item[KEY_ATTRIBUTE]["S"] for item in response.get("Items", [])]
        last_key = response.get("LastEvaluatedKey")
        next_cursor = last_key[KEY_ATTRIBUTE]["S"] if last_key else None
        return KeyPage(keys=keys, cursor=next_cursor)
