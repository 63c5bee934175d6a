"""Key-value storage abstraction layer."""

from registry.store.dynamo import DynamoKeyValueStore
from registry.store.interface import KeyPage, KeyValueStore

__all__ = ["DynamoKeyValueStore", "KeyPage", "KeyValueStore"]
