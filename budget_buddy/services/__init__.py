"""Services package."""

from budget_buddy.services.storage import (
    CorruptStoreError,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    StorageError,
    StorageReadError,
    StorageWriteError,
    TransactionStore,
)

__all__ = [
    "CorruptStoreError",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "TransactionStore",
]
