"""
Storage Services Package

Provides the abstract key-value interface, concrete media, and the
TransactionStore that keeps the whole list under one key.
"""

from budget_buddy.services.storage.interface import (
    CorruptStoreError,
    KeyValueStore,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from budget_buddy.services.storage.memory import InMemoryKeyValueStore
from budget_buddy.services.storage.json_file import JsonFileKeyValueStore
from budget_buddy.services.storage.transaction_store import (
    DEFAULT_STORAGE_KEY,
    TransactionStore,
)

__all__ = [
    # Interfaces
    "KeyValueStore",
    # Exceptions
    "CorruptStoreError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Implementations
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    # Transaction persistence
    "DEFAULT_STORAGE_KEY",
    "TransactionStore",
]
