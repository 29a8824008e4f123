"""
Abstract Storage Interface

DESIGN DECISION: The core only needs a key-value string store.
This allows us to:
1. Keep the transaction list in a JSON file on disk
2. Use in-memory storage for testing
3. Swap in any other medium (embedded database, browser storage bridge)
   without touching the reducer

The interface is intentionally tiny - one blob under one key is the
whole persistence contract.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """
    Abstract interface for a string key-value medium.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Args:
            key: The storage key

        Returns:
            The stored string, or None if the key is absent

        Raises:
            StorageReadError: If the medium cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Args:
            key: The storage key
            value: The string to store

        Raises:
            StorageWriteError: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is not an error.

        Raises:
            StorageWriteError: If the write fails
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """The storage medium could not be read."""
    pass


class StorageWriteError(StorageError):
    """The storage medium rejected a write."""
    pass


class CorruptStoreError(StorageError):
    """The stored blob is not a valid transaction list."""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw
