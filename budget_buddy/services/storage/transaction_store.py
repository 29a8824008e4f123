"""
Transaction Store

Reads and writes the whole transaction list as one JSON blob under one
key of a KeyValueStore. Every save is a full replace; there are no
incremental updates.
"""

from typing import Iterable, Optional

from pydantic import TypeAdapter, ValidationError

from budget_buddy.audit import AuditLogger
from budget_buddy.codec import CodecError, decode, encode
from budget_buddy.models.transaction import PersistedTransaction, Transaction
from budget_buddy.services.storage.interface import (
    CorruptStoreError,
    KeyValueStore,
)


DEFAULT_STORAGE_KEY = "transactions"

_records_adapter = TypeAdapter(list[PersistedTransaction])


class TransactionStore:
    """
    Persistence for the full transaction collection.

    An absent key or an empty string means "no transactions yet".
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        key: str = DEFAULT_STORAGE_KEY,
        strict_types: bool = False,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._kv = kv_store
        self._key = key
        self._strict_types = strict_types
        self._audit_logger = audit_logger

    @property
    def key(self) -> str:
        return self._key

    @property
    def backup_key(self) -> str:
        return f"{self._key}.corrupt"

    def load(self) -> tuple[Transaction, ...]:
        """
        Load every stored transaction, in stored order.

        Raises:
            CorruptStoreError: If the blob is not a valid record list
            StorageReadError: If the medium itself cannot be read
        """
        raw = self._kv.get(self._key)
        if raw is None or raw == "":
            return ()

        try:
            records = _records_adapter.validate_json(raw)
        except ValidationError as e:
            raise CorruptStoreError(
                f"Stored value under '{self._key}' is not a transaction list: {e}",
                raw=raw,
            ) from e

        try:
            transactions = tuple(
                decode(
                    record,
                    strict_types=self._strict_types,
                    audit_logger=self._audit_logger,
                )
                for record in records
            )
        except CodecError as e:
            raise CorruptStoreError(str(e), raw=raw) from e

        if self._audit_logger:
            self._audit_logger.log_store_loaded(self._key, len(transactions))
        return transactions

    def dumps(self, transactions: Iterable[Transaction]) -> str:
        """Serialize transactions to the stored blob format."""
        records = [encode(tx) for tx in transactions]
        return _records_adapter.dump_json(records, by_alias=True).decode("utf-8")

    def save(self, transactions: Iterable[Transaction]) -> None:
        """
        Replace the stored list with these transactions.

        Raises:
            StorageWriteError: If the medium rejects the write
        """
        transactions = tuple(transactions)
        self._kv.set(self._key, self.dumps(transactions))
        if self._audit_logger:
            self._audit_logger.log_store_saved(self._key, len(transactions))

    def backup_corrupt(self, raw: str) -> str:
        """Keep an unreadable blob under the backup key; returns that key."""
        self._kv.set(self.backup_key, raw)
        return self.backup_key
