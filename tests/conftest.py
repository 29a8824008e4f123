"""
Shared fixtures.

Everything here is deterministic: a fixed clock, a predictable id
sequence, and in-memory storage that records what was saved.
"""

from datetime import datetime, timezone
from typing import Iterable
from uuid import UUID

import pytest

from budget_buddy.audit import AuditLogger
from budget_buddy.models import Transaction, TransactionType
from budget_buddy.reducer import Reducer
from budget_buddy.services.storage import (
    InMemoryKeyValueStore,
    StorageWriteError,
    TransactionStore,
)


FIXED_NOW = datetime(2024, 5, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)


class RecordingTransactionStore(TransactionStore):
    """TransactionStore that remembers every list passed to save()."""

    def __init__(self, kv_store=None, **kwargs):
        super().__init__(kv_store if kv_store is not None else InMemoryKeyValueStore(), **kwargs)
        self.saved: list[tuple[Transaction, ...]] = []

    def save(self, transactions: Iterable[Transaction]) -> None:
        transactions = tuple(transactions)
        self.saved.append(transactions)
        super().save(transactions)


class FailingKeyValueStore(InMemoryKeyValueStore):
    """Reads work, every write fails like a full browser quota."""

    def set(self, key: str, value: str) -> None:
        raise StorageWriteError("quota exceeded")


def make_id_sequence(count: int = 50) -> list[UUID]:
    return [UUID(int=i + 1) for i in range(count)]


@pytest.fixture
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def failing_kv() -> FailingKeyValueStore:
    return FailingKeyValueStore()


@pytest.fixture
def corrupt_failing_kv() -> FailingKeyValueStore:
    """Holds an unreadable blob under the default key and refuses writes."""
    return FailingKeyValueStore(initial={"transactions": "{definitely not json"})


@pytest.fixture
def audit_logger() -> AuditLogger:
    return AuditLogger()


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory():
    ids = iter(make_id_sequence())
    return lambda: next(ids)


@pytest.fixture
def store(kv, audit_logger) -> RecordingTransactionStore:
    return RecordingTransactionStore(kv, audit_logger=audit_logger)


@pytest.fixture
def reducer(store, clock, id_factory, audit_logger) -> Reducer:
    return Reducer(store, clock=clock, id_factory=id_factory, audit_logger=audit_logger)


@pytest.fixture
def make_transaction():
    """Factory for transactions with distinct ids and sensible defaults."""
    counter = iter(range(1000, 2000))

    def _make(
        description: str = "Groceries",
        amount: float = 10.0,
        tx_type: TransactionType = TransactionType.EXPENSE,
        date: datetime = FIXED_NOW,
    ) -> Transaction:
        return Transaction(
            id=UUID(int=next(counter)),
            date=date,
            description=description,
            amount=amount,
            type=tx_type,
        )

    return _make
