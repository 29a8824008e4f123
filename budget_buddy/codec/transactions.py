"""
Transaction Codec

Converts between the in-memory Transaction and the flat
PersistedTransaction written to storage.

Wire format per record:
    Id          canonical UUID string
    Date        ISO-8601 timestamp (datetime.isoformat, microsecond precision)
    Description text
    Amount      JSON number
    Type        "Expense" or "Income"

Type decoding is lenient by default: any string other than "Expense" is
read as Income, which mirrors how older data was written. Pass
strict_types=True to reject unknown strings instead.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ValidationError

from budget_buddy.audit import AuditLogger
from budget_buddy.models.transaction import (
    PersistedTransaction,
    Transaction,
    TransactionType,
)


class CodecError(ValueError):
    """A persisted record cannot be turned into a Transaction."""
    pass


def decode_type(
    raw: str,
    *,
    strict_types: bool = False,
    transaction_id: str = "",
    audit_logger: Optional[AuditLogger] = None,
) -> TransactionType:
    """Map a stored type string to a TransactionType."""
    if raw == TransactionType.EXPENSE.value:
        return TransactionType.EXPENSE
    if raw == TransactionType.INCOME.value:
        return TransactionType.INCOME
    if strict_types:
        raise CodecError(f"Unknown transaction type {raw!r} for record {transaction_id!r}")
    if audit_logger:
        audit_logger.log_unknown_type_coerced(transaction_id, raw)
    return TransactionType.INCOME


def decode(
    persisted: PersistedTransaction,
    *,
    strict_types: bool = False,
    audit_logger: Optional[AuditLogger] = None,
) -> Transaction:
    """
    Build a Transaction from its persisted form.

    Raises:
        CodecError: If the id, date or any field fails validation
    """
    try:
        tx_id = UUID(persisted.id)
    except ValueError as e:
        raise CodecError(f"Invalid transaction id {persisted.id!r}") from e

    try:
        tx_date = datetime.fromisoformat(persisted.date)
    except ValueError as e:
        raise CodecError(f"Invalid transaction date {persisted.date!r}") from e

    tx_type = decode_type(
        persisted.type,
        strict_types=strict_types,
        transaction_id=persisted.id,
        audit_logger=audit_logger,
    )

    try:
        return Transaction(
            id=tx_id,
            date=tx_date,
            description=persisted.description,
            amount=persisted.amount,
            type=tx_type,
        )
    except ValidationError as e:
        raise CodecError(f"Invalid transaction record {persisted.id!r}: {e}") from e


def encode(transaction: Transaction) -> PersistedTransaction:
    """Flatten a Transaction for storage."""
    return PersistedTransaction(
        id=str(transaction.id),
        date=transaction.date.isoformat(),
        description=transaction.description,
        amount=transaction.amount,
        type=(
            TransactionType.EXPENSE.value
            if transaction.type == TransactionType.EXPENSE
            else TransactionType.INCOME.value
        ),
    )
