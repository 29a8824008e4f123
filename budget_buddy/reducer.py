"""
Reducer

Maps (message, model) to the next model. This is the only place that
changes state and the only caller of TransactionStore.save().

GUARANTEES:
- Set* messages never touch storage
- A message that changes `transactions` saves the full list exactly once,
  before the new model is returned
- If the save fails the error propagates and no new model is produced,
  so memory never runs ahead of what is persisted
- Invalid entries leave the model unchanged
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from budget_buddy.audit import AuditLogger
from budget_buddy.models.entry import ValidationIssue
from budget_buddy.models.messages import (
    AddTransaction,
    DeleteTransaction,
    Msg,
    SetAmount,
    SetDescription,
    SetType,
)
from budget_buddy.models.state import Model
from budget_buddy.models.transaction import Transaction
from budget_buddy.services.storage import TransactionStore
from budget_buddy.validation import EntryValidator


def local_now() -> datetime:
    """Current wall-clock time with the local UTC offset attached."""
    return datetime.now().astimezone()


class Transition(BaseModel):
    """Result of one reducer step."""
    model_config = ConfigDict(frozen=True)

    model: Model
    saved: bool = False
    issues: list[ValidationIssue] = Field(default_factory=list)


class Reducer:
    """
    Pure state transition function plus the one permitted side effect:
    persisting the transaction list.

    The clock and id factory are injectable so transitions are
    reproducible in tests.
    """

    def __init__(
        self,
        store: TransactionStore,
        validator: Optional[EntryValidator] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Callable[[], UUID] = uuid4,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._store = store
        self._validator = validator or EntryValidator()
        self._clock = clock or local_now
        self._id_factory = id_factory
        self._audit_logger = audit_logger

    def update(self, msg: Msg, model: Model) -> Transition:
        """
        Compute the next model for a message.

        Raises:
            StorageError: If persisting a changed list fails
            TypeError: If msg is not one of the known message types
        """
        if isinstance(msg, SetDescription):
            return Transition(model=model.model_copy(update={"description_input": msg.text}))
        elif isinstance(msg, SetAmount):
            return Transition(model=model.model_copy(update={"amount_input": msg.text}))
        elif isinstance(msg, SetType):
            return Transition(model=model.model_copy(update={"type_input": msg.type}))
        elif isinstance(msg, AddTransaction):
            return self._add_transaction(model)
        elif isinstance(msg, DeleteTransaction):
            return self._delete_transaction(msg.id, model)
        raise TypeError(f"Unhandled message: {msg!r}")

    def _add_transaction(self, model: Model) -> Transition:
        result = self._validator.validate(model.description_input, model.amount_input)
        if not result.is_valid:
            if self._audit_logger:
                self._audit_logger.log_entry_rejected(
                    [issue.model_dump() for issue in result.issues]
                )
            return Transition(model=model, issues=result.issues)

        tx = Transaction(
            id=self._id_factory(),
            date=self._clock(),
            description=model.description_input,
            amount=result.amount,
            type=model.type_input,
        )
        updated = (tx,) + model.transactions
        self._store.save(updated)

        if self._audit_logger:
            self._audit_logger.log_transaction_added(
                transaction_id=tx.id,
                description=tx.description,
                amount=tx.amount,
                type_value=tx.type.value,
            )

        return Transition(
            model=model.model_copy(update={
                "transactions": updated,
                "description_input": "",
                "amount_input": "",
            }),
            saved=True,
        )

    def _delete_transaction(self, transaction_id: UUID, model: Model) -> Transition:
        updated = tuple(tx for tx in model.transactions if tx.id != transaction_id)
        if len(updated) == len(model.transactions):
            return Transition(model=model)

        self._store.save(updated)

        if self._audit_logger:
            self._audit_logger.log_transaction_deleted(transaction_id, remaining=len(updated))

        return Transition(
            model=model.model_copy(update={"transactions": updated}),
            saved=True,
        )
