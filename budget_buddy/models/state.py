"""
Application state snapshot.

The Model is replaced, never mutated: every reducer step hands back a
fresh copy built with `model_copy(update=...)`.
"""

from pydantic import BaseModel, ConfigDict, Field

from budget_buddy.models.transaction import Transaction, TransactionType


class Model(BaseModel):
    """
    Complete state between two messages.

    `transactions` is newest-first because new entries are prepended.
    The three *_input fields hold raw, unvalidated form text.
    """
    model_config = ConfigDict(frozen=True)

    transactions: tuple[Transaction, ...] = Field(default_factory=tuple)
    description_input: str = ""
    amount_input: str = ""
    type_input: TransactionType = TransactionType.EXPENSE

    @classmethod
    def empty(cls) -> "Model":
        return cls()
