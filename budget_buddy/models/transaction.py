"""
Transaction Models for BudgetBuddy

Two shapes of the same record live here:
1. Transaction - the in-memory, validated, immutable record
2. PersistedTransaction - the flat, string-safe wire record

DESIGN DECISION: Transactions are frozen. A transaction is never edited,
only removed (or removed and recreated).
"""

import math
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)


class TransactionType(str, Enum):
    """
    Direction of a money movement.

    The values double as the literal strings used in storage.
    """
    EXPENSE = "Expense"
    INCOME = "Income"


class Transaction(BaseModel):
    """
    One recorded money movement.

    The amount is a magnitude only; whether it adds to or subtracts from
    the balance is decided by `type`.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique transaction ID, never reused"
    )
    date: datetime = Field(
        ...,
        description="When the transaction was recorded"
    )
    description: str = Field(
        ...,
        min_length=1,
        description="User supplied description, kept as entered"
    )
    amount: float = Field(
        ...,
        ge=0,
        description="Magnitude of the movement"
    )
    type: TransactionType = Field(
        default=TransactionType.EXPENSE,
        description="Expense or income"
    )

    @field_validator('description')
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Description cannot be blank")
        return v

    @field_validator('amount')
    @classmethod
    def reject_non_finite(cls, v: float) -> float:
        """NaN and infinities cannot be summed or stored as JSON."""
        if not math.isfinite(v):
            raise ValueError(f"Amount must be a finite number, got {v}")
        return v


class PersistedTransaction(BaseModel):
    """
    Storage representation of a Transaction.

    Field aliases are the wire names used in the stored JSON array:
    Id, Date, Description, Amount, Type.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="Id")
    date: str = Field(..., alias="Date")
    description: str = Field(..., alias="Description")
    amount: float = Field(..., alias="Amount")
    type: str = Field(..., alias="Type")
