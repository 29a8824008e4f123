"""
Messages accepted by the reducer.

The set is closed: these five variants are the only way to change the
Model. Each variant carries a `kind` literal so that `Msg` is a
discriminated union.
"""

from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from budget_buddy.models.transaction import TransactionType


class _Message(BaseModel):
    model_config = ConfigDict(frozen=True)


class SetDescription(_Message):
    """Replace the description input verbatim."""
    kind: Literal["set_description"] = "set_description"
    text: str


class SetAmount(_Message):
    """Replace the amount input verbatim."""
    kind: Literal["set_amount"] = "set_amount"
    text: str


class SetType(_Message):
    """Select the type used for the next entry."""
    kind: Literal["set_type"] = "set_type"
    type: TransactionType


class AddTransaction(_Message):
    """Validate the inputs and record a new transaction."""
    kind: Literal["add_transaction"] = "add_transaction"


class DeleteTransaction(_Message):
    """Remove the transaction with this id."""
    kind: Literal["delete_transaction"] = "delete_transaction"
    id: UUID


Msg = Annotated[
    Union[SetDescription, SetAmount, SetType, AddTransaction, DeleteTransaction],
    Field(discriminator="kind"),
]

MESSAGE_TYPES: tuple[type[BaseModel], ...] = (
    SetDescription,
    SetAmount,
    SetType,
    AddTransaction,
    DeleteTransaction,
)
