"""
Summary Queries

DESIGN DECISION: Totals are DERIVED, never stored. They are recomputed
from the full transaction list on every call so they can never disagree
with the list itself.

Sums are plain float addition. Rounding to cents happens only when a
value is formatted for display.
"""

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from budget_buddy.models.transaction import Transaction, TransactionType


class Summary(BaseModel):
    """Running totals over a transaction list."""
    model_config = ConfigDict(frozen=True)

    total_income: float = 0.0
    total_expenses: float = 0.0
    count: int = 0

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expenses


def total_for(transactions: Iterable[Transaction], tx_type: TransactionType) -> float:
    """Sum of amounts for one transaction type."""
    return sum((tx.amount for tx in transactions if tx.type == tx_type), 0.0)


def summarize(transactions: Iterable[Transaction]) -> Summary:
    transactions = tuple(transactions)
    return Summary(
        total_income=total_for(transactions, TransactionType.INCOME),
        total_expenses=total_for(transactions, TransactionType.EXPENSE),
        count=len(transactions),
    )


def format_money(value: float, symbol: str = "€") -> str:
    """Format a value with two decimals, e.g. '€3.50' or '€-3.50'."""
    return f"{symbol}{value:.2f}"


def format_transaction_line(tx: Transaction, symbol: str = "€") -> str:
    """
    One list row: '<date> - <description>: <sign><symbol><amount>'.

    Expenses are shown with '-', income with '+'.
    """
    sign = "-" if tx.type == TransactionType.EXPENSE else "+"
    return f"{tx.date.strftime('%Y-%m-%d')} - {tx.description}: {sign}{symbol}{tx.amount:.2f}"


def format_totals(summary: Summary, symbol: str = "€") -> dict[str, str]:
    """Labelled, formatted totals in display order."""
    return {
        "Total Income": format_money(summary.total_income, symbol),
        "Total Expenses": format_money(summary.total_expenses, symbol),
        "Balance": format_money(summary.balance, symbol),
    }
