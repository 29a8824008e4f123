"""Derived totals and display formatting."""

from budget_buddy.queries.summary import (
    Summary,
    format_money,
    format_totals,
    format_transaction_line,
    summarize,
    total_for,
)

__all__ = [
    "Summary",
    "format_money",
    "format_totals",
    "format_transaction_line",
    "summarize",
    "total_for",
]
