"""Tests for derived totals and formatting."""

from datetime import datetime, timezone

import pytest

from budget_buddy.models import TransactionType
from budget_buddy.queries import (
    Summary,
    format_money,
    format_totals,
    format_transaction_line,
    summarize,
    total_for,
)


class TestSummarize:

    def test_empty_list(self):
        summary = summarize([])
        assert summary == Summary()
        assert summary.balance == 0.0

    def test_mixed_transactions(self, make_transaction):
        txs = [
            make_transaction(amount=2500, tx_type=TransactionType.INCOME),
            make_transaction(amount=900, tx_type=TransactionType.EXPENSE),
            make_transaction(amount=3.5, tx_type=TransactionType.EXPENSE),
            make_transaction(amount=100, tx_type=TransactionType.INCOME),
        ]
        summary = summarize(txs)
        assert summary.total_income == 2600
        assert summary.total_expenses == 903.5
        assert summary.balance == pytest.approx(1696.5)
        assert summary.count == 4

    def test_plain_float_addition(self, make_transaction):
        txs = [make_transaction(amount=0.1), make_transaction(amount=0.2)]
        assert total_for(txs, TransactionType.EXPENSE) == 0.1 + 0.2

    def test_accepts_generator(self, make_transaction):
        summary = summarize(make_transaction(amount=1) for _ in range(3))
        assert summary.total_expenses == 3
        assert summary.count == 3


class TestFormatting:

    def test_format_money(self):
        assert format_money(3.5) == "€3.50"
        assert format_money(-3.5) == "€-3.50"
        assert format_money(0.1 + 0.2, "$") == "$0.30"

    def test_format_totals_order(self, make_transaction):
        summary = summarize([make_transaction(amount=3.5)])
        assert format_totals(summary) == {
            "Total Income": "€0.00",
            "Total Expenses": "€3.50",
            "Balance": "€-3.50",
        }

    def test_expense_line(self, make_transaction):
        tx = make_transaction(
            description="Coffee",
            amount=3.5,
            date=datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc),
        )
        assert format_transaction_line(tx) == "2024-05-01 - Coffee: -€3.50"

    def test_income_line(self, make_transaction):
        tx = make_transaction(
            description="Salary",
            amount=2500,
            tx_type=TransactionType.INCOME,
            date=datetime(2024, 5, 31, tzinfo=timezone.utc),
        )
        assert format_transaction_line(tx, "£") == "2024-05-31 - Salary: +£2500.00"
