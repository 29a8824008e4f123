"""
Tests for BudgetBuddy models

Test strategy:
1. Unit tests for individual components (models, codec, validator)
2. Flow tests for reducer and program with in-memory storage
3. No real files outside pytest's tmp_path
"""

import math
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import TypeAdapter, ValidationError

from budget_buddy.models import (
    MESSAGE_TYPES,
    AddTransaction,
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
    DeleteTransaction,
    EntryValidationResult,
    Model,
    Msg,
    PersistedTransaction,
    SetAmount,
    SetDescription,
    SetType,
    Transaction,
    TransactionType,
    ValidationIssue,
)


NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class TestTransactionModel:
    """Tests for the Transaction model."""

    def test_transaction_creation(self):
        """Test Transaction model creation."""
        tx = Transaction(
            date=NOW,
            description="Coffee",
            amount=3.5,
            type=TransactionType.EXPENSE,
        )
        assert tx.description == "Coffee"
        assert tx.amount == 3.5
        assert tx.id is not None

    def test_transaction_keeps_description_as_entered(self):
        """Test that surrounding whitespace in the description is kept."""
        tx = Transaction(date=NOW, description="  Coffee  ", amount=1)
        assert tx.description == "  Coffee  "

    def test_transaction_rejects_blank_description(self):
        """Test that a whitespace-only description is rejected."""
        with pytest.raises(ValidationError):
            Transaction(date=NOW, description="   ", amount=1)

    def test_transaction_rejects_negative_amount(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValidationError):
            Transaction(date=NOW, description="Refund", amount=-5)

    def test_transaction_rejects_non_finite_amount(self):
        """Test that NaN and infinity are rejected."""
        with pytest.raises(ValidationError):
            Transaction(date=NOW, description="Bad", amount=math.inf)
        with pytest.raises(ValidationError):
            Transaction(date=NOW, description="Bad", amount=math.nan)

    def test_transaction_is_frozen(self):
        """Test that a transaction cannot be mutated."""
        tx = Transaction(date=NOW, description="Coffee", amount=3.5)
        with pytest.raises(ValidationError):
            tx.amount = 4.0

    def test_type_values(self):
        """Test the literal strings used in storage."""
        assert TransactionType.EXPENSE.value == "Expense"
        assert TransactionType.INCOME.value == "Income"
        assert len(TransactionType) == 2


class TestPersistedTransaction:
    """Tests for the wire record."""

    def test_accepts_wire_names(self):
        record = PersistedTransaction.model_validate({
            "Id": "abc",
            "Date": "2024-01-01T00:00:00",
            "Description": "Coffee",
            "Amount": 3,
            "Type": "Expense",
        })
        assert record.id == "abc"
        assert record.amount == 3.0

    def test_dumps_wire_names(self):
        record = PersistedTransaction(
            id="abc", date="d", description="x", amount=1.0, type="Income",
        )
        assert set(record.model_dump(by_alias=True)) == {"Id", "Date", "Description", "Amount", "Type"}


class TestModel:
    """Tests for the application state."""

    def test_defaults(self):
        model = Model.empty()
        assert model.transactions == ()
        assert model.description_input == ""
        assert model.amount_input == ""
        assert model.type_input == TransactionType.EXPENSE

    def test_model_is_frozen(self):
        model = Model.empty()
        with pytest.raises(ValidationError):
            model.amount_input = "3"


class TestMessages:
    """Tests for the closed message set."""

    def test_message_types_are_closed(self):
        assert MESSAGE_TYPES == (
            SetDescription, SetAmount, SetType, AddTransaction, DeleteTransaction,
        )

    def test_msg_union_selects_variant_by_kind(self):
        msg = TypeAdapter(Msg).validate_python({"kind": "set_amount", "text": "3.5"})
        assert msg == SetAmount(text="3.5")

    def test_msg_union_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Msg).validate_python({"kind": "rename_transaction"})

    def test_set_type_requires_known_type(self):
        with pytest.raises(ValidationError):
            SetType(type="Transfer")


class TestEntryValidationResult:
    """Tests for EntryValidationResult."""

    def test_valid_result(self):
        result = EntryValidationResult(description="Coffee", amount=3.5)
        assert result.is_valid is True
        assert result.has_errors is False

    def test_result_with_errors(self):
        result = EntryValidationResult(
            amount=3.5,
            issues=[ValidationIssue(field="description", issue_type="missing", message="x")],
        )
        assert result.has_errors is True
        assert result.is_valid is False


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.STORE_LOADED,
            description="Loaded",
        )
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        tx_id = uuid4()
        event = AuditEventBuilder.transaction_added(tx_id, "Coffee", 3.5, "Expense")
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "transaction_added"
        assert log_dict["entity_id"] == str(tx_id)
        assert log_dict["details"] == {"amount": 3.5, "type": "Expense"}
        assert log_dict["is_user_action"] is True

    def test_audit_event_builder_save_failed(self):
        event = AuditEventBuilder.save_failed("quota exceeded", 3)
        assert event.event_type == AuditEventType.SAVE_FAILED
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "quota exceeded"

    def test_audit_event_builder_corrupt_store(self):
        event = AuditEventBuilder.corrupt_store_recovered(
            "transactions", "transactions.corrupt", "bad json",
        )
        assert event.severity == AuditSeverity.WARNING
        assert event.details["backup_key"] == "transactions.corrupt"

    def test_long_description_is_truncated(self):
        event = AuditEventBuilder.transaction_added(uuid4(), "x" * 1000, 1.0, "Income")
        assert len(event.description) == 500


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
