"""
Data Models Package

This package contains all Pydantic models used in BudgetBuddy.
All state flowing through the reducer must conform to these schemas.
"""

from budget_buddy.models.transaction import (
    PersistedTransaction,
    Transaction,
    TransactionType,
)
from budget_buddy.models.state import Model
from budget_buddy.models.entry import EntryValidationResult, ValidationIssue
from budget_buddy.models.messages import (
    MESSAGE_TYPES,
    AddTransaction,
    DeleteTransaction,
    Msg,
    SetAmount,
    SetDescription,
    SetType,
)
from budget_buddy.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "PersistedTransaction",
    "Transaction",
    "TransactionType",
    # State
    "Model",
    # Entry validation
    "EntryValidationResult",
    "ValidationIssue",
    # Messages
    "MESSAGE_TYPES",
    "AddTransaction",
    "DeleteTransaction",
    "Msg",
    "SetAmount",
    "SetDescription",
    "SetType",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
