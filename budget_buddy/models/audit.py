"""
Audit Models for BudgetBuddy

Every state change and every storage incident is described by an
AuditEvent and written to the structured log. This provides:
1. Traceability of every add and delete
2. Debugging information when storage misbehaves
3. A record of recovered corruption
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # State changes
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_DELETED = "transaction_deleted"
    ENTRY_REJECTED = "entry_rejected"

    # Persistence
    STORE_LOADED = "store_loaded"
    STORE_SAVED = "store_saved"
    SAVE_FAILED = "save_failed"
    CORRUPT_STORE_RECOVERED = "corrupt_store_recovered"

    # Decoding
    UNKNOWN_TYPE_COERCED = "unknown_type_coerced"

    # System events
    SYSTEM_ERROR = "system_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which transaction is this about?
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the transaction this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user message?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added(tx_id, "Coffee", 3.5, "Expense")
        event = AuditEventBuilder.save_failed("disk full", 4)
    """

    @staticmethod
    def transaction_added(
        transaction_id: UUID,
        description: str,
        amount: float,
        type_value: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_id=transaction_id,
            description=f"{type_value} added: {description}"[:500],
            details={
                "amount": amount,
                "type": type_value,
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_deleted(
        transaction_id: UUID,
        remaining: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_DELETED,
            entity_id=transaction_id,
            description="Transaction deleted",
            details={"remaining": remaining},
            is_user_action=True,
        )

    @staticmethod
    def entry_rejected(issues: list[dict]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENTRY_REJECTED,
            severity=AuditSeverity.DEBUG,
            description=f"Entry rejected with {len(issues)} issue(s)",
            details={"issues": issues},
            is_user_action=True,
        )

    @staticmethod
    def store_loaded(key: str, count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_LOADED,
            description=f"Loaded {count} transaction(s) from '{key}'",
            details={"key": key, "count": count},
        )

    @staticmethod
    def store_saved(key: str, count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_SAVED,
            severity=AuditSeverity.DEBUG,
            description=f"Saved {count} transaction(s) to '{key}'",
            details={"key": key, "count": count},
        )

    @staticmethod
    def save_failed(error_message: str, count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            description="Saving transactions failed",
            details={"count": count},
            error_message=error_message,
        )

    @staticmethod
    def corrupt_store_recovered(
        key: str,
        backup_key: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CORRUPT_STORE_RECOVERED,
            severity=AuditSeverity.WARNING,
            description=f"Stored data under '{key}' was unreadable; starting empty",
            details={"key": key, "backup_key": backup_key},
            error_message=error_message,
        )

    @staticmethod
    def unknown_type_coerced(transaction_id: str, raw_type: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.UNKNOWN_TYPE_COERCED,
            severity=AuditSeverity.WARNING,
            description=f"Unknown transaction type {raw_type!r} read as Income"[:500],
            details={"transaction_id": transaction_id, "raw_type": raw_type},
        )

    @staticmethod
    def system_error(
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SYSTEM_ERROR,
            severity=AuditSeverity.ERROR,
            description=f"System error: {error_type}",
            details=details or {},
            error_message=error_message,
        )
