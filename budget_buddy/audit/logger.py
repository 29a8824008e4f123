"""
Audit Logger

DESIGN DECISION: Every add, delete and storage incident is logged.
This provides:
1. Complete traceability
2. Debugging capability
3. A visible record when corrupt data was set aside

The audit logger:
- Is synchronous, like the reducer that calls it
- Keeps a bounded in-memory history of recent events
"""

import logging
from collections import deque
from typing import Optional
from uuid import UUID

import structlog

from budget_buddy.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Set the stdlib level that structlog's filter_by_level honours."""
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger("budget_buddy").setLevel(level)


class AuditLogger:
    """
    Central audit logging service.

    Logs events to the structured local log and remembers the most
    recent ones so a presenter can show them.
    """

    def __init__(self, history_size: int = 100):
        self._logger = structlog.get_logger("budget_buddy.audit")
        self._recent: deque[AuditEvent] = deque(maxlen=history_size)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at its own severity."""
        self._recent.append(event)
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        """Most recent events, newest first."""
        return list(reversed(self._recent))[:limit]

    def log_transaction_added(
        self,
        transaction_id: UUID,
        description: str,
        amount: float,
        type_value: str,
    ) -> None:
        self.log(AuditEventBuilder.transaction_added(
            transaction_id=transaction_id,
            description=description,
            amount=amount,
            type_value=type_value,
        ))

    def log_transaction_deleted(self, transaction_id: UUID, remaining: int) -> None:
        self.log(AuditEventBuilder.transaction_deleted(
            transaction_id=transaction_id,
            remaining=remaining,
        ))

    def log_entry_rejected(self, issues: list[dict]) -> None:
        self.log(AuditEventBuilder.entry_rejected(issues))

    def log_store_loaded(self, key: str, count: int) -> None:
        self.log(AuditEventBuilder.store_loaded(key, count))

    def log_store_saved(self, key: str, count: int) -> None:
        self.log(AuditEventBuilder.store_saved(key, count))

    def log_save_failed(self, error_message: str, count: int) -> None:
        self.log(AuditEventBuilder.save_failed(error_message, count))

    def log_corrupt_store_recovered(
        self,
        key: str,
        backup_key: str,
        error_message: str,
    ) -> None:
        self.log(AuditEventBuilder.corrupt_store_recovered(
            key=key,
            backup_key=backup_key,
            error_message=error_message,
        ))

    def log_unknown_type_coerced(self, transaction_id: str, raw_type: str) -> None:
        self.log(AuditEventBuilder.unknown_type_coerced(transaction_id, raw_type))

    def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
    ) -> None:
        self.log(AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
        ))
