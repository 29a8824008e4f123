"""Audit logging package."""

from budget_buddy.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
