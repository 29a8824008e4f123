"""Entry validation package."""

from budget_buddy.validation.validator import EntryValidator, parse_amount

__all__ = ["EntryValidator", "parse_amount"]
