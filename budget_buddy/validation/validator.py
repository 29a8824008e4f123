"""
Entry Validation

Checks the raw text held in the entry form before a transaction is
created:
- Description must contain something besides whitespace
- Amount must be a plain decimal number (scientific notation allowed),
  finite, and not negative

IMPORTANT: Validation NEVER silently fixes input. It reports issues
and the reducer leaves the model untouched. A valid description is
passed on exactly as entered.
"""

import math
import re
from typing import Optional

from budget_buddy.models.entry import EntryValidationResult, ValidationIssue


# ASCII digits only; no digit-group underscores
AMOUNT_PATTERN = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)


def parse_amount(text: str) -> float:
    """
    Parse amount text written as a plain decimal number.

    Raises:
        ValueError: If the text is not a number
    """
    if not AMOUNT_PATTERN.match(text):
        raise ValueError(f"Not a decimal number: {text!r}")
    return float(text)


class EntryValidator:
    """Validates the description/amount pair from the entry form."""

    def _validate_description(self, text: str) -> tuple[Optional[str], list[ValidationIssue]]:
        if not text.strip():
            return None, [ValidationIssue(
                field="description",
                issue_type="missing",
                message="Enter a description",
            )]
        return text, []

    def _validate_amount(self, text: str) -> tuple[Optional[float], list[ValidationIssue]]:
        if not text.strip():
            return None, [ValidationIssue(
                field="amount",
                issue_type="missing",
                message="Enter an amount",
            )]

        try:
            amount = parse_amount(text)
        except ValueError:
            return None, [ValidationIssue(
                field="amount",
                issue_type="invalid_format",
                message=f"'{text}' is not a number",
            )]

        if not math.isfinite(amount):
            return None, [ValidationIssue(
                field="amount",
                issue_type="invalid_value",
                message="Amount must be a finite number",
            )]

        if amount < 0:
            # Sign lives in the transaction type, not the amount
            return None, [ValidationIssue(
                field="amount",
                issue_type="negative",
                message="Amount cannot be negative; choose Expense or Income instead",
            )]

        return amount, []

    def validate(self, description_input: str, amount_input: str) -> EntryValidationResult:
        """Validate both inputs and collect every issue found."""
        description, description_issues = self._validate_description(description_input)
        amount, amount_issues = self._validate_amount(amount_input)

        return EntryValidationResult(
            description=description,
            amount=amount,
            issues=description_issues + amount_issues,
        )
