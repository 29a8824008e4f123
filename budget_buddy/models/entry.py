"""
Entry form validation models.

These describe why an AddTransaction was rejected so a presenter can
explain it instead of silently doing nothing.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """A single problem with the entry form."""

    field: str = Field(
        ...,
        description="Input with the issue ('description' or 'amount')"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format', 'negative')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        default="error",
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )


class EntryValidationResult(BaseModel):
    """
    Outcome of validating the entry form.

    When valid, `description` holds the text as entered and `amount` the
    parsed number the new transaction is built from.
    """

    description: Optional[str] = None
    amount: Optional[float] = None
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def is_valid(self) -> bool:
        return (
            not self.has_errors
            and self.description is not None
            and self.amount is not None
        )
