"""
Core Data Models for the Petty Cash Ledger

These models define the schemas for every record flowing through the ledger.
They are designed to:
1. Enforce type safety at runtime
2. Provide clear validation error messages
3. Be serializable for display and logging
4. Support the audit trail

DESIGN DECISION: Amounts are always stored as non-negative Decimals.
The sign of an entry comes from its TransactionType at read time and is
never persisted on the record itself.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionType(str, Enum):
    """
    Direction of a ledger entry.

    INCOME adds to the balance, EXPENSE subtracts from it.
    """
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: Any) -> "TransactionType":
        """Coerce arbitrary casing ("Income", " expense ") into a member."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as error:
            raise ValueError(f"Unsupported transaction type: {value!r}") from error

    @property
    def label(self) -> str:
        return self.value.title()


# =============================================================================
# CORE TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    A single immutable ledger entry.

    Transactions are never edited. A wrong entry is deleted and re-entered.
    Only the opening entry created by the store carries protected=True.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Opaque identifier, never reused"
    )
    entry_date: date = Field(
        ...,
        description="Calendar date shown in the ledger (display only)"
    )
    description: str = Field(
        ...,
        min_length=1,
        description="What the money was for"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Category label, normally from the vocabulary of the type"
    )
    transaction_type: TransactionType
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Unsigned amount; sign is derived from transaction_type"
    )
    protected: bool = Field(
        default=False,
        description="Protected entries cannot be removed from the ledger"
    )
    created_at: datetime = Field(
        default_factory=_utcnow,
        description="When the entry was recorded (UTC)"
    )

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by the transaction type."""
        return self.amount if self.is_income else -self.amount

    def to_display_dict(self) -> dict:
        """Export with JSON-friendly values."""
        return {
            "id": str(self.id),
            "entry_date": self.entry_date.isoformat(),
            "description": self.description,
            "category": self.category,
            "transaction_type": self.transaction_type.value,
            "amount": f"{self.amount:.2f}",
            "protected": self.protected,
        }


class TransactionDraft(BaseModel):
    """
    Raw input from the entry form, before validation.

    Fields are deliberately loose: the validator inspects all of them
    and reports every problem in one pass instead of failing on the first.
    """
    entry_date: Optional[Any] = None
    description: Optional[Any] = None
    category: Optional[Any] = None
    transaction_type: Optional[Any] = TransactionType.EXPENSE
    amount: Optional[Any] = None


class ValidatedEntry(BaseModel):
    """Normalised entry fields, ready to become a Transaction."""
    model_config = ConfigDict(frozen=True)

    entry_date: date
    description: str
    category: str
    transaction_type: TransactionType
    amount: Decimal = Field(ge=0)


# =============================================================================
# DERIVED VIEWS
# =============================================================================

class LedgerRow(BaseModel):
    """One displayed row: the entry plus the running balance at its position."""
    model_config = ConfigDict(frozen=True)

    position: int = Field(ge=0)
    transaction: Transaction
    running_balance: Decimal


class LedgerSummary(BaseModel):
    """Aggregate figures for the summary cards."""
    model_config = ConfigDict(frozen=True)

    balance: Decimal
    total_income: Decimal
    total_expense: Decimal
    transaction_count: int = Field(ge=1)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
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
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class ValidationResult(BaseModel):
    """
    Result of validating a TransactionDraft.

    Errors block the entry. Warnings are shown to the user but the
    entry is still accepted.
    """

    validated_at: datetime = Field(
        default_factory=_utcnow
    )
    is_valid: bool = Field(
        ...,
        description="True when no error-level issue was found"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-blocking warnings"
    )
    entry: Optional[ValidatedEntry] = Field(
        default=None,
        description="Normalised fields, only present when is_valid"
    )

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    def issues_for(self, field: str) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.field == field]
