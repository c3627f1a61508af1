"""Exceptions raised by the ledger."""

from uuid import UUID

from petty_cash.models.transaction import ValidationIssue, ValidationResult


class LedgerError(Exception):
    """Base error for ledger operations."""
    pass


class TransactionValidationError(LedgerError, ValueError):
    """
    A new entry failed validation. The ledger was not modified.

    The full ValidationResult is attached so the form can show
    every problem at once.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        messages = "; ".join(
            issue.message for issue in result.issues if issue.severity == "error"
        )
        super().__init__(f"Invalid transaction: {messages}")

    @property
    def issues(self) -> list[ValidationIssue]:
        return self.result.issues


class ProtectedEntryError(LedgerError):
    """Removal of the protected opening entry was requested in strict mode."""

    def __init__(self, transaction_id: UUID):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} is protected and cannot be removed")
