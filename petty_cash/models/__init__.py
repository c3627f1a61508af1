"""
Data Models Package

This package contains all Pydantic models used by the petty cash ledger.
All data flowing through the system must conform to these schemas.
"""

from petty_cash.models.transaction import (
    LedgerRow,
    LedgerSummary,
    Transaction,
    TransactionDraft,
    TransactionType,
    ValidatedEntry,
    ValidationIssue,
    ValidationResult,
)
from petty_cash.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "LedgerRow",
    "LedgerSummary",
    "Transaction",
    "TransactionDraft",
    "TransactionType",
    "ValidatedEntry",
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
