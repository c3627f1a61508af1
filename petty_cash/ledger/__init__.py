"""
Ledger Package

The petty cash ledger and its presentation adapter.
"""

from petty_cash.ledger.exceptions import (
    LedgerError,
    ProtectedEntryError,
    TransactionValidationError,
)
from petty_cash.ledger.presenter import (
    LedgerPresenter,
    format_currency,
    format_entry_date,
    format_signed_amount,
)
from petty_cash.ledger.store import LedgerStore

__all__ = [
    # Store
    "LedgerStore",
    # Presentation
    "LedgerPresenter",
    "format_currency",
    "format_entry_date",
    "format_signed_amount",
    # Exceptions
    "LedgerError",
    "ProtectedEntryError",
    "TransactionValidationError",
]
