"""
Main Orchestrator for the Petty Cash Ledger

Ties the ledger, validator, presenter and audit logger together and
defines the two user flows:
1. Entry (form draft → validate → prepend to ledger)
2. Deletion (row action → remove unless protected)

DESIGN DECISION: The ledger raises on invalid input; this layer turns
those errors back into (result, message) pairs the UI can show without
try/except blocks scattered through the page code.
"""

from typing import Any, Optional
from uuid import UUID

from petty_cash.audit import AuditLogger, create_correlation_id
from petty_cash.config import get_settings
from petty_cash.ledger import (
    LedgerPresenter,
    LedgerStore,
    ProtectedEntryError,
    TransactionValidationError,
)
from petty_cash.models.transaction import (
    Transaction,
    TransactionDraft,
    ValidationResult,
)
from petty_cash.validation import TransactionValidator


class TransactionEntryFlow:
    """
    Orchestrates entry and deletion for one ledger session.

    Flow:
    1. Form submits a draft
    2. Ledger validates it (errors leave the ledger untouched)
    3. Valid drafts are prepended to the ledger
    4. The UI re-renders from the presenter
    """

    def __init__(
        self,
        store: LedgerStore,
        validator: Optional[TransactionValidator] = None,
    ):
        self._store = store
        self._validator = validator or store.validator

    @property
    def store(self) -> LedgerStore:
        return self._store

    def submit(
        self,
        draft: TransactionDraft,
        correlation_id: Optional[UUID] = None,
    ) -> tuple[Optional[Transaction], ValidationResult]:
        """
        Record a drafted entry.

        Returns:
            (transaction, validation_result)

        If transaction is None the entry was rejected and the form should
        re-prompt with validation_result.
        """
        correlation_id = correlation_id or create_correlation_id()

        try:
            return self._store.record_draft(draft, correlation_id=correlation_id)
        except TransactionValidationError as e:
            return None, e.result

    def delete(
        self,
        transaction_id: Any,
        correlation_id: Optional[UUID] = None,
    ) -> tuple[bool, str]:
        """
        Remove an entry on behalf of the UI.

        Returns:
            (removed, message)
        """
        correlation_id = correlation_id or create_correlation_id()
        target = self._store.get(transaction_id)

        try:
            removed = self._store.remove_transaction(
                transaction_id, correlation_id=correlation_id
            )
        except ProtectedEntryError:
            return False, "The opening balance cannot be deleted."

        if removed:
            return True, f"Deleted '{target.description}'."
        if target is None:
            return False, "That transaction no longer exists."
        return False, "The opening balance cannot be deleted."

    def summary_message(self, result: ValidationResult) -> str:
        return self._validator.get_user_friendly_summary(result)


def create_app_components() -> tuple[TransactionEntryFlow, LedgerPresenter, AuditLogger]:
    """
    Factory function to create all application components.

    Returns:
        (entry_flow, presenter, audit_logger)
    """
    settings = get_settings()
    ledger_settings = settings.ledger

    audit_logger = AuditLogger()
    validator = TransactionValidator(ledger_settings)
    store = LedgerStore(
        settings=ledger_settings,
        validator=validator,
        audit_logger=audit_logger,
    )

    entry_flow = TransactionEntryFlow(store=store, validator=validator)
    presenter = LedgerPresenter(store, settings.display)

    return entry_flow, presenter, audit_logger
