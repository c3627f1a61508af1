"""
Ledger Store

The in-memory petty cash ledger: an ordered list of transactions plus
the balances derived from it.

ORDERING: New entries are PREPENDED. Position 0 is always the most
recently added entry, and this is both the display order and the order
used for running balances. Entry dates play no part in either.

INVARIANTS:
- The ledger is never empty. It starts with one protected opening entry
  of type income, and that entry can never be removed.
- Stored amounts are non-negative. Income/expense sign is applied when
  reading, never stored.
- A failed add leaves the ledger exactly as it was.

Every mutation builds the new sequence first and swaps it in with a
single assignment, so readers never see a half-applied change.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Iterator, Optional
from uuid import UUID, uuid4

from petty_cash.audit import AuditLogger
from petty_cash.config import LedgerSettings, get_settings
from petty_cash.ledger.exceptions import ProtectedEntryError, TransactionValidationError
from petty_cash.models.transaction import (
    LedgerRow,
    LedgerSummary,
    Transaction,
    TransactionDraft,
    TransactionType,
    ValidatedEntry,
    ValidationResult,
)
from petty_cash.validation import TransactionValidator, parse_amount


ZERO = Decimal("0")


def _coerce_id(value: Any) -> Optional[UUID]:
    """Accept a UUID or its string form; anything else matches nothing."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class LedgerStore:
    """
    Ordered, newest-first ledger of petty cash transactions.

    Usage:
        store = LedgerStore.initialize()
        store.add_transaction(date.today(), "Lunch", "Meals", "expense", "200")
        store.balance()  # Decimal("9800")
    """

    def __init__(
        self,
        opening_amount: Optional[Any] = None,
        opening_date: Optional[date] = None,
        *,
        settings: Optional[LedgerSettings] = None,
        validator: Optional[TransactionValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Create a ledger seeded with its opening balance entry.

        Args:
            opening_amount: Overrides settings.opening_amount.
            opening_date: Date of the opening entry, defaults to today.
            settings: Ledger settings, defaults to get_settings().ledger.
            validator: Validator used for new entries.
            audit_logger: Receives an event for every mutation attempt.

        Raises:
            ValueError: If opening_amount is not a non-negative number.
        """
        self._settings = settings or get_settings().ledger
        self._validator = validator or TransactionValidator(self._settings)
        self._audit_logger = audit_logger or AuditLogger()
        self._ledger_id = uuid4()

        if opening_amount is None:
            amount = self._settings.opening_amount
        else:
            amount = self._validated_opening_amount(opening_amount)

        opening = Transaction(
            entry_date=opening_date or date.today(),
            description=self._settings.opening_description,
            category=self._settings.opening_category,
            transaction_type=TransactionType.INCOME,
            amount=amount,
            protected=True,
        )
        self._transactions: tuple[Transaction, ...] = (opening,)

        self._audit_logger.log_ledger_initialized(
            ledger_id=self._ledger_id,
            opening_id=opening.id,
            opening_amount=amount,
        )

    @classmethod
    def initialize(cls, **kwargs: Any) -> "LedgerStore":
        """Create a fresh ledger containing only the opening entry."""
        return cls(**kwargs)

    @staticmethod
    def _validated_opening_amount(raw: Any) -> Decimal:
        amount = parse_amount(raw)
        if amount < 0:
            raise ValueError("Opening amount cannot be negative")
        return amount

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def ledger_id(self) -> UUID:
        return self._ledger_id

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    @property
    def validator(self) -> TransactionValidator:
        return self._validator

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Snapshot of the ledger, newest first."""
        return self._transactions

    @property
    def opening_entry(self) -> Transaction:
        """The protected opening balance entry."""
        return next(t for t in self._transactions if t.protected)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def get(self, transaction_id: Any) -> Optional[Transaction]:
        """Return the transaction with this id (UUID or its string form), or None."""
        wanted = _coerce_id(transaction_id)
        if wanted is None:
            return None
        for transaction in self._transactions:
            if transaction.id == wanted:
                return transaction
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_transaction(
        self,
        entry_date: Optional[Any],
        description: Any,
        category: Any,
        transaction_type: Any,
        amount: Any,
        correlation_id: Optional[UUID] = None,
    ) -> Transaction:
        """
        Validate and prepend a new entry.

        The new entry becomes position 0; everything else shifts down by
        one, order otherwise unchanged.

        Returns:
            The recorded Transaction.

        Raises:
            TransactionValidationError: If any field is invalid. The ledger
                is unchanged.
        """
        draft = TransactionDraft(
            entry_date=entry_date,
            description=description,
            category=category,
            transaction_type=transaction_type,
            amount=amount,
        )
        return self.add_draft(draft, correlation_id=correlation_id)

    def add_draft(
        self,
        draft: TransactionDraft,
        correlation_id: Optional[UUID] = None,
    ) -> Transaction:
        """Same as add_transaction, taking the form's draft object."""
        transaction, _ = self.record_draft(draft, correlation_id=correlation_id)
        return transaction

    def record_draft(
        self,
        draft: TransactionDraft,
        correlation_id: Optional[UUID] = None,
    ) -> tuple[Transaction, ValidationResult]:
        """
        Validate and prepend a draft, returning the entry and the
        validation result it was accepted with (warnings included).

        Raises:
            TransactionValidationError: If any field is invalid.
        """
        result = self._validator.validate(draft)

        if not result.is_valid:
            self._audit_logger.log_transaction_rejected(
                issues=[issue.model_dump() for issue in result.issues],
                correlation_id=correlation_id,
            )
            raise TransactionValidationError(result)

        transaction = self._build(result.entry)
        self._transactions = (transaction,) + self._transactions

        self._audit_logger.log_transaction_added(
            transaction_id=transaction.id,
            description=transaction.description,
            transaction_type=transaction.transaction_type.value,
            amount=f"{transaction.amount:.2f}",
            correlation_id=correlation_id,
        )
        return transaction, result

    def _build(self, entry: ValidatedEntry) -> Transaction:
        return Transaction(
            entry_date=entry.entry_date,
            description=entry.description,
            category=entry.category,
            transaction_type=entry.transaction_type,
            amount=entry.amount,
        )

    def remove_transaction(
        self,
        transaction_id: Any,
        correlation_id: Optional[UUID] = None,
    ) -> bool:
        """
        Remove an entry by id, keeping the order of the others.

        Removing the protected opening entry is refused: by default it is
        a no-op, with strict_protected_removal it raises. An unknown id is
        a no-op, as is an id that is not a UUID or a UUID string.

        Returns:
            True if an entry was removed.

        Raises:
            ProtectedEntryError: Only when strict_protected_removal is set.
        """
        requested_id = transaction_id
        transaction_id = _coerce_id(requested_id)
        target = self.get(transaction_id)

        if target is None:
            self._audit_logger.log_removal_target_missing(
                transaction_id=transaction_id,
                requested_id=requested_id,
                correlation_id=correlation_id,
            )
            return False

        if target.protected:
            self._audit_logger.log_protected_removal_blocked(
                transaction_id=transaction_id,
                correlation_id=correlation_id,
            )
            if self._settings.strict_protected_removal:
                raise ProtectedEntryError(transaction_id)
            return False

        self._transactions = tuple(
            t for t in self._transactions if t.id != transaction_id
        )
        self._audit_logger.log_transaction_removed(
            transaction_id=transaction_id,
            description=target.description,
            correlation_id=correlation_id,
        )
        return True

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def balance(self) -> Decimal:
        """Income minus expense over the whole ledger."""
        return sum((t.signed_amount for t in self._transactions), ZERO)

    def total_income(self) -> Decimal:
        return sum(
            (t.amount for t in self._transactions if t.is_income),
            ZERO,
        )

    def total_expense(self) -> Decimal:
        return sum(
            (t.amount for t in self._transactions if not t.is_income),
            ZERO,
        )

    def running_balance_at(self, index: int) -> Decimal:
        """
        Signed sum of positions 0..index inclusive, in display order.

        Position 0 is the newest entry, so this is NOT a chronological
        running total: the top row shows only the latest entry's effect.
        Negative indexes count from the end like any Python sequence.

        Raises:
            IndexError: If index is out of range.
        """
        size = len(self._transactions)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"Ledger position {index} out of range (size {size})")
        return sum(
            (t.signed_amount for t in self._transactions[: index + 1]),
            ZERO,
        )

    def running_balances(self) -> list[Decimal]:
        """Running balance at every position, computed in one pass."""
        balances = []
        total = ZERO
        for transaction in self._transactions:
            total += transaction.signed_amount
            balances.append(total)
        return balances

    def rows(self) -> list[LedgerRow]:
        """Entries paired with their running balance, for table display."""
        return [
            LedgerRow(position=position, transaction=transaction, running_balance=balance)
            for position, (transaction, balance) in enumerate(
                zip(self._transactions, self.running_balances())
            )
        ]

    def summary(self) -> LedgerSummary:
        return LedgerSummary(
            balance=self.balance(),
            total_income=self.total_income(),
            total_expense=self.total_expense(),
            transaction_count=len(self._transactions),
        )
