"""
Ledger Presentation Adapter

Turns LedgerStore figures into display strings for the UI. Nothing here
changes the ledger; the UI keeps a reference to the store and asks this
adapter for fresh values after every mutation.

Formatting conventions:
- Amounts are rounded half-up to 2 decimals only at this point.
- Currency renders as symbol + grouped number: ₱10,300.00, ₱-200.00
- Row amounts carry an explicit sign: +₱500.00, -₱200.00
- Dates render as "Oct 19, 2026" (display only)
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from petty_cash.config import DisplaySettings, get_settings
from petty_cash.ledger.store import LedgerStore
from petty_cash.models.transaction import Transaction


CENT = Decimal("0.01")


def quantize_currency(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal, symbol: str = "₱") -> str:
    """Symbol followed by the grouped, 2-decimal amount (sign kept on the number)."""
    value = quantize_currency(amount)
    if value == 0:
        # -0.004 rounds to -0.00, which must not print as a negative
        value = abs(value)
    return f"{symbol}{value:,.2f}"


def format_signed_amount(transaction: Transaction, symbol: str = "₱") -> str:
    """+₱500.00 for income, -₱200.00 for expense."""
    sign = "+" if transaction.is_income else "-"
    return f"{sign}{format_currency(transaction.amount, symbol)}"


def format_entry_date(value: date, fmt: str = "%b %d, %Y") -> str:
    return value.strftime(fmt)


class LedgerPresenter:
    """
    Read-only view of a LedgerStore for the summary cards and history table.
    """

    def __init__(
        self,
        store: LedgerStore,
        settings: Optional[DisplaySettings] = None,
    ):
        self._store = store
        self._settings = settings or get_settings().display

    @property
    def store(self) -> LedgerStore:
        return self._store

    @property
    def settings(self) -> DisplaySettings:
        return self._settings

    def money(self, amount: Decimal) -> str:
        return format_currency(amount, self._settings.currency_symbol)

    def summary_cards(self) -> list[dict]:
        """
        The three headline figures.

        Returns:
            [{"label", "value", "tone"}] for balance, income and expenses.
            tone is "neutral", "positive" or "negative" for colouring.
        """
        summary = self._store.summary()
        return [
            {
                "label": "Current Balance",
                "value": self.money(summary.balance),
                "tone": "neutral",
            },
            {
                "label": "Total Income",
                "value": self.money(summary.total_income),
                "tone": "positive",
            },
            {
                "label": "Total Expenses",
                "value": self.money(summary.total_expense),
                "tone": "negative",
            },
        ]

    def table_rows(self) -> list[dict]:
        """
        One dict per ledger row in display order (newest first).

        `can_delete` is False only for the protected opening entry.
        """
        symbol = self._settings.currency_symbol
        rows = []
        for row in self._store.rows():
            transaction = row.transaction
            rows.append({
                "id": transaction.id,
                "Date": format_entry_date(transaction.entry_date, self._settings.date_format),
                "Description": transaction.description,
                "Category": transaction.category,
                "Type": transaction.transaction_type.value,
                "Amount": format_signed_amount(transaction, symbol),
                "Balance": self.money(row.running_balance),
                "can_delete": not transaction.protected,
            })
        return rows
