"""Tests for the presentation adapter and its formatting helpers."""

from datetime import date
from decimal import Decimal

import pytest

from petty_cash.config import DisplaySettings
from petty_cash.ledger import (
    LedgerPresenter,
    LedgerStore,
    format_currency,
    format_entry_date,
    format_signed_amount,
)
from petty_cash.models.transaction import Transaction, TransactionType


class TestFormatting:
    """Tests for currency and date formatting."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("10300"), "₱10,300.00"),
            (Decimal("0"), "₱0.00"),
            (Decimal("-200"), "₱-200.00"),
            (Decimal("1234567.891"), "₱1,234,567.89"),
            (Decimal("0.005"), "₱0.01"),
            (Decimal("2.675"), "₱2.68"),
            (Decimal("-0.004"), "₱0.00"),
            (Decimal("-0.00"), "₱0.00"),
        ],
    )
    def test_format_currency(self, amount, expected):
        assert format_currency(amount) == expected

    def test_custom_symbol(self):
        assert format_currency(Decimal("5"), symbol="$") == "$5.00"

    def test_signed_amount(self):
        expense = Transaction(
            entry_date=date(2026, 10, 19),
            description="Lunch",
            category="Meals",
            transaction_type=TransactionType.EXPENSE,
            amount=Decimal("200"),
        )
        income = expense.model_copy(update={"transaction_type": TransactionType.INCOME})
        assert format_signed_amount(expense) == "-₱200.00"
        assert format_signed_amount(income) == "+₱200.00"

    def test_format_entry_date(self):
        assert format_entry_date(date(2026, 10, 19)) == "Oct 19, 2026"
        assert format_entry_date(date(2026, 3, 5)) == "Mar 05, 2026"
        assert format_entry_date(date(2026, 3, 5), "%d/%m/%Y") == "05/03/2026"


class TestLedgerPresenter:
    """Tests for LedgerPresenter against the standard scenario."""

    @pytest.fixture
    def presenter(self, scenario_store):
        return LedgerPresenter(scenario_store, DisplaySettings())

    def test_summary_cards(self, presenter):
        cards = presenter.summary_cards()
        assert [card["label"] for card in cards] == [
            "Current Balance", "Total Income", "Total Expenses",
        ]
        assert [card["value"] for card in cards] == [
            "₱10,300.00", "₱10,500.00", "₱200.00",
        ]
        assert [card["tone"] for card in cards] == ["neutral", "positive", "negative"]

    def test_table_rows(self, presenter):
        rows = presenter.table_rows()
        assert [row["Description"] for row in rows] == ["Lunch", "Cash sale", "Initial Balance"]
        assert [row["Amount"] for row in rows] == ["-₱200.00", "+₱500.00", "+₱10,000.00"]
        assert [row["Balance"] for row in rows] == ["₱-200.00", "₱300.00", "₱10,300.00"]
        assert [row["Type"] for row in rows] == ["expense", "income", "income"]
        assert [row["Date"] for row in rows] == ["Oct 03, 2026", "Oct 02, 2026", "Oct 01, 2026"]

    def test_only_opening_row_is_locked(self, presenter):
        rows = presenter.table_rows()
        assert [row["can_delete"] for row in rows] == [True, True, False]
        assert rows[2]["id"] == presenter.store.opening_entry.id

    def test_rows_reflect_mutations(self, presenter):
        lunch_id = presenter.table_rows()[0]["id"]
        presenter.store.remove_transaction(lunch_id)
        assert presenter.summary_cards()[0]["value"] == "₱10,500.00"
        assert len(presenter.table_rows()) == 2

    def test_display_settings(self, scenario_store):
        presenter = LedgerPresenter(
            scenario_store,
            DisplaySettings(currency_symbol="$", date_format="%Y-%m-%d"),
        )
        row = presenter.table_rows()[0]
        assert row["Balance"] == "$-200.00"
        assert row["Date"] == "2026-10-03"

    def test_sub_cent_negative_balance_shows_zero(self):
        store = LedgerStore(opening_amount="0", opening_date=date(2026, 10, 1))
        store.add_transaction(date(2026, 10, 2), "Rounding", "Miscellaneous", "expense", "0.004")
        presenter = LedgerPresenter(store, DisplaySettings())
        assert presenter.table_rows()[0]["Balance"] == "₱0.00"
        assert presenter.summary_cards()[0]["value"] == "₱0.00"
