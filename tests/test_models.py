"""
Tests for the ledger data models

Test strategy:
1. Unit tests for individual models and enums
2. Ledger behaviour is covered in test_ledger_store.py
"""

import pytest
from datetime import date
from decimal import Decimal

from petty_cash.config import CATEGORY_VOCABULARY, categories_for, is_known_category
from petty_cash.models.audit import AuditEvent, AuditEventBuilder, AuditEventType, AuditSeverity
from petty_cash.models.transaction import (
    LedgerSummary,
    Transaction,
    TransactionType,
    ValidationIssue,
    ValidationResult,
)


def _transaction(**overrides):
    fields = {
        "entry_date": date(2026, 10, 19),
        "description": "Lunch",
        "category": "Meals",
        "transaction_type": TransactionType.EXPENSE,
        "amount": Decimal("200.00"),
    }
    fields.update(overrides)
    return Transaction(**fields)


class TestTransactionType:
    """Tests for the transaction type enum."""

    @pytest.mark.parametrize("raw", ["income", "Income", " INCOME "])
    def test_from_str(self, raw):
        assert TransactionType.from_str(raw) is TransactionType.INCOME

    def test_from_member(self):
        assert TransactionType.from_str(TransactionType.EXPENSE) is TransactionType.EXPENSE

    def test_from_str_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unsupported transaction type"):
            TransactionType.from_str("transfer")

    def test_label(self):
        assert TransactionType.EXPENSE.label == "Expense"


class TestTransaction:
    """Tests for the Transaction model."""

    def test_creation(self):
        transaction = _transaction()
        assert transaction.protected is False
        assert transaction.id is not None
        assert transaction.created_at.tzinfo is not None

    def test_signed_amount(self):
        assert _transaction().signed_amount == Decimal("-200.00")
        income = _transaction(transaction_type=TransactionType.INCOME)
        assert income.signed_amount == Decimal("200.00")

    def test_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            _transaction(amount=Decimal("-1"))

    def test_rejects_empty_description(self):
        with pytest.raises(ValueError):
            _transaction(description="   ")

    def test_is_immutable(self):
        transaction = _transaction()
        with pytest.raises(ValueError):
            transaction.amount = Decimal("1")

    def test_unique_ids(self):
        assert _transaction().id != _transaction().id

    def test_to_display_dict(self):
        data = _transaction(amount=Decimal("1500.5")).to_display_dict()
        assert data["amount"] == "1500.50"
        assert data["entry_date"] == "2026-10-19"
        assert data["transaction_type"] == "expense"
        assert data["protected"] is False


class TestLedgerSummary:
    def test_requires_at_least_one_transaction(self):
        with pytest.raises(ValueError):
            LedgerSummary(
                balance=Decimal("0"),
                total_income=Decimal("0"),
                total_expense=Decimal("0"),
                transaction_count=0,
            )


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_has_errors(self):
        result = ValidationResult(
            is_valid=False,
            issues=[
                ValidationIssue(
                    field="amount",
                    issue_type="missing",
                    message="Amount is required",
                    severity="error",
                ),
            ],
        )
        assert result.has_errors is True
        assert result.error_count == 1

    def test_warnings_only(self):
        result = ValidationResult(
            is_valid=True,
            issues=[
                ValidationIssue(
                    field="category",
                    issue_type="unknown_category",
                    message="Unusual category",
                    severity="warning",
                ),
            ],
        )
        assert result.has_errors is False
        assert result.error_count == 0

    def test_severity_pattern(self):
        with pytest.raises(ValueError):
            ValidationIssue(field="x", issue_type="y", message="z", severity="fatal")


class TestCategoryVocabulary:
    """Tests for the fixed category lists."""

    def test_income_categories(self):
        assert categories_for(TransactionType.INCOME) == (
            "Sales", "Collections", "Refund", "Other Income",
        )

    def test_expense_categories(self):
        assert categories_for("expense") == (
            "Office Supplies", "Transportation", "Meals",
            "Utilities", "Repairs", "Miscellaneous",
        )

    def test_opening_not_offered(self):
        for labels in CATEGORY_VOCABULARY.values():
            assert "Opening" not in labels

    def test_is_known_category(self):
        assert is_known_category("income", "Refund") is True
        assert is_known_category("expense", "Refund") is False


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_defaults(self):
        event = AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            description="Added",
        )
        assert event.severity == AuditSeverity.INFO
        assert event.is_user_action is False

    def test_to_log_dict(self):
        event = AuditEvent(
            event_type=AuditEventType.TRANSACTION_REMOVED,
            description="Removed",
            details={"reason": "duplicate"},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "transaction_removed"
        assert log_dict["details"]["reason"] == "duplicate"
        assert log_dict["entity_id"] is None

    def test_builder_transaction_rejected(self):
        event = AuditEventBuilder.transaction_rejected(issues=[{"field": "amount"}])
        assert event.event_type == AuditEventType.TRANSACTION_REJECTED
        assert event.severity == AuditSeverity.WARNING
        assert event.details["issues"] == [{"field": "amount"}]
        assert event.is_user_action is True

    def test_builder_ledger_initialized(self):
        from uuid import uuid4

        event = AuditEventBuilder.ledger_initialized(uuid4(), uuid4(), Decimal("10000"))
        assert event.details["opening_amount"] == "10000.00"
        assert event.entity_type == "ledger"
