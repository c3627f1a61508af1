"""
Transaction Entry Validation

DESIGN DECISION: Validation runs over every field of a draft and collects
ALL issues before deciding, so the form can show the user everything
that needs fixing in one go.

Severity rules:
- error: the entry cannot be recorded (empty description, empty
  category, unknown type, non-numeric or negative amount, bad date)
- warning: the entry is recorded but the user should double check
  (category outside the vocabulary of its type, zero amount)

IMPORTANT: Validation NEVER silently fixes values. Whitespace around
text is trimmed and numeric input is converted to Decimal, nothing more.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from petty_cash.config import LedgerSettings, get_settings, is_known_category
from petty_cash.models.transaction import (
    TransactionDraft,
    TransactionType,
    ValidatedEntry,
    ValidationIssue,
    ValidationResult,
)


def parse_amount(raw: Any) -> Decimal:
    """
    Convert form input to a Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") rather than
    its binary expansion. Raises ValueError on anything non-numeric.
    """
    if isinstance(raw, bool):
        raise ValueError("Amount must be a number")
    if isinstance(raw, Decimal):
        amount = raw
    else:
        try:
            amount = Decimal(str(raw).strip())
        except InvalidOperation as error:
            raise ValueError(f"Amount must be a number, got {raw!r}") from error
    if not amount.is_finite():
        raise ValueError("Amount must be a finite number")
    return amount


def parse_entry_date(raw: Any) -> date:
    """Accept date, datetime or ISO 'YYYY-MM-DD'. None means today."""
    if raw is None:
        return date.today()
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        return date.fromisoformat(raw.strip())
    raise ValueError("Dates must be ISO strings or date/datetime instances")


class TransactionValidator:
    """
    Validates a TransactionDraft before it reaches the ledger.

    The validator never touches the ledger itself; it only answers
    whether a draft is acceptable and what the normalised values are.
    """

    def __init__(self, settings: Optional[LedgerSettings] = None):
        self._settings = settings or get_settings().ledger

    def _check_text(
        self,
        value: Any,
        field: str,
        label: str,
        max_length: int,
    ) -> tuple[Optional[str], list[ValidationIssue]]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None, [ValidationIssue(
                field=field,
                issue_type="missing",
                message=f"{label} is required",
                severity="error",
                suggested_fix=f"Enter a {label.lower()}",
            )]
        if not isinstance(value, str):
            return None, [ValidationIssue(
                field=field,
                issue_type="invalid_format",
                message=f"{label} must be text",
                severity="error",
            )]
        text = value.strip()
        if len(text) > max_length:
            return None, [ValidationIssue(
                field=field,
                issue_type="too_long",
                message=f"{label} must be at most {max_length} characters",
                severity="error",
                suggested_fix="Shorten the text",
            )]
        return text, []

    def _check_type(
        self,
        value: Any,
    ) -> tuple[Optional[TransactionType], list[ValidationIssue]]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None, [ValidationIssue(
                field="transaction_type",
                issue_type="missing",
                message="Type is required",
                severity="error",
                suggested_fix="Choose Income or Expense",
            )]
        try:
            return TransactionType.from_str(value), []
        except ValueError:
            return None, [ValidationIssue(
                field="transaction_type",
                issue_type="invalid_value",
                message=f"Unknown transaction type: {value}",
                severity="error",
                suggested_fix="Choose Income or Expense",
            )]

    def _check_amount(
        self,
        value: Any,
    ) -> tuple[Optional[Decimal], list[ValidationIssue]]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None, [ValidationIssue(
                field="amount",
                issue_type="missing",
                message="Amount is required",
                severity="error",
                suggested_fix="Enter an amount such as 150.00",
            )]
        try:
            amount = parse_amount(value)
        except ValueError:
            return None, [ValidationIssue(
                field="amount",
                issue_type="invalid_format",
                message=f"Amount ({value}) is not a valid number",
                severity="error",
                suggested_fix="Enter digits only, e.g. 1500.00",
            )]
        if amount < 0:
            return None, [ValidationIssue(
                field="amount",
                issue_type="negative",
                message="Amount cannot be negative",
                severity="error",
                suggested_fix="Enter the amount without a sign and pick Income or Expense",
            )]
        if amount == 0:
            # "-0" would otherwise render as "-0.00"
            return abs(amount), [ValidationIssue(
                field="amount",
                issue_type="zero_amount",
                message="Amount is zero",
                severity="warning",
                suggested_fix="Check that the amount was entered",
            )]
        return amount, []

    def _check_date(self, value: Any) -> tuple[Optional[date], list[ValidationIssue]]:
        try:
            return parse_entry_date(value), []
        except ValueError:
            return None, [ValidationIssue(
                field="entry_date",
                issue_type="invalid_format",
                message=f"Date ({value}) is not a valid calendar date",
                severity="error",
                suggested_fix="Use the format YYYY-MM-DD",
            )]

    def validate(self, draft: TransactionDraft) -> ValidationResult:
        """
        Validate every field of a draft.

        Returns:
            ValidationResult; `entry` holds the normalised values when valid.
        """
        issues: list[ValidationIssue] = []

        entry_date, found = self._check_date(draft.entry_date)
        issues.extend(found)

        description, found = self._check_text(
            draft.description,
            "description",
            "Description",
            self._settings.max_description_length,
        )
        issues.extend(found)

        category, found = self._check_text(
            draft.category,
            "category",
            "Category",
            self._settings.max_category_length,
        )
        issues.extend(found)

        transaction_type, found = self._check_type(draft.transaction_type)
        issues.extend(found)

        amount, found = self._check_amount(draft.amount)
        issues.extend(found)

        # Trust boundary: the ledger accepts any category, so this only warns
        if (
            transaction_type is not None
            and category is not None
            and not is_known_category(transaction_type, category)
        ):
            issues.append(ValidationIssue(
                field="category",
                issue_type="unknown_category",
                message=f"'{category}' is not a usual {transaction_type.value} category",
                severity="warning",
                suggested_fix="Pick a category from the list",
            ))

        is_valid = not any(issue.severity == "error" for issue in issues)
        warnings = [issue.message for issue in issues if issue.severity == "warning"]

        entry = None
        if is_valid:
            entry = ValidatedEntry(
                entry_date=entry_date,
                description=description,
                category=category,
                transaction_type=transaction_type,
                amount=amount,
            )

        return ValidationResult(
            is_valid=is_valid,
            issues=issues,
            warnings=warnings,
            entry=entry,
        )

    def get_user_friendly_summary(self, result: ValidationResult) -> str:
        """Summary text shown next to the entry form."""
        if result.is_valid and not result.warnings:
            return "✅ Transaction recorded."

        lines = []

        if result.has_errors:
            lines.append("❌ The transaction was not recorded:")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"   • {issue.message}")
                    if issue.suggested_fix:
                        lines.append(f"     💡 {issue.suggested_fix}")

        if result.warnings:
            if lines:
                lines.append("")
            lines.append("⚠️ Please double check:")
            for warning in result.warnings:
                lines.append(f"   • {warning}")

        return "\n".join(lines)
