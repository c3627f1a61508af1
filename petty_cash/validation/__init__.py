"""Validation package."""

from petty_cash.validation.validator import (
    TransactionValidator,
    parse_amount,
    parse_entry_date,
)

__all__ = ["TransactionValidator", "parse_amount", "parse_entry_date"]
