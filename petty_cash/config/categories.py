"""
Category Vocabulary

Fixed, ordered category labels per transaction type. The entry form uses
these to populate its category selector.

The store does NOT enforce this mapping: any non-empty category is
accepted. The validator only warns when a label falls outside the
vocabulary of its type.
"""

from typing import Union

from petty_cash.models.transaction import TransactionType


CATEGORY_VOCABULARY: dict[TransactionType, tuple[str, ...]] = {
    TransactionType.INCOME: (
        "Sales",
        "Collections",
        "Refund",
        "Other Income",
    ),
    TransactionType.EXPENSE: (
        "Office Supplies",
        "Transportation",
        "Meals",
        "Utilities",
        "Repairs",
        "Miscellaneous",
    ),
}


def categories_for(transaction_type: Union[TransactionType, str]) -> tuple[str, ...]:
    """Return the ordered category labels offered for a transaction type."""
    return CATEGORY_VOCABULARY[TransactionType.from_str(transaction_type)]


def is_known_category(
    transaction_type: Union[TransactionType, str],
    category: str,
) -> bool:
    return category in categories_for(transaction_type)
