"""Configuration package."""

from petty_cash.config.categories import (
    CATEGORY_VOCABULARY,
    categories_for,
    is_known_category,
)
from petty_cash.config.settings import (
    AppSettings,
    DisplaySettings,
    LedgerSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    # Category vocabulary
    "CATEGORY_VOCABULARY",
    "categories_for",
    "is_known_category",
    # Settings
    "AppSettings",
    "DisplaySettings",
    "LedgerSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
