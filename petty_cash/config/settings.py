"""
Configuration Management for the Petty Cash Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Opening balance, removal policy and display conventions are validated
once at startup instead of being scattered through the UI.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Ledger behaviour: opening entry and removal policy."""

    model_config = SettingsConfigDict(
        env_prefix="PETTY_CASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    opening_amount: Decimal = Field(
        default=Decimal("10000.00"),
        ge=0,
        description="Amount of the seeded opening balance entry"
    )
    opening_description: str = Field(
        default="Initial Balance",
        min_length=1,
        description="Description of the seeded opening entry"
    )
    opening_category: str = Field(
        default="Opening",
        min_length=1,
        description="Category of the seeded opening entry"
    )
    strict_protected_removal: bool = Field(
        default=False,
        description=(
            "Raise ProtectedEntryError when removing the opening entry "
            "instead of ignoring the request"
        )
    )
    max_description_length: int = Field(
        default=200,
        ge=1,
        le=1000,
        description="Maximum length of a transaction description"
    )
    max_category_length: int = Field(
        default=50,
        ge=1,
        le=200,
        description="Maximum length of a category label"
    )

    @field_validator("opening_amount")
    @classmethod
    def validate_opening_amount(cls, v: Decimal) -> Decimal:
        """Reject NaN/infinity, which pass the ge=0 check on some inputs."""
        if not v.is_finite():
            raise ValueError("Opening amount must be a finite number")
        return v


class DisplaySettings(BaseSettings):
    """How amounts and dates are rendered for the user."""

    model_config = SettingsConfigDict(
        env_prefix="PETTY_CASH_DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    title: str = Field(
        default="PETTY CASH TRACKER",
        description="Heading shown at the top of the page"
    )
    subtitle: str = Field(
        default="AUTO SUZUKI BINAN",
        description="Branch or owner name shown under the heading"
    )
    currency_symbol: str = Field(
        default="₱",
        max_length=5,
        description="Symbol prefixed to every amount"
    )
    date_format: str = Field(
        default="%b %d, %Y",
        description="strftime pattern for ledger dates"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (shows the audit trail in the UI)"
    )


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def ledger(self) -> LedgerSettings:
        return LedgerSettings()

    @property
    def display(self) -> DisplaySettings:
        return DisplaySettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, object]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus "<name>_error"
    entries describing any failure. Useful for startup checks.
    """
    results: dict[str, object] = {}
    settings = get_settings()

    for name in ("ledger", "display", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
