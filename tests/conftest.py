"""Shared fixtures for the ledger tests."""

import os
from datetime import date

import pytest

from petty_cash.audit import AuditLogger
from petty_cash.config import LedgerSettings, get_settings
from petty_cash.ledger import LedgerStore


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch, tmp_path):
    """Keep developer environment variables and .env files out of the tests."""
    for key in list(os.environ):
        if key.startswith("PETTY_CASH_") or key in ("APP_ENVIRONMENT", "DEBUG_MODE"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def audit_logger():
    return AuditLogger()


@pytest.fixture
def store(audit_logger):
    """A fresh ledger with the default 10,000.00 opening balance."""
    return LedgerStore(
        opening_date=date(2026, 10, 1),
        settings=LedgerSettings(),
        audit_logger=audit_logger,
    )


@pytest.fixture
def scenario_store(store):
    """Opening balance, then a 500 cash sale, then a 200 lunch."""
    store.add_transaction(date(2026, 10, 2), "Cash sale", "Sales", "income", "500")
    store.add_transaction(date(2026, 10, 3), "Lunch", "Meals", "expense", "200")
    return store
