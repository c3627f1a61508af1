"""Tests for the audit trail kept alongside the ledger."""

import logging
from datetime import date
from uuid import uuid4

import pytest

from petty_cash.audit import AuditLogger, create_correlation_id
from petty_cash.ledger import TransactionValidationError
from petty_cash.models.audit import AuditEvent, AuditEventType, AuditSeverity


def _types(audit_logger):
    return [event.event_type for event in audit_logger.events]


class TestAuditLogger:
    """Tests for AuditLogger itself."""

    def test_log_appends_event(self):
        audit_logger = AuditLogger()
        event = AuditEvent(event_type=AuditEventType.TRANSACTION_ADDED, description="Lunch")
        assert audit_logger.log(event) is event
        assert audit_logger.events == (event,)

    def test_warning_events_logged_at_warning_level(self, caplog):
        audit_logger = AuditLogger()
        with caplog.at_level(logging.INFO, logger="petty_cash.audit"):
            audit_logger.log_removal_target_missing(uuid4())
            audit_logger.log_transaction_removed(uuid4(), "Lunch")
        assert [record.levelno for record in caplog.records] == [logging.WARNING, logging.INFO]
        assert audit_logger.events[0].severity is AuditSeverity.WARNING
        assert audit_logger.events[1].severity is AuditSeverity.INFO

    def test_correlation_ids_are_unique(self):
        assert create_correlation_id() != create_correlation_id()


class TestLedgerAuditTrail:
    """The ledger reports every mutation attempt to its audit logger."""

    def test_initialization_logged(self, store, audit_logger):
        assert _types(audit_logger) == [AuditEventType.LEDGER_INITIALIZED]
        event = audit_logger.events[0]
        assert event.entity_id == store.ledger_id
        assert event.details["opening_transaction_id"] == str(store.opening_entry.id)

    def test_add_logged_with_correlation(self, store, audit_logger):
        correlation_id = create_correlation_id()
        transaction = store.add_transaction(
            date(2026, 10, 2), "Cash sale", "Sales", "income", "500",
            correlation_id=correlation_id,
        )
        event = audit_logger.events[-1]
        assert event.event_type is AuditEventType.TRANSACTION_ADDED
        assert event.entity_id == transaction.id
        assert event.correlation_id == correlation_id
        assert event.details["amount"] == "500.00"

    def test_rejection_logged(self, store, audit_logger):
        with pytest.raises(TransactionValidationError):
            store.add_transaction(None, "", "Meals", "expense", "10")
        event = audit_logger.events[-1]
        assert event.event_type is AuditEventType.TRANSACTION_REJECTED
        assert event.details["issues"][0]["field"] == "description"

    def test_removals_logged(self, scenario_store, audit_logger):
        lunch = scenario_store.transactions[0]
        scenario_store.remove_transaction(lunch.id)
        scenario_store.remove_transaction(scenario_store.opening_entry.id)
        scenario_store.remove_transaction(uuid4())
        assert _types(audit_logger)[-3:] == [
            AuditEventType.TRANSACTION_REMOVED,
            AuditEventType.PROTECTED_REMOVAL_BLOCKED,
            AuditEventType.REMOVAL_TARGET_MISSING,
        ]
        assert audit_logger.events[-3].entity_id == lunch.id

    def test_store_exposes_its_logger(self, store, audit_logger):
        assert store.audit_logger is audit_logger

    def test_malformed_removal_id_logged(self, store, audit_logger):
        store.remove_transaction("not-a-uuid")
        event = audit_logger.events[-1]
        assert event.event_type is AuditEventType.REMOVAL_TARGET_MISSING
        assert event.entity_id is None
        assert event.details == {"requested_id": "not-a-uuid"}
