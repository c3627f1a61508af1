"""
Audit Logger

DESIGN DECISION: Every ledger mutation, and every refused mutation,
is logged. This provides:
1. Traceability within a session
2. Debugging capability when a balance looks wrong
3. A history the UI can show next to the ledger

The audit logger:
- Is synchronous, like the ledger it observes
- Keeps an append-only in-memory trail for the current session
- Supports correlation IDs to trace related events
"""

from typing import Any, Optional
from uuid import UUID, uuid4

import structlog

from petty_cash.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory trail (for display in the current session)
    """

    def __init__(self):
        self._events: list[AuditEvent] = []
        self._logger = structlog.get_logger("petty_cash.audit")

    @property
    def events(self) -> tuple[AuditEvent, ...]:
        """Recorded events, oldest first."""
        return tuple(self._events)

    def log(self, event: AuditEvent) -> AuditEvent:
        """Log an audit event and append it to the trail."""
        log_dict = event.to_log_dict()

        if event.severity is AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._events.append(event)
        return event

    def log_ledger_initialized(self, ledger_id, opening_id, opening_amount) -> None:
        self.log(AuditEventBuilder.ledger_initialized(
            ledger_id=ledger_id,
            opening_id=opening_id,
            opening_amount=opening_amount,
        ))

    def log_transaction_added(
        self,
        transaction_id: UUID,
        description: str,
        transaction_type: str,
        amount: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a successful entry."""
        self.log(AuditEventBuilder.transaction_added(
            transaction_id=transaction_id,
            description=description,
            transaction_type=transaction_type,
            amount=amount,
            correlation_id=correlation_id,
        ))

    def log_transaction_rejected(
        self,
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an entry refused by validation."""
        self.log(AuditEventBuilder.transaction_rejected(
            issues=issues,
            correlation_id=correlation_id,
        ))

    def log_transaction_removed(
        self,
        transaction_id: UUID,
        description: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.transaction_removed(
            transaction_id=transaction_id,
            description=description,
            correlation_id=correlation_id,
        ))

    def log_protected_removal_blocked(
        self,
        transaction_id: UUID,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.protected_removal_blocked(
            transaction_id=transaction_id,
            correlation_id=correlation_id,
        ))

    def log_removal_target_missing(
        self,
        transaction_id: Optional[UUID],
        requested_id: Any = None,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.removal_target_missing(
            transaction_id=transaction_id,
            requested_id=requested_id,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a user action (e.g., submitting the form)
    and pass it through all subsequent operations.
    """
    return uuid4()
