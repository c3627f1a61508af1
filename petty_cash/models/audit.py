"""
Audit Models for the Petty Cash Ledger

Every mutation of the ledger (and every refused mutation) is recorded.
This provides:
1. Traceability of who-did-what within a session
2. Debugging information when balances look wrong
3. A visible history of rejected entries and blocked deletions

DESIGN DECISION: The audit trail is append-only. Events are never
modified or deleted, even when the transaction they describe is.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Lifecycle
    LEDGER_INITIALIZED = "ledger_initialized"

    # Entry
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_REJECTED = "transaction_rejected"

    # Removal
    TRANSACTION_REMOVED = "transaction_removed"
    PROTECTED_REMOVAL_BLOCKED = "protected_removal_blocked"
    REMOVAL_TARGET_MISSING = "removal_target_missing"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    INFO = "info"
    WARNING = "warning"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    Every significant ledger action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which entry is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'ledger')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate events raised by one user action"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added(txn_id, "Lunch", "expense", "200.00")
        event = AuditEventBuilder.protected_removal_blocked(opening_id)
    """

    @staticmethod
    def ledger_initialized(
        ledger_id: UUID,
        opening_id: UUID,
        opening_amount: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_INITIALIZED,
            entity_type="ledger",
            entity_id=ledger_id,
            description=f"Ledger opened with balance {opening_amount:.2f}",
            details={
                "opening_transaction_id": str(opening_id),
                "opening_amount": f"{opening_amount:.2f}",
            },
        )

    @staticmethod
    def transaction_added(
        transaction_id: UUID,
        description: str,
        transaction_type: str,
        amount: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            entity_type="transaction",
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description=f"{transaction_type.title()} added: {description} - {amount}",
            details={
                "transaction_type": transaction_type,
                "amount": amount,
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_rejected(
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            correlation_id=correlation_id,
            description=f"Entry rejected with {len(issues)} issues",
            details={
                "issues": issues,
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_removed(
        transaction_id: UUID,
        description: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_REMOVED,
            entity_type="transaction",
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description=f"Transaction removed: {description}",
            is_user_action=True,
        )

    @staticmethod
    def protected_removal_blocked(
        transaction_id: UUID,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PROTECTED_REMOVAL_BLOCKED,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description="Attempt to remove the opening balance was refused",
            is_user_action=True,
        )

    @staticmethod
    def removal_target_missing(
        transaction_id: Optional[UUID],
        requested_id: Any = None,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        # transaction_id is None when the requested id is not a UUID at all
        return AuditEvent(
            event_type=AuditEventType.REMOVAL_TARGET_MISSING,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            entity_id=transaction_id,
            correlation_id=correlation_id,
            description="Removal ignored: no such transaction",
            details={
                "requested_id": str(
                    transaction_id if requested_id is None else requested_id
                ),
            },
            is_user_action=True,
        )
