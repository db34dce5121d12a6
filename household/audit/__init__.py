"""Audit logging package."""

from household.audit.events import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from household.audit.logger import (
    AuditLogger,
    configure_logging,
    get_audit_logger,
    set_audit_logger,
)
from household.audit.sink import AuditSink, InMemoryAuditSink

__all__ = [
    # Events
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
    # Logging
    "AuditLogger",
    "configure_logging",
    "get_audit_logger",
    "set_audit_logger",
    # Sinks
    "AuditSink",
    "InMemoryAuditSink",
]
