"""
Audit Logger

DESIGN DECISION: Every guard rejection and notable state change is logged.
This provides:
1. Traceability of silently reverted assignments
2. Debugging capability
3. An inspectable trail for tests

The audit logger:
- Always logs locally through structlog
- Optionally appends to an AuditSink
- Never raises because a sink failed
"""

import logging
from typing import Optional
from uuid import UUID

import structlog

from household.audit.events import AuditEvent, AuditEventBuilder, AuditSeverity
from household.audit.sink import AuditSink
from household.config import get_settings


def configure_logging() -> None:
    """Configure structlog for local logging, per LoggingSettings."""
    log_settings = get_settings().logging

    logging.basicConfig(format="%(message)s", level=log_settings.level)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_settings.json_output
        else structlog.dev.ConsoleRenderer()
    )

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
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An audit sink (for inspection), when one is configured
    """

    def __init__(
        self,
        sink: Optional[AuditSink] = None,
    ):
        """
        Initialize audit logger.

        Args:
            sink: Where events are appended.
                  If None, only logs locally.
        """
        self._sink = sink
        self._logger = structlog.get_logger("household.audit")

    @property
    def sink(self) -> Optional[AuditSink]:
        return self._sink

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Appends to the sink if available.

        Returns True if the sink write succeeded (or no sink configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._sink is not None:
            try:
                return self._sink.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_sink_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_job_rejected(
        self,
        person_id: UUID,
        age: int,
        min_age: int,
        job_title: str,
    ) -> None:
        """Log a job assignment rejected by the working-age gate."""
        self.log(AuditEventBuilder.job_assignment_rejected(
            person_id=person_id,
            age=age,
            min_age=min_age,
            job_title=job_title,
        ))

    def log_spouse_rejected(
        self,
        person_id: UUID,
        age: int,
        min_age: int,
        spouse_id: UUID,
    ) -> None:
        """Log a spouse assignment rejected by the marriage-age gate."""
        self.log(AuditEventBuilder.spouse_assignment_rejected(
            person_id=person_id,
            age=age,
            min_age=min_age,
            spouse_id=spouse_id,
        ))

    def log_already_salaried(self, job_title: str, salary: int) -> None:
        """Log a salary conversion that had nothing to do."""
        self.log(AuditEventBuilder.job_already_salaried(
            job_title=job_title,
            salary=salary,
        ))

    def log_converted_to_salary(
        self,
        job_title: str,
        hourly_rate: float,
        salary: int,
    ) -> None:
        """Log an hourly job turned into a salaried one."""
        self.log(AuditEventBuilder.job_converted_to_salary(
            job_title=job_title,
            hourly_rate=hourly_rate,
            salary=salary,
        ))

    def log_family_formed(self, family_id: UUID, spouse_ids: list[UUID]) -> None:
        """Log family creation."""
        self.log(AuditEventBuilder.family_formed(
            family_id=family_id,
            spouse_ids=spouse_ids,
        ))

    def log_child_added(
        self,
        family_id: UUID,
        child_id: UUID,
        member_count: int,
    ) -> None:
        """Log a child joining a family."""
        self.log(AuditEventBuilder.child_added(
            family_id=family_id,
            child_id=child_id,
            member_count=member_count,
        ))

    def log_child_rejected(
        self,
        family_id: UUID,
        child_id: UUID,
        min_parent_age: int,
        reason: str = "no_member_old_enough",
    ) -> None:
        """Log a child refused by the family."""
        self.log(AuditEventBuilder.child_rejected(
            family_id=family_id,
            child_id=child_id,
            min_parent_age=min_parent_age,
            reason=reason,
        ))


_audit_logger: Optional[AuditLogger] = None


def get_audit_logger() -> AuditLogger:
    """
    Get the process-wide audit logger.

    Created on first use without a sink (local logging only).
    """
    global _audit_logger
    if _audit_logger is None:
        _audit_logger = AuditLogger()
    return _audit_logger


def set_audit_logger(audit_logger: Optional[AuditLogger]) -> None:
    """
    Replace the process-wide audit logger.

    Pass None to fall back to a fresh sink-less logger on next use.
    """
    global _audit_logger
    _audit_logger = audit_logger
