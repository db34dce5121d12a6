"""
Audit Models for the Household Domain Model

Guard rejections and notable state changes are recorded as audit events.
This provides:
1. A visible record of every silently reverted assignment
2. Debugging information when a family behaves unexpectedly
3. Something tests can assert on without parsing log output

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Person guards
    JOB_ASSIGNMENT_REJECTED = "job_assignment_rejected"
    SPOUSE_ASSIGNMENT_REJECTED = "spouse_assignment_rejected"

    # Job changes
    JOB_ALREADY_SALARIED = "job_already_salaried"
    JOB_CONVERTED_TO_SALARY = "job_converted_to_salary"

    # Family changes
    FAMILY_FORMED = "family_formed"
    CHILD_ADDED = "child_added"
    CHILD_REJECTED = "child_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
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

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'person', 'job', 'family')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
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
            "description": self.description,
            "details": self.details,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.job_assignment_rejected(person_id, age, 16, "Cook")
        event = AuditEventBuilder.family_formed(family_id, [id1, id2])
    """

    @staticmethod
    def job_assignment_rejected(
        person_id: UUID,
        age: int,
        min_age: int,
        job_title: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.JOB_ASSIGNMENT_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="person",
            entity_id=person_id,
            description="Person is too young to have a job.",
            details={
                "age": age,
                "min_working_age": min_age,
                "job_title": job_title,
            },
        )

    @staticmethod
    def spouse_assignment_rejected(
        person_id: UUID,
        age: int,
        min_age: int,
        spouse_id: UUID,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SPOUSE_ASSIGNMENT_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="person",
            entity_id=person_id,
            description="Person is too young to have a spouse.",
            details={
                "age": age,
                "min_marriage_age": min_age,
                "spouse_id": str(spouse_id),
            },
        )

    @staticmethod
    def job_already_salaried(
        job_title: str,
        salary: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.JOB_ALREADY_SALARIED,
            entity_type="job",
            description="Job is already a salary position.",
            details={
                "job_title": job_title,
                "salary": salary,
            },
        )

    @staticmethod
    def job_converted_to_salary(
        job_title: str,
        hourly_rate: float,
        salary: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.JOB_CONVERTED_TO_SALARY,
            entity_type="job",
            description=f"Job converted to salary: {job_title}",
            details={
                "job_title": job_title,
                "hourly_rate": hourly_rate,
                "salary": salary,
            },
        )

    @staticmethod
    def family_formed(
        family_id: UUID,
        spouse_ids: list[UUID],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.FAMILY_FORMED,
            entity_type="family",
            entity_id=family_id,
            description="Family formed from two spouses",
            details={
                "spouse_ids": [str(spouse_id) for spouse_id in spouse_ids],
            },
        )

    @staticmethod
    def child_added(
        family_id: UUID,
        child_id: UUID,
        member_count: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CHILD_ADDED,
            entity_type="family",
            entity_id=family_id,
            description=f"Child added, family now has {member_count} members",
            details={
                "child_id": str(child_id),
                "member_count": member_count,
            },
        )

    @staticmethod
    def child_rejected(
        family_id: UUID,
        child_id: UUID,
        min_parent_age: int,
        reason: str = "no_member_old_enough",
    ) -> AuditEvent:
        description = (
            "Person is already a family member"
            if reason == "already_member"
            else f"No family member is older than {min_parent_age}"
        )
        return AuditEvent(
            event_type=AuditEventType.CHILD_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="family",
            entity_id=family_id,
            description=description,
            details={
                "child_id": str(child_id),
                "min_parent_age": min_parent_age,
                "reason": reason,
            },
        )
