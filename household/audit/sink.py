"""
Audit Sink Interface

DESIGN DECISION: The audit logger writes to an abstract sink.
The domain model has no persistence layer, so the only implementation
is an in-memory one. It keeps the trail inspectable in tests and demos.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from household.audit.events import AuditEvent, AuditEventType


class AuditSink(ABC):
    """
    Abstract interface for audit event storage.

    Events are append-only.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event.

        Returns:
            True if appended successfully
        """
        pass

    @abstractmethod
    def get_events_by_entity(self, entity_id: UUID) -> list[AuditEvent]:
        """Get all events for an entity, oldest first."""
        pass

    @abstractmethod
    def get_recent_events(self, limit: int = 50) -> list[AuditEvent]:
        """Get the most recent events, newest first."""
        pass


class InMemoryAuditSink(AuditSink):
    """Keeps audit events in a list, in the order they were logged."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    @property
    def events(self) -> list[AuditEvent]:
        return list(self._events)

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_events_by_entity(self, entity_id: UUID) -> list[AuditEvent]:
        return [e for e in self._events if e.entity_id == entity_id]

    def get_recent_events(self, limit: int = 50) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]

    def events_of_type(
        self,
        event_type: AuditEventType,
        entity_id: Optional[UUID] = None,
    ) -> list[AuditEvent]:
        """Filter events by type and, optionally, by entity."""
        return [
            e for e in self._events
            if e.event_type == event_type
            and (entity_id is None or e.entity_id == entity_id)
        ]

    def clear(self) -> None:
        self._events.clear()
