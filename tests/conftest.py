"""Shared fixtures for the household test suite."""

import pytest

from household.audit import AuditLogger, InMemoryAuditSink, set_audit_logger
from household.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings around every test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def audit_sink():
    """Capture audit events from the process-wide audit logger."""
    sink = InMemoryAuditSink()
    set_audit_logger(AuditLogger(sink=sink))
    yield sink
    set_audit_logger(None)
