"""
Domain Errors

DESIGN DECISION: Broken invariants are raised as exceptions, never
turned into process exits. Callers (and tests) can catch and inspect them.

Age-gate rejections are NOT errors. They are audited and the
assignment is reset to absent.
"""

from typing import Any


class HouseholdError(Exception):
    """Base exception for household domain errors."""
    pass


class UnsupportedCurrencyError(HouseholdError):
    """Currency code is not one of the supported currencies."""

    def __init__(self, currency: Any, message: str):
        self.currency = currency
        super().__init__(message)


class FamilyError(HouseholdError):
    """A family could not be formed or changed."""
    pass


class AlreadyMarriedError(FamilyError):
    """A person who already has a spouse cannot found a new family."""

    def __init__(self, person: Any, message: str):
        self.person = person
        super().__init__(message)
